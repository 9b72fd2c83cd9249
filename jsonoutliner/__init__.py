"""Tokenizer and parser for JSON-like text with bare references."""

__version__ = "0.1.0"
__all__ = ["lexer", "parser", "value"]