"""Parser that turns outline text into Python values."""

from __future__ import annotations

import enum
import re
from typing import Dict, List, Optional, Union

from .lexer import Lexer, Token, TokenKind
from .value import Reference, Value

_INTEGER = re.compile(r"[+-]?[0-9]+")
_FLOAT = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_BOOLEANS = {"true": True, "false": False}
_WHITESPACE = frozenset(
    {TokenKind.SPACING, TokenKind.TAB_SPACING, TokenKind.NEW_LINE}
)


class ErrorKind(enum.Enum):
    LEXER = enum.auto()
    INVALID_TOKEN = enum.auto()
    INVALID_INTEGER = enum.auto()
    INVALID_BOOLEAN = enum.auto()
    INVALID_NUMBER = enum.auto()
    DOUBLE_SEPARATORS = enum.auto()
    NONE = enum.auto()


class ParseError(ValueError):
    """Raised when the text cannot be parsed; :attr:`kind` tells why."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.name.lower().replace("_", " "))
        self.kind = kind


def _starts_value(token: Token) -> bool:
    return token.is_value(True) or token.kind in (
        TokenKind.START_MAPPING,
        TokenKind.START_ARRAY,
    )


def _integer(token: Token) -> int:
    if _INTEGER.fullmatch(token.data):
        number = int(token.data)
        if _INT64_MIN <= number <= _INT64_MAX:
            return number
    raise ParseError(ErrorKind.INVALID_INTEGER)


def _float(token: Token) -> float:
    if not _FLOAT.fullmatch(token.data):
        raise ParseError(ErrorKind.INVALID_NUMBER)
    return float(token.data)


def _boolean(token: Token) -> bool:
    try:
        return _BOOLEANS[token.data]
    except KeyError:
        raise ParseError(ErrorKind.INVALID_BOOLEAN) from None


class Parser:
    """Builds a value from the tokens of a :class:`Lexer`."""

    def __init__(self, source: Union[str, Lexer]) -> None:
        self._lexer = Lexer(source) if isinstance(source, str) else source

    @classmethod
    def from_lexer(cls, lexer: Lexer) -> "Parser":
        return cls(lexer)

    def to_value(self) -> Value:
        """Parse the remaining tokens; the last top-level value wins."""
        if self._lexer.is_error:
            raise ParseError(ErrorKind.LEXER)
        return self._value(None)

    def _value(self, first: Optional[Token]) -> Value:
        found = False
        item: Value = None

        if first is not None:
            found, item = self._handle(first)
            if found:
                return item

        for token in self._lexer:
            has_value, value = self._handle(token)
            if has_value:
                found, item = True, value

        if not found:
            raise ParseError(ErrorKind.NONE)
        return item

    def _handle(self, token: Token) -> tuple[bool, Value]:
        kind = token.kind
        if kind in _WHITESPACE:
            return False, None
        if kind is TokenKind.START_MAPPING:
            return True, self._mapping()
        if kind is TokenKind.START_ARRAY:
            return True, self._array()
        if kind is TokenKind.STRING:
            return True, token.data.strip('"')
        if kind is TokenKind.INTEGER:
            return True, _integer(token)
        if kind is TokenKind.BOOLEAN:
            return True, _boolean(token)
        if kind is TokenKind.FLOAT:
            return True, _float(token)
        if kind is TokenKind.REFERENCE:
            return True, Reference(token.data)
        raise ParseError(ErrorKind.INVALID_TOKEN)

    def _array(self) -> List[Value]:
        items: List[Value] = []
        separated = False
        while True:
            token = next(self._lexer, None)
            if token is None:
                raise ParseError(ErrorKind.INVALID_TOKEN)
            if token.kind is TokenKind.SEPARATOR:
                if separated:
                    raise ParseError(ErrorKind.DOUBLE_SEPARATORS)
                separated = True
            elif _starts_value(token):
                items.append(self._value(token))
                separated = False
            elif token.kind is TokenKind.END_ARRAY:
                return items
            elif token.is_whitespace():
                continue
            else:
                raise ParseError(ErrorKind.INVALID_TOKEN)

    def _mapping(self) -> Dict[str, Value]:
        mapping: Dict[str, Value] = {}
        key: Optional[str] = None
        after_colon = False
        while True:
            token = next(self._lexer, None)
            if token is None:
                raise ParseError(ErrorKind.INVALID_TOKEN)
            if token.kind is TokenKind.STRING:
                key = token.data.strip('"')
            elif token.kind is TokenKind.KEY_SEPARATOR and key is not None:
                after_colon = True
            elif after_colon and key is not None and _starts_value(token):
                mapping[key] = self._value(token)
            elif token.kind is TokenKind.SEPARATOR:
                after_colon = False
                key = None
            elif token.kind is TokenKind.END_MAPPING:
                return mapping
            elif token.is_whitespace():
                continue
            else:
                raise ParseError(ErrorKind.INVALID_TOKEN)


def parse(text: str) -> Value:
    """Parse outline text into a Python value."""
    return Parser(text).to_value()