"""Tokenizer for the outline text format."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterator

_DIGITS = "0123456789"
_NUMBER_CONTINUATION = "e-.0123456789"
_TRUE_WORD = "true"
_FALSE_WORD = "false"


def _is_snakecase(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch == "_"


@dataclass(frozen=True)
class Span:
    """A region of the source text, as a start offset and a length."""

    start: int
    length: int

    def as_range(self) -> range:
        return range(self.start, self.start + self.length)


def _span(start: int, end: int) -> Span:
    return Span(start=start, length=end - start)


class TokenKind(enum.Enum):
    START_MAPPING = enum.auto()
    END_MAPPING = enum.auto()
    START_ARRAY = enum.auto()
    END_ARRAY = enum.auto()
    SEPARATOR = enum.auto()
    KEY_SEPARATOR = enum.auto()
    SPACING = enum.auto()
    TAB_SPACING = enum.auto()
    NEW_LINE = enum.auto()
    STRING = enum.auto()
    INTEGER = enum.auto()
    BOOLEAN = enum.auto()
    FLOAT = enum.auto()
    REFERENCE = enum.auto()

    def is_value(self, include_reference: bool) -> bool:
        if self is TokenKind.REFERENCE:
            return include_reference
        return self in _SCALAR_KINDS

    def is_whitespace(self) -> bool:
        return self in _WHITESPACE_KINDS


_SCALAR_KINDS = frozenset(
    {TokenKind.STRING, TokenKind.INTEGER, TokenKind.BOOLEAN, TokenKind.FLOAT}
)
_WHITESPACE_KINDS = frozenset(
    {TokenKind.SPACING, TokenKind.TAB_SPACING, TokenKind.NEW_LINE}
)
_SINGLE_CHAR_KINDS = {
    "[": TokenKind.START_ARRAY,
    "]": TokenKind.END_ARRAY,
    "{": TokenKind.START_MAPPING,
    "}": TokenKind.END_MAPPING,
    ",": TokenKind.SEPARATOR,
    ":": TokenKind.KEY_SEPARATOR,
    " ": TokenKind.SPACING,
    "\t": TokenKind.TAB_SPACING,
    "\n": TokenKind.NEW_LINE,
}


@dataclass(frozen=True)
class Token:
    """A lexical unit together with its location and source text."""

    kind: TokenKind
    span: Span
    data: str

    def is_value(self, include_reference: bool) -> bool:
        return self.kind.is_value(include_reference)

    def is_whitespace(self) -> bool:
        return self.kind.is_whitespace()


class Lexer:
    """Iterator of tokens over a text.

    A malformed number (two decimal points) stops the iteration and sets
    :attr:`is_error`.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self.position = 0
        self.is_error = False
        self._index = 0
        self._reset_flags()

    def _reset_flags(self) -> None:
        self._in_string = False
        self._string_escaped = False
        self._in_float = False
        self._in_number = False
        self._in_ref = False

    def _peek(self) -> str | None:
        if self._index < len(self.text):
            return self.text[self._index]
        return None

    def _make(self, kind: TokenKind, span: Span) -> Token:
        self._reset_flags()
        r = span.as_range()
        return Token(kind=kind, span=span, data=self.text[r.start : r.stop])

    def _keyword(self, word: str) -> Token | None:
        span = _span(self.position, self.position + len(word))
        r = span.as_range()
        if self.text[r.start : r.stop] != word:
            return None
        self._index += len(word) - 1
        return self._make(TokenKind.BOOLEAN, span)

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self.is_error:
            raise StopIteration

        while self._index < len(self.text):
            idx = self._index
            ch = self.text[idx]
            self._index += 1
            found: Token | None = None
            end = idx

            if ch == "\\" and self._in_string:
                self._string_escaped = True
            elif ch == '"' and self._string_escaped:
                self._string_escaped = False
            elif ch == '"' and self._in_string:
                self._in_string = False
                found = self._make(TokenKind.STRING, _span(self.position, idx + 1))
            elif ch == '"':
                self._in_string = True
            elif self._in_string:
                continue
            elif ch == "." and self._in_float:
                self.is_error = True
                raise StopIteration
            elif ch == ".":
                self._in_float = True
            elif not self._in_ref and ch in _DIGITS:
                following = self._peek()
                if following is None or following not in _NUMBER_CONTINUATION:
                    kind = TokenKind.FLOAT if self._in_float else TokenKind.INTEGER
                    found = self._make(kind, _span(self.position, idx + 1))
                else:
                    self._in_number = True
            elif ch == "e" and not self._in_ref and self._in_number:
                self._in_float = True
            elif ch == "t" and not self._in_ref:
                found = self._keyword(_TRUE_WORD)
                end = self._index - 1
            elif ch == "f" and not self._in_ref:
                found = self._keyword(_FALSE_WORD)
                end = self._index - 1
            elif _is_snakecase(ch):
                following = self._peek()
                if following is None or not _is_snakecase(following):
                    found = self._make(
                        TokenKind.REFERENCE, _span(self.position, idx + 1)
                    )
                else:
                    self._in_ref = True
            elif ch in _SINGLE_CHAR_KINDS:
                found = self._make(
                    _SINGLE_CHAR_KINDS[ch], _span(self.position, idx + 1)
                )

            if found is not None:
                self.position = end + 1
                return found

        raise StopIteration