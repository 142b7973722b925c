"""Lexer for simple assignment statements such as ``int x = 42 + y;``."""

from __future__ import annotations

import string
from collections.abc import Iterator

from toycc.tokens import Token, TokenType

_WHITESPACE = frozenset(" \t\n\r\v\f")
_DIGITS = frozenset(string.digits)
_IDENT_START = frozenset(string.ascii_letters + "_")
_IDENT_CHARS = _IDENT_START | _DIGITS

_SINGLE_CHAR = {
    "=": TokenType.ASSIGN,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
}


class Lexer:
    """Splits a source string into :class:`Token` objects."""

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def _take_while(self, allowed: frozenset[str]) -> str:
        start = self.pos
        while self.pos < len(self.source) and self.source[self.pos] in allowed:
            self.pos += 1
        return self.source[start:self.pos]

    def next_token(self) -> Token:
        """Return the next token; END_OF_FILE once the source is used up."""
        self._take_while(_WHITESPACE)
        if self.pos >= len(self.source):
            return Token(TokenType.END_OF_FILE, "")

        current = self.source[self.pos]
        if current in _DIGITS:
            return Token(TokenType.NUMBER, self._take_while(_DIGITS))
        if current in _IDENT_START:
            return Token(TokenType.IDENTIFIER, self._take_while(_IDENT_CHARS))

        self.pos += 1
        return Token(_SINGLE_CHAR.get(current, TokenType.UNKNOWN), current)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, END_OF_FILE."""
        while (token := self.next_token()).type is not TokenType.END_OF_FILE:
            yield token


def tokenize(source: str) -> list[Token]:
    """Return every token of ``source`` except the final END_OF_FILE."""
    return list(Lexer(source))