"""Lexer for the expression language: ``def``, ``extern``, numbers and names."""

from __future__ import annotations

import io
import re
import string
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TextIO, Union


class Tok(Enum):
    """Token kinds other than single characters."""

    EOF = -1
    DEF = -2
    EXTERN = -3
    IDENTIFIER = -4
    NUMBER = -5


@dataclass(frozen=True)
class Token:
    """A token.

    ``kind`` is a :class:`Tok` or, for any other character, that character.
    ``value`` holds the name of an identifier or the value of a number.
    """

    kind: Union[Tok, str]
    value: Union[str, float, None] = None


_WHITESPACE = frozenset(" \t\n\r\v\f")
_LETTERS = frozenset(string.ascii_letters)
_ALNUM = _LETTERS | frozenset(string.digits)
_NUMBER_CHARS = frozenset(string.digits + ".")
_NUMBER_PREFIX = re.compile(r"[0-9]*(?:\.[0-9]*)?")
_KEYWORDS = {"def": Tok.DEF, "extern": Tok.EXTERN}


def _to_number(text: str) -> float:
    """Read the longest leading decimal number; 0.0 if there is none."""
    prefix = _NUMBER_PREFIX.match(text).group()
    if not any(ch.isdigit() for ch in prefix):
        return 0.0
    return float(prefix)


class Lexer:
    """Reads tokens one character at a time from a text stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._last = " "

    def _read(self) -> str:
        self._last = self._stream.read(1)
        return self._last

    def _take_while(self, allowed: frozenset[str]) -> str:
        chars = [self._last]
        while self._read() in allowed:
            chars.append(self._last)
        return "".join(chars)

    def next_token(self) -> Token:
        """Return the next token; Tok.EOF at the end of the stream."""
        while True:
            while self._last in _WHITESPACE:
                self._read()

            if self._last in _LETTERS:
                name = self._take_while(_ALNUM)
                keyword = _KEYWORDS.get(name)
                if keyword is not None:
                    return Token(keyword)
                return Token(Tok.IDENTIFIER, name)

            if self._last in _NUMBER_CHARS:
                return Token(Tok.NUMBER, _to_number(self._take_while(_NUMBER_CHARS)))

            if self._last == "#":
                while self._read() not in ("", "\n", "\r"):
                    pass
                if self._last:
                    continue

            if not self._last:
                return Token(Tok.EOF)

            char = self._last
            self._read()
            return Token(char)

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to, but not including, Tok.EOF."""
        while (token := self.next_token()).kind is not Tok.EOF:
            yield token


def tokenize(text: str) -> list[Token]:
    """Return every token of ``text`` except the final EOF."""
    return list(Lexer(io.StringIO(text)))