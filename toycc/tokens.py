"""Token types produced by the statement lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """Kinds of token recognised by :class:`toycc.lexer.Lexer`."""

    IDENTIFIER = auto()
    NUMBER = auto()
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    END_OF_FILE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class Token:
    """A token: its type and the source text it was read from."""

    type: TokenType
    value: str = ""