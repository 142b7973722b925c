"""Operator-precedence parser for the expression language."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional

from toycc.kaleido_lexer import Lexer, Tok, Token
from toycc.syntax import (
    BinaryExpr,
    CallExpr,
    Expr,
    Function,
    NumberExpr,
    Prototype,
    VariableExpr,
)

ANONYMOUS_NAME = "__anon_expr"


class ParseError(Exception):
    """Raised when the input does not match the grammar."""


def default_precedence() -> dict[str, int]:
    """Return the standard binary operators; a higher number binds tighter."""
    return {"<": 10, "+": 20, "-": 20, "*": 40}


class Parser:
    """Parses tokens from a lexer, one token of look-ahead in ``current``."""

    def __init__(self, lexer: Lexer, precedence: Optional[Mapping[str, int]] = None) -> None:
        self.lexer = lexer
        self.precedence = dict(default_precedence() if precedence is None else precedence)
        self.current: Token = lexer.next_token()

    def advance(self) -> Token:
        """Read the next token into ``current`` and return it."""
        self.current = self.lexer.next_token()
        return self.current

    def _at(self, char: str) -> bool:
        return self.current.kind == char

    def token_precedence(self) -> int:
        """Precedence of the pending binary operator, or -1 if it is not one."""
        kind = self.current.kind
        if not isinstance(kind, str) or not kind.isascii():
            return -1
        prec = self.precedence.get(kind, 0)
        return prec if prec > 0 else -1

    def _parse_number(self) -> NumberExpr:
        node = NumberExpr(self.current.value)
        self.advance()
        return node

    def _parse_paren(self) -> Expr:
        self.advance()
        expr = self.parse_expression()
        if not self._at(")"):
            raise ParseError("expected ')'")
        self.advance()
        return expr

    def _parse_identifier(self) -> Expr:
        name = self.current.value
        self.advance()
        if not self._at("("):
            return VariableExpr(name)

        self.advance()
        args: list[Expr] = []
        if not self._at(")"):
            while True:
                args.append(self.parse_expression())
                if self._at(")"):
                    break
                if not self._at(","):
                    raise ParseError("Expected ')' or ',' in argument list")
                self.advance()
        self.advance()
        return CallExpr(name, args)

    def parse_primary(self) -> Expr:
        """Parse an identifier, call, number or parenthesised expression."""
        kind = self.current.kind
        if kind is Tok.IDENTIFIER:
            return self._parse_identifier()
        if kind is Tok.NUMBER:
            return self._parse_number()
        if kind == "(":
            return self._parse_paren()
        raise ParseError("unknown token when expecting an expression")

    def _parse_binop_rhs(self, expr_prec: int, lhs: Expr) -> Expr:
        while True:
            tok_prec = self.token_precedence()
            if tok_prec < expr_prec:
                return lhs

            op = self.current.kind
            self.advance()
            rhs = self.parse_primary()

            if tok_prec < self.token_precedence():
                rhs = self._parse_binop_rhs(tok_prec + 1, rhs)

            lhs = BinaryExpr(op, lhs, rhs)

    def parse_expression(self) -> Expr:
        """Parse a primary expression followed by binary operators."""
        return self._parse_binop_rhs(0, self.parse_primary())

    def parse_prototype(self) -> Prototype:
        """Parse ``name(arg arg ...)``."""
        if self.current.kind is not Tok.IDENTIFIER:
            raise ParseError("Expected function name in prototype")
        name = self.current.value
        self.advance()

        if not self._at("("):
            raise ParseError("Expected '(' in prototype")

        args: list[str] = []
        while self.advance().kind is Tok.IDENTIFIER:
            args.append(self.current.value)
        if not self._at(")"):
            raise ParseError("Expected ')' in prototype")

        self.advance()
        return Prototype(name, args)

    def parse_definition(self) -> Function:
        """Parse ``def prototype expression``."""
        self.advance()
        proto = self.parse_prototype()
        return Function(proto, self.parse_expression())

    def parse_extern(self) -> Prototype:
        """Parse ``extern prototype``."""
        self.advance()
        return self.parse_prototype()

    def parse_top_level_expr(self) -> Function:
        """Wrap a bare expression in an anonymous function."""
        body = self.parse_expression()
        return Function(Prototype(ANONYMOUS_NAME), body)