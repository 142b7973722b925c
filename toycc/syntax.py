"""Syntax tree for the expression language."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NumberExpr:
    """A numeric literal such as ``1.0``."""

    value: float


@dataclass(frozen=True)
class VariableExpr:
    """A reference to a variable such as ``a``."""

    name: str


@dataclass(frozen=True)
class BinaryExpr:
    """A binary operator applied to two operands."""

    op: str
    lhs: Expr
    rhs: Expr


@dataclass(frozen=True)
class CallExpr:
    """A call of a function with argument expressions."""

    callee: str
    args: tuple[Expr, ...] = ()

    def __init__(self, callee: str, args: Sequence[Expr] = ()) -> None:
        object.__setattr__(self, "callee", callee)
        object.__setattr__(self, "args", tuple(args))


@dataclass(frozen=True)
class Prototype:
    """A function's name and the names of its arguments."""

    name: str
    args: tuple[str, ...] = ()

    def __init__(self, name: str, args: Sequence[str] = ()) -> None:
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "args", tuple(args))


@dataclass(frozen=True)
class Function:
    """A function definition: prototype and body."""

    proto: Prototype
    body: Expr


Expr = Union[NumberExpr, VariableExpr, BinaryExpr, CallExpr]