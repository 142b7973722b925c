"""Interactive top level: reads definitions, externs and expressions."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable
from typing import Optional, TextIO, Union

from toycc.kaleido_lexer import Lexer, Tok
from toycc.kaleido_parser import ParseError, Parser
from toycc.syntax import Function, Prototype

PROMPT = "ready> "


def run(stream: TextIO, log: Optional[TextIO] = None) -> list[Union[Function, Prototype]]:
    """Parse everything from ``stream``, reporting progress to ``log``.

    Returns the definitions, externs and top-level expressions that parsed.
    After an error the offending token is skipped and parsing goes on.
    """
    out = sys.stderr if log is None else log
    results: list[Union[Function, Prototype]] = []

    out.write(PROMPT)
    parser = Parser(Lexer(stream))

    def handle(parse: Callable[[], Union[Function, Prototype]], message: str) -> None:
        try:
            item = parse()
        except ParseError as error:
            out.write(f"Error: {error}\n")
            parser.advance()
        else:
            results.append(item)
            out.write(message)

    while True:
        out.write(PROMPT)
        kind = parser.current.kind
        if kind is Tok.EOF:
            return results
        if kind == ";":
            parser.advance()
        elif kind is Tok.DEF:
            handle(parser.parse_definition, "Parsed a function definition.\n")
        elif kind is Tok.EXTERN:
            handle(parser.parse_extern, "Parsed an extern\n")
        else:
            handle(parser.parse_top_level_expr, "Parsed a top-level expr\n")


def main(argv: Optional[list[str]] = None) -> int:
    """Read the program from standard input and report on standard error."""
    argparse.ArgumentParser(
        prog="toycc",
        description="Parse definitions, externs and expressions from standard input.",
    ).parse_args(argv)
    run(sys.stdin)
    return 0