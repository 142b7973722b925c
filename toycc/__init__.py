"""Toy compiler front end: a statement tokenizer, a Kaleidoscope lexer and parser, and a read-parse loop."""

__version__ = "0.1.0"
__all__ = ["__version__"]