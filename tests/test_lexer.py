import pytest

from toycc.lexer import Lexer, tokenize
from toycc.tokens import Token, TokenType


def test_sample_statement():
    assert tokenize("int x = 42 + y;") == [
        Token(TokenType.IDENTIFIER, "int"),
        Token(TokenType.IDENTIFIER, "x"),
        Token(TokenType.ASSIGN, "="),
        Token(TokenType.NUMBER, "42"),
        Token(TokenType.PLUS, "+"),
        Token(TokenType.IDENTIFIER, "y"),
        Token(TokenType.SEMICOLON, ";"),
    ]


@pytest.mark.parametrize(
    "text, kind",
    [
        ("=", TokenType.ASSIGN),
        ("+", TokenType.PLUS),
        ("-", TokenType.MINUS),
        ("*", TokenType.MULTIPLY),
        ("/", TokenType.DIVIDE),
        (";", TokenType.SEMICOLON),
        ("(", TokenType.LPAREN),
        (")", TokenType.RPAREN),
        ("@", TokenType.UNKNOWN),
    ],
)
def test_single_characters(text, kind):
    assert tokenize(text) == [Token(kind, text)]


def test_end_of_file_repeats():
    lexer = Lexer("   \n\t ")
    assert lexer.next_token() == Token(TokenType.END_OF_FILE, "")
    assert lexer.next_token() == Token(TokenType.END_OF_FILE, "")


def test_underscore_identifier():
    assert tokenize("_a1_b") == [Token(TokenType.IDENTIFIER, "_a1_b")]


def test_number_followed_by_identifier():
    assert tokenize("12ab") == [
        Token(TokenType.NUMBER, "12"),
        Token(TokenType.IDENTIFIER, "ab"),
    ]


def test_decimal_point_is_unknown():
    assert tokenize("3.5") == [
        Token(TokenType.NUMBER, "3"),
        Token(TokenType.UNKNOWN, "."),
        Token(TokenType.NUMBER, "5"),
    ]


def test_iteration_stops_before_end_of_file():
    tokens = list(Lexer("a"))
    assert tokens == [Token(TokenType.IDENTIFIER, "a")]


def test_values_reassemble_source_without_whitespace():
    source = "total = (a + b2) * c_d / 7 - 10 ; ?"
    joined = "".join(token.value for token in tokenize(source))
    assert joined == "".join(source.split())