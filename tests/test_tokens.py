import dataclasses

import pytest

from toycc.tokens import Token, TokenType


def test_equal_tokens_compare_and_hash_equal():
    first = Token(TokenType.PLUS, "+")
    second = Token(TokenType.PLUS, "+")
    assert first == second
    assert len({first, second}) == 1


def test_tokens_differ_by_type():
    assert Token(TokenType.IDENTIFIER, "x") == Token(TokenType.IDENTIFIER, "x")
    assert Token(TokenType.IDENTIFIER, "x") != Token(TokenType.UNKNOWN, "x")
    assert len({Token(TokenType.IDENTIFIER, "x"), Token(TokenType.UNKNOWN, "x")}) == 2


def test_end_of_file_token_has_empty_value():
    assert Token(TokenType.END_OF_FILE).value == ""


def test_token_is_immutable():
    token = Token(TokenType.NUMBER, "1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.value = "2"
    assert token.value == "1"
    assert token == Token(TokenType.NUMBER, "1")