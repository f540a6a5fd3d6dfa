import dataclasses

import pytest

from monkey.token import KEYWORDS, Token, TokenKind, classify, lookup_ident


@pytest.mark.parametrize(
    "text,kind",
    [
        ("fn", TokenKind.FUNCTION),
        ("let", TokenKind.LET),
        ("return", TokenKind.RETURN),
        ("if", TokenKind.IF),
        ("else", TokenKind.ELSE),
        ("true", TokenKind.TRUE),
        ("false", TokenKind.FALSE),
    ],
)
def test_keywords_map_to_their_own_kind(text, kind):
    assert lookup_ident(text) is kind


@pytest.mark.parametrize("text", ["x", "foobar", "Let", "fn_", "_", "returns", ""])
def test_other_text_is_an_identifier(text):
    assert lookup_ident(text) is TokenKind.IDENT


def test_classify_is_lookup_ident():
    assert classify is lookup_ident


def test_keyword_table_is_read_only():
    with pytest.raises(TypeError):
        KEYWORDS["var"] = TokenKind.LET  # type: ignore[index]


def test_token_is_immutable():
    token = Token(TokenKind.IDENT, "x")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.literal = "y"  # type: ignore[misc]


def test_token_defaults_to_empty_literal():
    assert Token(TokenKind.EOF).literal == ""


def test_kinds_compare_equal_to_their_values():
    assert TokenKind.EQUAL == "=="
    assert TokenKind.LET.value == "LET"
