from monkey.ast import Identifier, LetStatement, Program
from monkey.token import Token, TokenKind


def _let(name: str) -> LetStatement:
    return LetStatement(
        token=Token(TokenKind.LET, "let"),
        name=Identifier(token=Token(TokenKind.IDENT, name), value=name),
        value=Identifier(token=Token(TokenKind.IDENT, "y"), value="y"),
    )


def test_program_token_literal_is_first_statement_literal():
    program = Program(statements=[_let("x"), _let("z")])
    assert program.token_literal() == "let"


def test_empty_program_has_empty_token_literal():
    assert Program().token_literal() == ""


def test_identifier_token_literal():
    ident = Identifier(token=Token(TokenKind.IDENT, "foo"), value="foo")
    assert ident.token_literal() == "foo"
    assert _let("x").name.token_literal() == "x"
