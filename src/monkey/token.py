"""Token kinds and the keyword table for Monkey source code."""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class TokenKind(str, Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"
    INT = "INT"

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    SLASH = "/"
    ASTERISK = "*"
    BANG = "!"
    LESS = "<"
    GREATER = ">"
    EQUAL = "=="
    NOT_EQUAL = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"
    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    RETURN = "RETURN"
    IF = "IF"
    ELSE = "ELSE"
    TRUE = "TRUE"
    FALSE = "FALSE"


@dataclass(slots=True, frozen=True)
class Token:
    kind: TokenKind
    literal: str = ""


KEYWORDS = MappingProxyType(
    {
        "fn": TokenKind.FUNCTION,
        "let": TokenKind.LET,
        "return": TokenKind.RETURN,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
        "true": TokenKind.TRUE,
        "false": TokenKind.FALSE,
    }
)


def lookup_ident(text: str) -> TokenKind:
    """Return the keyword kind for ``text``, or ``IDENT`` if it is not reserved."""
    return KEYWORDS.get(text, TokenKind.IDENT)


classify = lookup_ident
