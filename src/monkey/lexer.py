"""Lexer for the Monkey language.

The lexer turns ASCII source code into :class:`~monkey.token.Token` values, one
per call to :meth:`Lexer.next_token`.
"""

from __future__ import annotations

import string
from collections.abc import Iterator

from monkey.errors import InvalidASCIIError, LexerProtocolError
from monkey.token import Token, TokenKind, lookup_ident

MAX_ASCII = 0x7F

WHITESPACE = frozenset("\t\n\v\f\r ")
DIGITS = frozenset(string.digits)
IDENT_START = frozenset(string.ascii_letters + "_")
IDENT_PART = IDENT_START | DIGITS

# Longest first, so that "==" wins over "=".
MULTI_CHAR_TOKENS = (
    ("==", TokenKind.EQUAL),
    ("!=", TokenKind.NOT_EQUAL),
)

SINGLE_CHAR_TOKENS = {
    "=": TokenKind.ASSIGN,
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "/": TokenKind.SLASH,
    "*": TokenKind.ASTERISK,
    "!": TokenKind.BANG,
    "<": TokenKind.LESS,
    ">": TokenKind.GREATER,
    ",": TokenKind.COMMA,
    ";": TokenKind.SEMICOLON,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}


class Lexer:
    """Single-pass lexer over a complete Monkey source buffer.

    ``source`` may be ``str`` or ``bytes``. Text is encoded as UTF-8 first and the
    buffer is scanned one byte at a time, so errors always carry a real byte
    value and its byte offset.

    Call :meth:`next_token` until it returns an ``EOF`` token. Calling it again
    after that raises :class:`~monkey.errors.LexerProtocolError`.
    """

    def __init__(self, source: str | bytes):
        if isinstance(source, str):
            source = source.encode("utf-8")
        # latin-1 maps every byte to the code point of the same value.
        source = bytes(source).decode("latin-1")
        self._source = source
        self._position = 0
        self._eof_returned = False

    @property
    def position(self) -> int:
        return self._position

    def next_token(self) -> Token:
        """Return the next token from the source.

        Raises :class:`~monkey.errors.InvalidASCIIError` if the next character
        is not ASCII, leaving the lexer positioned on it.
        """
        if self._eof_returned:
            raise LexerProtocolError("lexer: next_token called after EOF returned")

        self._skip_whitespace()
        if self._position == len(self._source):
            self._eof_returned = True
            return Token(TokenKind.EOF)

        char = self._source[self._position]
        if ord(char) > MAX_ASCII:
            raise InvalidASCIIError(ord(char), self._position)

        for text, kind in MULTI_CHAR_TOKENS:
            if self._source.startswith(text, self._position):
                self._position += len(text)
                return Token(kind, text)

        kind = SINGLE_CHAR_TOKENS.get(char)
        if kind is not None:
            self._position += 1
            return Token(kind, char)

        if char in DIGITS:
            return Token(TokenKind.INT, self._read_while(DIGITS))

        if char in IDENT_START:
            ident = self._read_while(IDENT_PART)
            return Token(lookup_ident(ident), ident)

        self._position += 1
        return Token(TokenKind.ILLEGAL, char)

    def __iter__(self) -> Iterator[Token]:
        while not self._eof_returned:
            yield self.next_token()

    def _skip_whitespace(self) -> None:
        self._read_while(WHITESPACE)

    def _read_while(self, chars: frozenset[str]) -> str:
        start = self._position
        while self._position < len(self._source) and self._source[self._position] in chars:
            self._position += 1
        return self._source[start : self._position]


def lex(source: str | bytes) -> list[Token]:
    """Return every token in ``source``, ending with the ``EOF`` token."""
    return list(Lexer(source))
