from monkey.errors import InvalidASCIIError, LexerError, LexerProtocolError, MonkeyError
from monkey.lexer import Lexer, lex
from monkey.token import Token, TokenKind, lookup_ident

__all__ = [
    "InvalidASCIIError",
    "Lexer",
    "LexerError",
    "LexerProtocolError",
    "MonkeyError",
    "Token",
    "TokenKind",
    "lex",
    "lookup_ident",
]
