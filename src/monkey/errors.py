"""Error types raised while scanning Monkey source code."""

from __future__ import annotations


class MonkeyError(Exception):
    """Base error for all reportable Monkey errors."""

    def __init__(self, message: str, *, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause


class LexerError(MonkeyError):
    """Malformed source reported by the lexer."""


class InvalidASCIIError(LexerError):
    """The source contains a byte outside the 7-bit ASCII range.

    The lexer does not skip the offending byte, so asking for another token
    raises the same error again.
    """

    def __init__(self, byte: int, position: int):
        super().__init__(f"lexer: invalid ASCII character {_quote_byte(byte)} at byte {position}")
        self.byte = byte
        self.position = position


class LexerProtocolError(RuntimeError):
    """The lexer was used in violation of its calling protocol.

    Not a :class:`MonkeyError`: this signals a bug in the caller rather than bad
    input, and handlers for reportable errors must not catch it.
    """


def _quote_byte(byte: int) -> str:
    char = chr(byte)
    if char.isprintable():
        return repr(char)
    return f"'\\u{byte:04x}'"
