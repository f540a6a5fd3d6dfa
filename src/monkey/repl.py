"""Read-Eval-Print-Loop that prints the tokens of each line it reads."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from monkey.errors import InvalidASCIIError
from monkey.lexer import Lexer
from monkey.token import Token

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ReplConfig:
    prompt: str = "> "


def format_token(token: Token) -> str:
    return f"{{Type:{token.kind.value} Literal:{token.literal}}}"


def start(in_stream: BinaryIO, out_stream: TextIO, config: ReplConfig | None = None) -> None:
    """Run the REPL until ``in_stream`` is exhausted.

    Lines are read as raw bytes so invalid input is reported byte for byte.
    """
    config = config or ReplConfig()
    while True:
        out_stream.write(config.prompt)
        out_stream.flush()
        line = in_stream.readline()
        if not line:
            return
        line = line.rstrip(b"\r\n")
        logger.debug("scanning line %r", line)
        try:
            print_all_tokens(line, out_stream)
        except InvalidASCIIError as exc:
            logger.warning("rejected line at byte %d", exc.position)
            print(exc, file=out_stream)


def print_all_tokens(source: str | bytes, out_stream: TextIO) -> None:
    for token in Lexer(source):
        print(format_token(token), file=out_stream)
