from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from monkey.token import Token


class Node(Protocol):
    def token_literal(self) -> str: ...


class Statement(Node, Protocol):
    pass


class Expression(Node, Protocol):
    pass


@dataclass(slots=True)
class Identifier:
    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal


@dataclass(slots=True)
class LetStatement:
    """``let <name> = <value>``"""

    token: Token
    name: Identifier
    value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal


@dataclass(slots=True)
class Program:
    statements: list[Statement] = field(default_factory=list)

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""
