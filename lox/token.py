from __future__ import annotations

from dataclasses import dataclass, field

from lox.type import Type
from lox.util import Span


@dataclass(frozen=True)
class Token:
    lexeme: str
    type: Type
    literal: object = None
    line: int = 1
    span: Span = field(repr=False, compare=False, default_factory=Span.default)

    def __str__(self) -> str:
        return self.lexeme
