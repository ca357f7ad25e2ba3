from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Iterator, Tuple

from lox.token import Token
from lox.util import Span


@dataclass(frozen=True)
class Node:
    span: Span = field(repr=False, kw_only=True, compare=False, default=None)

    def __str__(self) -> str:
        from lox.tree.printer import AstPrinter

        printer = AstPrinter()
        return printer.print(self)

    def __contains__(self, element: Node) -> bool:
        if self == element:
            return True
        return any(
            isinstance(child, Node) and element in child
            for field_name, child in self.iter_fields()
        )

    def accept(self, visitor) -> Any:
        return visitor.visit(self)

    def iter_fields(self) -> Iterator[Tuple[str, Node | Token | Any]]:
        for _field in fields(self):
            if _field.name == "span":
                continue
            yield _field.name, getattr(self, _field.name)


@dataclass(frozen=True)
class UnaryNode(Node):
    operator: Token
    operand: Node


@dataclass(frozen=True)
class BinaryNode(Node):
    left: Node
    operator: Token
    right: Node


@dataclass(frozen=True)
class GroupingNode(Node):
    expression: Node


@dataclass(frozen=True)
class LiteralNode(Node):
    # None represents `null`
    value: bool | float | str | None

    # `true` must not equal `1`, even though True == 1.0 in Python
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LiteralNode):
            return NotImplemented
        return (type(self.value), self.value) == (type(other.value), other.value)
