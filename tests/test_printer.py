import pytest

from lox import AstPrinter, Token, Type
from lox.error.error import PrinterException
from lox.tree.tree import BinaryNode, GroupingNode, LiteralNode, UnaryNode
from lox.tree.visitor import NodeVisitor


def test_print():
    tree = BinaryNode(
        UnaryNode(Token("-", Type.MINUS), LiteralNode(123.0)),
        Token("*", Type.STAR),
        GroupingNode(LiteralNode(45.67)),
    )
    assert AstPrinter().print(tree) == "(* (- 123.0) (group 45.67))"
    assert str(tree) == "(* (- 123.0) (group 45.67))"


def test_print_literals():
    printer = AstPrinter()
    assert printer.print(LiteralNode(None)) == "null"
    assert printer.print(LiteralNode(True)) == "true"
    assert printer.print(LiteralNode(False)) == "false"
    assert printer.print(LiteralNode(0.5)) == "0.5"
    assert printer.print(LiteralNode("text")) == "text"


class LiteralCounter(NodeVisitor):
    def __init__(self) -> None:
        self.count = 0

    def visit_LiteralNode(self, node: LiteralNode) -> None:
        self.count += 1


class Depth(NodeVisitor):
    def visit_UnaryNode(self, node: UnaryNode) -> int:
        return 1 + node.operand.accept(self)

    def visit_BinaryNode(self, node: BinaryNode) -> int:
        return 1 + max(node.left.accept(self), node.right.accept(self))

    def visit_GroupingNode(self, node: GroupingNode) -> int:
        return 1 + node.expression.accept(self)

    def visit_LiteralNode(self, node: LiteralNode) -> int:
        return 1


def test_visit_children():
    # Nodes without a `visit_` method are walked generically
    tree = BinaryNode(
        GroupingNode(LiteralNode(1.0)),
        Token("+", Type.PLUS),
        UnaryNode(Token("!", Type.BANG), LiteralNode(False)),
    )
    counter = LiteralCounter()
    tree.accept(counter)
    assert counter.count == 2


def test_visitor_result():
    tree = BinaryNode(
        GroupingNode(LiteralNode(1.0)),
        Token("+", Type.PLUS),
        UnaryNode(Token("-", Type.MINUS), UnaryNode(Token("-", Type.MINUS), LiteralNode(2.0))),
    )
    assert Depth().visit(tree) == 4


def test_print_too_deep():
    tree = LiteralNode(1.0)
    for _ in range(10000):
        tree = GroupingNode(tree)

    with pytest.raises(PrinterException) as excinfo:
        AstPrinter().print(tree)
    assert str(excinfo.value) == "Expression too deeply nested to print."

    with pytest.raises(PrinterException):
        str(tree)
