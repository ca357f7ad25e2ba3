from lox.error.error import PrinterException
from lox.tree.visitor import NodeVisitor

from lox.tree.tree import (  # isort:skip
    BinaryNode,
    GroupingNode,
    LiteralNode,
    Node,
    UnaryNode,
)


class AstPrinter(NodeVisitor):
    """Render an expression tree in a parenthesised prefix notation.

    >>> str(tree)  # for `-123 * (45.67)`
    '(* (- 123.0) (group 45.67))'
    """

    def print(self, tree: Node) -> str:
        try:
            return tree.accept(self)
        except RecursionError:
            raise PrinterException("Expression too deeply nested to print.") from None

    def visit_UnaryNode(self, node: UnaryNode) -> str:
        return self.parenthesize(node.operator.lexeme, node.operand)

    def visit_BinaryNode(self, node: BinaryNode) -> str:
        return self.parenthesize(node.operator.lexeme, node.left, node.right)

    def visit_GroupingNode(self, node: GroupingNode) -> str:
        return self.parenthesize("group", node.expression)

    def visit_LiteralNode(self, node: LiteralNode) -> str:
        match node.value:
            case None:
                return "null"
            case bool():
                return "true" if node.value else "false"
        return str(node.value)

    def parenthesize(self, name: str, *nodes: Node) -> str:
        return "(" + " ".join([name, *(node.accept(self) for node in nodes)]) + ")"
