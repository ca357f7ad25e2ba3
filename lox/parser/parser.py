from typing import List, Optional

from lox.error.communicator import ErrorRaiser
from lox.error.parser_error import ParseError
from lox.token import Token
from lox.type import Type
from lox.util import Span

from lox.tree.tree import (  # isort:skip
    BinaryNode,
    GroupingNode,
    LiteralNode,
    Node,
    UnaryNode,
)


class ParseFailure(Exception):
    """Unwinds the recursive descent back to `Parser.parse` after a syntax error.

    The error itself has already been added to the Parser's `ErrorRaiser`.
    """


# The binary operators of every precedence level, from loosest to tightest.
EQUALITY = (Type.BANG_EQUAL, Type.EQUAL_EQUAL)
COMPARISON = (Type.GREATER, Type.GREATER_EQUAL, Type.LESS, Type.LESS_EQUAL)
TERM = (Type.MINUS, Type.PLUS)
FACTOR = (Type.SLASH, Type.STAR)
UNARY = (Type.BANG, Type.MINUS)


class Parser:
    def __init__(self, program: str, errors: ErrorRaiser = None) -> None:
        self.og_program = program
        self.errors = errors if errors is not None else ErrorRaiser()

        self.tokens: List[Token] = []
        self.current = 0

    def parse(self, tokens: List[Token]) -> Optional[Node]:
        """Given a list of Tokens from the scanner, produce the Abstract Syntax Tree
        of the single expression they hold.

        The first syntax error stops the parse: it is added to `self.errors`, and
        None is returned. Nesting beyond the recursion limit is reported the
        same way.

        Args:
            tokens (List[Token]): A list of tokens, produced by `Scanner(program).scan()`

        Returns:
            Optional[Node]: The root of the AST, or None if the tokens do not form
                an expression.
        """
        self.tokens = list(tokens)
        self.current = 0
        # Lookahead relies on the final EOF token
        if not self.tokens or self.tokens[-1].type != Type.EOF:
            line = self.tokens[-1].line if self.tokens else 1
            self.tokens.append(Token("", Type.EOF, line=line))

        try:
            tree = self.expression()
            if not self.is_at_end():
                raise self.error(self.peek(), "Expect end of expression.")
            return tree
        except ParseFailure:
            return None
        except RecursionError:
            self.error(self.peek(), "Expression too deeply nested.")
            return None

    def expression(self) -> Node:
        return self.equality()

    def equality(self) -> Node:
        return self.binary(self.comparison, EQUALITY)

    def comparison(self) -> Node:
        return self.binary(self.term, COMPARISON)

    def term(self) -> Node:
        return self.binary(self.factor, TERM)

    def factor(self) -> Node:
        return self.binary(self.unary, FACTOR)

    def binary(self, operand, operators) -> Node:
        """Parse a left-associative chain of `operand`s separated by `operators`."""
        node = operand()
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            node = BinaryNode(node, operator, right, span=node.span & right.span)
        return node

    def unary(self) -> Node:
        if self.match(*UNARY):
            operator = self.previous()
            operand = self.unary()
            return UnaryNode(operator, operand, span=operator.span & operand.span)

        return self.primary()

    def primary(self) -> Node:
        if self.match(Type.FALSE):
            return LiteralNode(False, span=self.previous().span)
        if self.match(Type.TRUE):
            return LiteralNode(True, span=self.previous().span)
        if self.match(Type.NULL):
            return LiteralNode(None, span=self.previous().span)

        if self.match(Type.NUMBER, Type.STRING):
            return LiteralNode(self.previous().literal, span=self.previous().span)

        if self.match(Type.LEFT_PAREN):
            left = self.previous()
            expression = self.expression()
            right = self.consume(Type.RIGHT_PAREN, "Expect ')' after expression.")
            return GroupingNode(expression, span=left.span & right.span)

        raise self.error(self.peek(), "Expect expression.")

    def match(self, *types: Type) -> bool:
        if any(self.check(type) for type in types):
            self.advance()
            return True
        return False

    def check(self, type: Type) -> bool:
        if self.is_at_end():
            return False
        return self.peek().type == type

    def advance(self) -> Token:
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def consume(self, type: Type, message: str) -> Token:
        if self.check(type):
            return self.advance()

        raise self.error(self.peek(), message)

    def is_at_end(self) -> bool:
        return self.peek().type == Type.EOF

    def peek(self) -> Token:
        return self.tokens[self.current]

    def previous(self) -> Token:
        return self.tokens[max(self.current - 1, 0)]

    def error(self, token: Token, message: str) -> ParseFailure:
        span = token.span
        if span.start_ln < 1:
            span = Span(token.line, (0, 0))
        self.errors.add(ParseError(self.og_program, span, token, message))
        return ParseFailure()
