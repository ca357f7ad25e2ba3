from dataclasses import dataclass

from lox.error.error import CompilerError, CompilerException
from lox.token import Token
from lox.type import Type


class ParserException(CompilerException):
    pass


@dataclass
class ParseError(CompilerError):
    token: Token
    reason: str

    @property
    def line(self) -> int:
        return self.token.line

    @property
    def where(self) -> str:
        if self.token.type == Type.EOF:
            return " at end"
        return f" at '{self.token.lexeme}'"

    @property
    def message(self) -> str:
        return self.reason

    def create_error(self, after=""):
        if not after:
            after = f"Got {self.token.type} on line [{self.line}]."
        return super().create_error(after, class_name="SyntaxError")
