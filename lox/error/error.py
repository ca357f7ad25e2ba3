from dataclasses import dataclass

from lox.error.communicator import Communicator
from lox.util import Span


# Python exceptions to differentiate the stage in which errors are thrown
class CompilerException(Exception):
    pass


class PrinterException(CompilerException):
    pass


@dataclass
class CompilerError:
    program: str
    span: Span

    @property
    def line(self) -> int:
        return self.span.end_ln

    @property
    def where(self) -> str:
        return ""

    @property
    def message(self) -> str:
        raise NotImplementedError()

    def create_error(self, after: str = "", class_name="CompilerError"):
        return Communicator.create_message(
            self.program, self.span, class_name, self.message, after
        )

    # Give the characters that caused the error to be thrown.
    # Only "\n" ends a line, as in the Scanner
    @property
    def error_chars(self) -> str:
        lines = self.program.split("\n")
        if not 0 < self.span.start_ln <= len(lines):
            return ""
        return lines[self.span.start_ln - 1][self.span.start_col : self.span.end_col]

    def __str__(self) -> str:
        return f"[line {self.line}] Error{self.where}: {self.message}"
