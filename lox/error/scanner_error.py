from lox.error.error import CompilerError, CompilerException


class ScannerException(CompilerException):
    pass


class ScannerError(CompilerError):
    def create_error(self, after=""):
        return super().create_error(after, class_name="ScannerError")


class UnexpectedCharacterError(ScannerError):
    @property
    def message(self) -> str:
        return f"Unexpected character: {self.error_chars!r}"


class UnterminatedStringError(ScannerError):
    @property
    def message(self) -> str:
        return "Unterminated string."

    def create_error(self, after=""):
        return super().create_error(
            f"The string starting on {self.span.lines_str} column {self.span.start_col} was never closed."
        )
