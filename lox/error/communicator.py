from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Iterator, List, TextIO, Type

from lox.util import Colors, Span

if TYPE_CHECKING:
    from lox.error.error import CompilerError, CompilerException

# Only this many errors are rendered when raising, the remainder is summarised
MAX_SHOWN = 10


# Class used to create messages, which can be communicated to the programmer
class Communicator:

    # Creates an appropriate message string from the given arguments
    @staticmethod
    def create_message(
        program: str,
        span: Span,
        class_name="CompilerError",
        before: str = "",
        after: str = "",
        n_before: int = 1,
        n_after: int = 1,
        color=Colors.RED,
    ) -> str:
        # Only "\n" ends a line, as in the Scanner
        lines = program.split("\n")
        start_line_no = max(1, span.start_ln - n_before)
        error_lines = lines[start_line_no - 1 : span.end_ln + n_after]
        end_line_no = start_line_no + len(error_lines) - 1

        final_error_lines = []
        for i, line in enumerate(error_lines, start=start_line_no):
            # Align the line numbers, e.g. ' 9.' above '10.'
            padding = " " * (len(str(end_line_no)) - len(str(i)))
            if not span.start_ln <= i <= span.end_ln:
                final_error_lines.append(f"   {padding}{i}. {line}")
                continue

            # Only color the part of the line covered by the span
            start_col = span.start_col if i == span.start_ln else 0
            end_col = span.end_col if i == span.end_ln else len(line)
            final_error_lines.append(
                f"-> {padding}{i}. {line[:start_col]}"
                f"{color}{line[start_col:end_col]}{Colors.ENDC}"
                f"{line[end_col:]}"
            )

        message = class_name + ": " + before
        if final_error_lines:
            message += "\n" + "\n".join(final_error_lines)
        if after:
            message += "\n" + after
        return message


class ErrorRaiser:
    """Collects the diagnostics of a single scan and/or parse.

    One instance may be shared between the Scanner and the Parser, such that the
    caller can check `had_error` once both passes are done.
    """

    def __init__(self) -> None:
        self.errors: List[CompilerError] = []

    def add(self, error: CompilerError) -> CompilerError:
        self.errors.append(error)
        return error

    @property
    def had_error(self) -> bool:
        return bool(self.errors)

    def clear(self) -> None:
        self.errors.clear()

    def report(self, file: TextIO = None) -> None:
        """Print the one-line form of every collected error, in reporting order."""
        for error in self.errors:
            print(error, file=file or sys.stderr)

    def raise_all(self, stage_of_exception: Type[CompilerException]) -> None:
        """Raise `stage_of_exception` describing all collected errors, if there are any.

        The collected errors are cleared before raising.

        Args:
            stage_of_exception (Type[CompilerException]): The exception class for the
                stage that produced the errors, e.g. `ScannerException`.
        """
        if not self.errors:
            return

        errors = "".join(
            "\n\n" + error.create_error() for error in self.errors[:MAX_SHOWN]
        )
        if len(self.errors) > MAX_SHOWN:
            omitted = len(self.errors) - MAX_SHOWN
            errors += f"\n\nShowing {MAX_SHOWN} errors, omitting {omitted} error{'s' if omitted > 1 else ''}..."
        self.errors.clear()
        raise stage_of_exception(errors)

    def __iter__(self) -> Iterator[CompilerError]:
        return iter(self.errors)

    def __len__(self) -> int:
        return len(self.errors)
