"""Diagnostic codes and data structures.

Defines error codes and the diagnostic record carried by csvcursor errors.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Contract errors (operations the reader refuses to perform)
        2000-2999: Argument errors (invalid read_block arguments)
    """

    # Contract errors (1000-1999)
    UNSUPPORTED_OPERATION = 1001

    # Argument errors (2000-2999)
    BLOCK_OFFSET_NEGATIVE = 2001
    BLOCK_LENGTH_NEGATIVE = 2002
    BLOCK_OUT_OF_BOUNDS = 2003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        operation: Reader operation that produced the diagnostic
        line: Reader line count when the diagnostic was produced
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    operation: str | None = None
    line: int | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic in the default (Rust compiler) style.

        Example output:
            error[UNSUPPORTED_OPERATION]: skip() is not supported by LookaheadLineReader
              --> line 3
              = operation: skip
              = help: Read characters with read() or read_block() instead

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
