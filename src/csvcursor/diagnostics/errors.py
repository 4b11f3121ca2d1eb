"""csvcursor exception hierarchy with structured diagnostics.

All exceptions may carry a Diagnostic object for rich error information.
I/O errors raised by a character source are never wrapped: they reach the
caller unchanged.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class CSVCursorError(Exception):
    """Base exception for all csvcursor errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CSVCursorError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnsupportedOperationError(CSVCursorError):
    """Operation incompatible with one-character lookahead.

    Raised by skip(), mark(), reset() and mark_supported() before any reader
    state changes. This is a programming-contract violation, not a transient
    condition: retrying cannot succeed.

    Attributes:
        operation: Name of the refused operation
    """

    def __init__(self, message: str | Diagnostic, *, operation: str = "") -> None:
        """Initialize UnsupportedOperationError.

        Args:
            message: Error message string OR Diagnostic object
            operation: Name of the refused operation; taken from the
                diagnostic when not given
        """
        super().__init__(message)
        if not operation and isinstance(message, Diagnostic) and message.operation:
            operation = message.operation
        self.operation = operation


class BlockArgumentError(CSVCursorError, ValueError):
    """Invalid offset or length passed to read_block().

    Also a ValueError. Raised before any I/O.
    """
