"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Callers build a Diagnostic through a template and raise with it.
    """

    _READER = "LookaheadLineReader"

    # =========================================================================
    # CONTRACT ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def unsupported_operation(operation: str, line: int | None = None) -> Diagnostic:
        """Operation refused because lookahead state cannot honor it.

        Args:
            operation: Name of the refused method (skip, mark, reset, ...)
            line: Reader line count at the time of the call

        Returns:
            Diagnostic for UNSUPPORTED_OPERATION
        """
        msg = f"{operation}() is not supported by {ErrorTemplate._READER}"
        return Diagnostic(
            code=DiagnosticCode.UNSUPPORTED_OPERATION,
            message=msg,
            hint=(
                "The reader keeps one character of lookahead and cannot skip "
                "or rewind; consume input with read(), read_block() or read_line()"
            ),
            operation=operation,
            line=line,
        )

    # =========================================================================
    # ARGUMENT ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def block_offset_negative(offset: int) -> Diagnostic:
        """read_block() called with a negative offset.

        Args:
            offset: The rejected offset

        Returns:
            Diagnostic for BLOCK_OFFSET_NEGATIVE
        """
        msg = f"read_block() offset must be >= 0, got {offset}"
        return Diagnostic(
            code=DiagnosticCode.BLOCK_OFFSET_NEGATIVE,
            message=msg,
            operation="read_block",
        )

    @staticmethod
    def block_length_negative(max_length: int) -> Diagnostic:
        """read_block() called with a negative length.

        Args:
            max_length: The rejected length

        Returns:
            Diagnostic for BLOCK_LENGTH_NEGATIVE
        """
        msg = f"read_block() max_length must be >= 0, got {max_length}"
        return Diagnostic(
            code=DiagnosticCode.BLOCK_LENGTH_NEGATIVE,
            message=msg,
            operation="read_block",
        )

    @staticmethod
    def block_out_of_bounds(offset: int, max_length: int, size: int) -> Diagnostic:
        """read_block() destination range exceeds the buffer.

        Args:
            offset: First index to write
            max_length: Number of slots requested
            size: Length of the destination buffer

        Returns:
            Diagnostic for BLOCK_OUT_OF_BOUNDS
        """
        msg = (
            f"read_block() range [{offset}, {offset + max_length}) "
            f"exceeds buffer of length {size}"
        )
        return Diagnostic(
            code=DiagnosticCode.BLOCK_OUT_OF_BOUNDS,
            message=msg,
            hint="Allocate the buffer with at least offset + max_length slots",
            operation="read_block",
        )
