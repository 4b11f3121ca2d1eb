"""Shared constants for csvcursor.

Single source of truth for the characters the reader treats as line
terminators. Placing them here keeps the stream package and the sources
free of magic literals.

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Terminator characters
    "LF",
    "CR",
    "CRLF",
    "LINE_TERMINATORS",
    # Formatting
    "MAX_DIAGNOSTIC_CONTENT_LENGTH",
]

# ============================================================================
# LINE TERMINATORS
# ============================================================================
#
# A logical line ends at LF (Unix), CR (classic Mac) or CRLF (Windows).
# CRLF is one terminator: it increments the line counter once and is never
# split between two read_line() calls.

LF: str = "\n"
CR: str = "\r"
CRLF: str = CR + LF

# Single characters that start a terminator.
LINE_TERMINATORS: frozenset[str] = frozenset({LF, CR})

# ============================================================================
# FORMATTING
# ============================================================================

# Truncation limit applied by DiagnosticFormatter(sanitize=True).
MAX_DIAGNOSTIC_CONTENT_LENGTH: int = 100
