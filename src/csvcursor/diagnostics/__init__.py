"""Diagnostic system for csvcursor errors.

Provides structured error diagnostics with codes, hints, and a formatter
for human and machine-readable output.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import BlockArgumentError, CSVCursorError, UnsupportedOperationError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "BlockArgumentError",
    "CSVCursorError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "UnsupportedOperationError",
]
