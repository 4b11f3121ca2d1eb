"""csvcursor - lookahead-aware, line-tracking character reader.

Sits between a character source and a CSV (or similar delimited-text)
tokenizer. Offers one character of lookahead, re-reading of the last
consumed character, terminator-normalizing line reads, non-blocking bulk
reads and an exact line counter.

Public API:
    LookaheadLineReader - The reader
    StreamMarker - UNDEFINED / END_OF_STREAM / NOT_READY markers
    CharSource - Protocol for character sources
    StringSource - In-memory source
    TextIOSource - Text stream source

Exceptions:
    CSVCursorError - Base exception class
    UnsupportedOperationError - skip/mark/reset on the reader
    BlockArgumentError - Invalid read_block() arguments (a ValueError)

Submodules:
    csvcursor.diagnostics - Error codes, templates and formatting
    csvcursor.constants - Terminator characters
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import BlockArgumentError, CSVCursorError, UnsupportedOperationError
from .enums import StreamMarker
from .stream import CharSource, LookaheadLineReader, StringSource, TextIOSource

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("csvcursor")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

END_OF_STREAM = StreamMarker.END_OF_STREAM

__all__ = [
    "END_OF_STREAM",
    "BlockArgumentError",
    "CSVCursorError",
    "CharSource",
    "LookaheadLineReader",
    "StreamMarker",
    "StringSource",
    "TextIOSource",
    "UnsupportedOperationError",
    "__version__",
]
