"""Character stream layer: the lookahead reader and the sources it decorates.

Exports:
    LookaheadLineReader: One-character lookahead, line counting, line reads
    CharSource: Protocol a source must satisfy
    StringSource: In-memory source over a str
    TextIOSource: Source over a text stream

Python 3.13+.
"""

from .reader import LookaheadLineReader
from .sources import CharSource, StringSource, TextIOSource

__all__ = ["CharSource", "LookaheadLineReader", "StringSource", "TextIOSource"]
