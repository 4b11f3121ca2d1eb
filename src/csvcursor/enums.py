"""Enumerations for csvcursor type-safe markers.

StreamMarker uses a plain Enum rather than StrEnum: a marker must never
compare equal to a character, so ``StreamMarker.END_OF_STREAM == ""`` and
similar comparisons are always False.

Python 3.13+.
"""

from enum import Enum


class StreamMarker(Enum):
    """Non-character states of a character stream.

    Returned in place of a character wherever a read cannot yield one.
    Compare by identity: ``if char is StreamMarker.END_OF_STREAM:``.
    """

    UNDEFINED = "undefined"
    """Nothing fetched yet (lookahead) or nothing read yet (last character)."""

    END_OF_STREAM = "end-of-stream"
    """The source is exhausted."""

    NOT_READY = "not-ready"
    """Nothing can be read right now without blocking (read_block only)."""

    def __repr__(self) -> str:
        return f"StreamMarker.{self.name}"


__all__ = [
    "StreamMarker",
]
