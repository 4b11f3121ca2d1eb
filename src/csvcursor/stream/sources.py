"""Character sources consumed by LookaheadLineReader.

A source is anything that satisfies the CharSource protocol: a readiness
probe, a single-character read and a rest-of-line read. The reader is
generic over sources; two concrete ones are provided here.

Line convention:
    read_line() returns the rest of the current line INCLUDING its
    terminator, exactly like io.TextIOBase.readline() with newline="".
    Terminators are LF, CR and CRLF; CRLF is returned whole, never split.

Readiness:
    ready() answers "will the next read_char() return without blocking?".
    Reading end of stream does not block, so an exhausted source is ready.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from csvcursor.constants import CR, LF
from csvcursor.enums import StreamMarker

if TYPE_CHECKING:
    from typing import TextIO

__all__ = ["CharSource", "StringSource", "TextIOSource"]

_TERMINATOR = re.compile(r"\r\n|\r|\n")


@runtime_checkable
class CharSource(Protocol):
    """Capability set a character source must provide."""

    def ready(self) -> bool:
        """Return True if the next read_char() will not block."""
        ...

    def read_char(self) -> str | StreamMarker:
        """Return one character, or StreamMarker.END_OF_STREAM."""
        ...

    def read_line(self) -> str | StreamMarker:
        """Return the rest of the line with its terminator, or END_OF_STREAM."""
        ...


def _split_line(text: str) -> tuple[str, str]:
    """Split text after its first terminator.

    Returns:
        (line including terminator, remainder). When text holds no
        terminator the whole text is the line.
    """
    match = _TERMINATOR.search(text)
    if match is None:
        return text, ""
    return text[: match.end()], text[match.end() :]


class StringSource:
    """In-memory source over a string.

    Never blocks, so ready() is always True.

    Example:
        >>> source = StringSource("a\\r\\nb")
        >>> source.read_char()
        'a'
        >>> source.read_line()
        '\\r\\n'
        >>> source.read_line()
        'b'
        >>> source.read_line()
        StreamMarker.END_OF_STREAM
    """

    __slots__ = ("_pos", "_text")

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0

    def ready(self) -> bool:
        return True

    def read_char(self) -> str | StreamMarker:
        if self._pos >= len(self._text):
            return StreamMarker.END_OF_STREAM
        char = self._text[self._pos]
        self._pos += 1
        return char

    def read_line(self) -> str | StreamMarker:
        if self._pos >= len(self._text):
            return StreamMarker.END_OF_STREAM
        match = _TERMINATOR.search(self._text, self._pos)
        end = len(self._text) if match is None else match.end()
        line = self._text[self._pos : end]
        self._pos = end
        return line

    def __repr__(self) -> str:
        return f"StringSource(pos={self._pos}, length={len(self._text)})"


class TextIOSource:
    """Source over a text stream such as an open file or io.StringIO.

    The stream's own newline translation is respected; whatever terminators
    reach this source are split per the LF/CR/CRLF convention, so a stream
    opened with newline="\\n" still yields bare-CR lines. Characters past a
    terminator inside one readline() result are kept in a pending buffer and
    served before the stream is read again.

    Args:
        stream: Text stream providing read(1), readline() and isatty()
        interactive: Whether reads may block waiting for input. Defaults to
            stream.isatty(). An interactive source reports ready() only while
            it holds pending characters.
    """

    __slots__ = ("_interactive", "_pending", "_pending_pos", "_stream")

    def __init__(self, stream: TextIO, *, interactive: bool | None = None) -> None:
        self._stream = stream
        self._interactive = stream.isatty() if interactive is None else interactive
        self._pending = ""
        self._pending_pos = 0

    @property
    def stream(self) -> TextIO:
        """The wrapped stream. Closing it is the caller's responsibility."""
        return self._stream

    def ready(self) -> bool:
        return self._pending_pos < len(self._pending) or not self._interactive

    def read_char(self) -> str | StreamMarker:
        if self._pending_pos < len(self._pending):
            char = self._pending[self._pending_pos]
            self._pending_pos += 1
            return char
        char = self._stream.read(1)
        return char if char else StreamMarker.END_OF_STREAM

    def read_line(self) -> str | StreamMarker:
        pending, start = self._pending, self._pending_pos
        match = _TERMINATOR.search(pending, start)
        if match is not None:
            line = pending[start : match.end()]
            self._pending_pos = match.end()
        else:
            text = pending[start:] + self._stream.readline()
            if not text:
                self._pending, self._pending_pos = "", 0
                return StreamMarker.END_OF_STREAM
            line, self._pending = _split_line(text)
            self._pending_pos = 0

        if line.endswith(CR) and self._pending_pos == len(self._pending):
            # CR ended the buffered text; a following LF belongs to it.
            nxt = self._stream.read(1)
            if nxt == LF:
                line += LF
            else:
                self._pending, self._pending_pos = nxt, 0
        return line

    def __repr__(self) -> str:
        return f"TextIOSource({self._stream!r}, interactive={self._interactive})"
