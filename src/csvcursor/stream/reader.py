"""Lookahead line reader for delimited-text tokenizers.

LookaheadLineReader decorates a CharSource with exactly one character of
lookahead, a record of the last character handed out, and a line counter.
A CSV tokenizer drives it one character at a time:

    reader = LookaheadLineReader.from_text('a,"b"\\r\\nc')
    while (char := reader.read()) is not StreamMarker.END_OF_STREAM:
        if char == '"' and reader.peek() == '"':
            ...

State:
    - Lookahead: UNDEFINED, END_OF_STREAM, or the next unread character.
      Nothing is fetched on construction because the first fetch may block.
    - Last character: what read()/read_block()/read_line() consumed last,
      UNDEFINED before any read. read_again() returns it without I/O.
    - Line counter: one increment per terminator consumed. LF, bare CR and
      CRLF each count once, whichever primitive consumes them.

Blocking:
    read() blocks at most to establish the lookahead. After handing out a
    character it refills the lookahead only if the source is ready,
    otherwise the lookahead drops back to UNDEFINED. read_block() never
    blocks: it returns StreamMarker.NOT_READY when it cannot even fill the
    lookahead. read_line() and peek() may block.

CR counting:
    A terminator counts when it is consumed. A CR counts at once; an LF
    consumed directly after a CR is the second half of CRLF and does not
    count. peek() and read_again() never change line_count.

Not supported:
    skip(), mark(), reset() and mark_supported() raise
    UnsupportedOperationError. The reader never rewinds past the lookahead.

Thread Safety:
    Not thread-safe. One owner reads at a time; no locks are taken.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, MutableSequence
from typing import TYPE_CHECKING, NoReturn

from csvcursor.constants import CR, CRLF, LF, LINE_TERMINATORS
from csvcursor.diagnostics import (
    BlockArgumentError,
    ErrorTemplate,
    UnsupportedOperationError,
)
from csvcursor.enums import StreamMarker

from .sources import StringSource, TextIOSource

if TYPE_CHECKING:
    from typing import TextIO

    from .sources import CharSource

__all__ = ["LookaheadLineReader"]

logger = logging.getLogger(__name__)

_UNDEFINED = StreamMarker.UNDEFINED
_END = StreamMarker.END_OF_STREAM


def _strip_terminator(line: str) -> str:
    """Remove one trailing LF, CR or CRLF."""
    if line.endswith(CRLF):
        return line[:-2]
    if line and line[-1] in LINE_TERMINATORS:
        return line[:-1]
    return line


class LookaheadLineReader:
    """Character reader with one character of lookahead and line tracking.

    Args:
        source: Character source to decorate. The reader never closes it.

    Example:
        >>> reader = LookaheadLineReader.from_text("ab\\ncd")
        >>> reader.peek()
        'a'
        >>> reader.read()
        'a'
        >>> reader.read_again()
        'a'
        >>> reader.read_line()
        'b'
        >>> reader.line_count
        1
        >>> reader.read_line()
        'cd'
        >>> reader.read_line()
        StreamMarker.END_OF_STREAM
    """

    __slots__ = (
        "_after_cr",
        "_last_char",
        "_line",
        "_line_count",
        "_lookahead",
        "_source",
    )

    def __init__(self, source: CharSource) -> None:
        self._source = source
        self._lookahead: str | StreamMarker = _UNDEFINED
        self._last_char: str | StreamMarker = _UNDEFINED
        self._line_count = 0
        self._after_cr = False
        self._line: list[str] = []
        logger.debug("LookaheadLineReader created over %r", source)

    @classmethod
    def from_text(cls, text: str) -> LookaheadLineReader:
        """Create a reader over an in-memory string."""
        return cls(StringSource(text))

    @classmethod
    def from_stream(
        cls, stream: TextIO, *, interactive: bool | None = None
    ) -> LookaheadLineReader:
        """Create a reader over a text stream.

        Args:
            stream: Open text stream (file, io.StringIO, sys.stdin, ...)
            interactive: Passed to TextIOSource; defaults to stream.isatty()

        Returns:
            Reader decorating a TextIOSource over stream
        """
        return cls(TextIOSource(stream, interactive=interactive))

    @property
    def source(self) -> CharSource:
        """The decorated character source."""
        return self._source

    @property
    def line_count(self) -> int:
        """Number of line terminators consumed so far."""
        return self._line_count

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def read(self) -> str | StreamMarker:
        """Consume and return the next character.

        Returns:
            The next character, or StreamMarker.END_OF_STREAM. Once end of
            stream is returned every later call returns it again without
            touching the source.
        """
        if self._lookahead is _UNDEFINED:
            self._fetch()
        char = self._lookahead
        self._last_char = char
        if char is _END:
            return char

        self._count(char)
        if self._source.ready():
            self._fetch()
        else:
            self._lookahead = _UNDEFINED
        return char

    def read_again(self) -> str | StreamMarker:
        """Return the last consumed character again.

        No I/O and no state change. Returns StreamMarker.UNDEFINED before
        the first read.
        """
        return self._last_char

    def read_block(
        self, buffer: MutableSequence[str], offset: int, max_length: int
    ) -> int | StreamMarker:
        """Read up to max_length characters into buffer without blocking.

        Characters are transferred while capacity remains and the source
        reports that its next read will not block.

        Args:
            buffer: Destination; characters go to buffer[offset:offset + n]
            offset: First index of buffer to write
            max_length: Maximum number of characters to transfer

        Returns:
            Number of characters transferred (possibly 0),
            StreamMarker.END_OF_STREAM if the stream is exhausted, or
            StreamMarker.NOT_READY if not even the lookahead could be
            fetched without blocking.

        Raises:
            BlockArgumentError: If offset or max_length is negative, or the
                range does not fit in buffer. Also a ValueError.
        """
        if max_length == 0:
            return 0
        if offset < 0:
            raise BlockArgumentError(ErrorTemplate.block_offset_negative(offset))
        if max_length < 0:
            raise BlockArgumentError(ErrorTemplate.block_length_negative(max_length))
        if offset + max_length > len(buffer):
            diagnostic = ErrorTemplate.block_out_of_bounds(offset, max_length, len(buffer))
            raise BlockArgumentError(diagnostic)

        if self._lookahead is _UNDEFINED:
            if not self._source.ready():
                return StreamMarker.NOT_READY
            self._fetch()
        if self._lookahead is _END:
            return _END

        pos = offset
        end = offset + max_length
        while pos < end and self._source.ready():
            char = self._lookahead
            if char is _END:
                break
            buffer[pos] = char
            pos += 1
            self._last_char = char
            self._count(char)
            self._fetch()
        return pos - offset

    def read_line(self) -> str | StreamMarker:
        """Consume one logical line and return it without its terminator.

        An empty line between two terminators yields "". A last line with
        no terminator is returned as-is and still increments line_count:
        end of stream terminates it.

        Returns:
            Line content, or StreamMarker.END_OF_STREAM when nothing is left
        """
        if self._lookahead is _UNDEFINED:
            self._fetch()
        line = self._line
        line.clear()

        first = self._lookahead
        if first is _END:
            return _END

        if first in LINE_TERMINATORS:
            self._last_char = first
            self._count(first)
            self._fetch()
            if first == CR and self._lookahead == LF:
                self._last_char = LF
                self._count(LF)
                self._fetch()
            return ""

        line.append(first)
        rest = self._source.read_line()
        if rest is _END or not rest:
            self._last_char = first
        else:
            self._last_char = rest[-1]
            line.append(_strip_terminator(rest))
        self._line_count += 1
        self._after_cr = self._last_char == CR
        self._fetch()
        return "".join(line)

    def peek(self) -> str | StreamMarker:
        """Return the next character without consuming it.

        The value is always what the next read() returns. Repeated calls
        with no read in between return the same value.
        """
        if self._lookahead is _UNDEFINED:
            self._fetch()
        return self._lookahead

    def iter_lines(self) -> Iterator[str]:
        """Yield read_line() results until end of stream."""
        while (line := self.read_line()) is not _END:
            yield line

    # ------------------------------------------------------------------
    # Unsupported
    # ------------------------------------------------------------------

    def skip(self, n: int) -> NoReturn:  # noqa: ARG002
        """Not supported; always raises UnsupportedOperationError."""
        self._unsupported("skip")

    def mark(self, read_ahead_limit: int) -> NoReturn:  # noqa: ARG002
        """Not supported; always raises UnsupportedOperationError."""
        self._unsupported("mark")

    def reset(self) -> NoReturn:
        """Not supported; always raises UnsupportedOperationError."""
        self._unsupported("reset")

    def mark_supported(self) -> NoReturn:
        """Not supported; raises instead of returning False."""
        self._unsupported("mark_supported")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _unsupported(self, operation: str) -> NoReturn:
        diagnostic = ErrorTemplate.unsupported_operation(operation, self._line_count)
        raise UnsupportedOperationError(diagnostic)

    def _fetch(self) -> None:
        """Fill the lookahead from the source, blocking if necessary."""
        char = self._source.read_char()
        self._lookahead = char
        if char is _END:
            logger.debug("Source exhausted at line count %d", self._line_count)

    def _count(self, char: str | StreamMarker) -> None:
        """Count char if it ends a line. CRLF counts once, on the CR."""
        if char == CR or (char == LF and not self._after_cr):
            self._line_count += 1
        self._after_cr = char == CR

    def __repr__(self) -> str:
        return (
            f"LookaheadLineReader(source={self._source!r}, "
            f"line_count={self._line_count})"
        )
