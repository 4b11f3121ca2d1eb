#!/usr/bin/env python3
"""Reader Integrity Fuzzer (Atheris).

Targets: csvcursor.stream.reader.LookaheadLineReader
Drives random mixes of read/peek/read_line/read_block/read_again and checks,
after every step, that the consumed text matches the input and that
line_count equals the terminators consumed so far.
"""

from __future__ import annotations

import atexit
import json
import logging
import re
import sys

import atheris

# --- PEP 695 Type Aliases ---
type FuzzStats = dict[str, int | str]

_fuzz_stats: FuzzStats = {"status": "incomplete", "iterations": 0, "findings": 0}

_TERMINATOR = re.compile(r"\r\n|\r|\n")


def _emit_final_report() -> None:
    report = json.dumps(_fuzz_stats)
    print(f"\n[SUMMARY-JSON-BEGIN]{report}[SUMMARY-JSON-END]", file=sys.stderr)


atexit.register(_emit_final_report)

logging.getLogger("csvcursor").setLevel(logging.CRITICAL)

with atheris.instrument_imports(include=["csvcursor"]):
    from csvcursor import LookaheadLineReader, StreamMarker


def _finding(msg: str) -> None:
    _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
    raise RuntimeError(msg)


def _terminators(text: str) -> int:
    return len(_TERMINATOR.findall(text))


def test_one_input(data: bytes) -> None:
    """Atheris entry point: Test LookaheadLineReader consistency."""
    _fuzz_stats["iterations"] = int(_fuzz_stats["iterations"]) + 1
    _fuzz_stats["status"] = "running"

    fdp = atheris.FuzzedDataProvider(data)
    source = fdp.ConsumeUnicodeNoSurrogates(1024)
    reader = LookaheadLineReader.from_text(source)
    buffer = [""] * 8
    pos = 0
    # An unterminated last line read by read_line() counts once.
    unterminated = 0

    try:
        # 1. Random primitives, position tracked against the input
        for _ in range(fdp.ConsumeIntInRange(0, 60)):
            match fdp.ConsumeIntInRange(0, 4):
                case 0:
                    char = reader.read()
                    if char is StreamMarker.END_OF_STREAM:
                        if pos != len(source):
                            _finding(f"read() hit end of stream at {pos}")
                    elif char != source[pos]:
                        _finding(f"read() {char!r} != {source[pos]!r} at {pos}")
                    else:
                        pos += 1
                case 1:
                    before = reader.line_count
                    peeked = reader.peek()
                    expected = source[pos] if pos < len(source) else StreamMarker.END_OF_STREAM
                    if peeked != expected:
                        _finding(f"peek() {peeked!r} != {expected!r} at {pos}")
                    if reader.line_count != before:
                        _finding("peek() changed the line count")
                case 2:
                    size = fdp.ConsumeIntInRange(0, 8)
                    result = reader.read_block(buffer, 0, size)
                    if result is StreamMarker.NOT_READY:
                        _finding("read_block() on an in-memory source was NOT_READY")
                    if isinstance(result, int):
                        chunk = "".join(buffer[:result])
                        if chunk != source[pos : pos + result]:
                            _finding(f"read_block() {chunk!r} differs from input at {pos}")
                        pos += result
                case 3:
                    line = reader.read_line()
                    if line is StreamMarker.END_OF_STREAM:
                        if pos != len(source):
                            _finding(f"read_line() hit end of stream at {pos}")
                    else:
                        if not source.startswith(line, pos) or _TERMINATOR.search(line):
                            _finding(f"read_line() {line!r} differs from input at {pos}")
                        pos += len(line)
                        terminator = _TERMINATOR.match(source, pos)
                        if terminator is not None:
                            pos = terminator.end()
                        elif pos == len(source):
                            unterminated = 1
                        else:
                            _finding(f"read_line() stopped inside a line at {pos}")
                case _:
                    before = reader.line_count
                    reader.read_again()
                    if reader.line_count != before:
                        _finding("read_again() changed the line count")

            expected_count = _terminators(source[:pos]) + unterminated
            if reader.line_count != expected_count:
                _finding(f"line_count {reader.line_count} != {expected_count} at {pos}")

        # 2. Drain and compare
        rest: list[str] = []
        while (char := reader.read()) is not StreamMarker.END_OF_STREAM:
            rest.append(char)
        if "".join(rest) != source[pos:]:
            _finding(f"Remaining text differs from input after {pos}")

        expected_count = _terminators(source) + unterminated
        if reader.line_count != expected_count:
            _finding(f"final line_count {reader.line_count} != {expected_count}")

    except RuntimeError:
        raise
    except Exception:
        _fuzz_stats["findings"] = int(_fuzz_stats["findings"]) + 1
        raise


if __name__ == "__main__":
    atheris.Setup(sys.argv, test_one_input)
    atheris.Fuzz()
