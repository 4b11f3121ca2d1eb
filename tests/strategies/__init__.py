"""Hypothesis strategies for csvcursor property-based testing.

Usage:
    from tests.strategies import delimited_text, chunked
    from tests.strategies.text import count_terminators, expected_lines
"""

from .text import (
    chunked,
    count_terminators,
    delimited_text,
    expected_lines,
    terminated_text,
)

__all__ = [
    "chunked",
    "count_terminators",
    "delimited_text",
    "expected_lines",
    "terminated_text",
]
