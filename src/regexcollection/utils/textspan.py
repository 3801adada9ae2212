"""Utility functions for working with text spans.

Spans are half-open intervals ``[start, end)`` where ``start`` is inclusive
and ``end`` is exclusive.  The helpers are pure and used to report match
positions as line/column pairs.
"""

from __future__ import annotations

from bisect import bisect_right

__all__ = ["build_line_starts", "char_to_line_col"]


def build_line_starts(text: str) -> tuple[int, ...]:
    """Return the starting character index for each line in ``text``."""

    starts = [0]
    for idx, char in enumerate(text):
        if char == "\n":
            starts.append(idx + 1)
    return tuple(starts)


def char_to_line_col(index: int, line_starts: tuple[int, ...]) -> tuple[int, int]:
    """Convert a character index to ``(line, col)`` using ``line_starts``.

    Line and column numbers are zero-based.
    """

    if index < 0:
        raise ValueError("index must be non-negative")
    line = bisect_right(line_starts, index) - 1
    if line < 0:
        line = 0
    col = index - line_starts[line]
    return line, col
