"""Convert positions in file text into lines, columns and tokens."""

from __future__ import annotations

import re

from .models import Region

_SYMBOL_CHAR = re.compile(r"\w")


def line_and_column(text: str, offset: int) -> tuple[int, int]:
    """Return the 0-based line and column of a character offset."""

    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return line, offset - line_start


def region_from_offsets(text: str, start: int, end: int) -> Region:
    """Build a Region from two character offsets into ``text``.

    An end that lands right after a newline is pulled back onto the last
    line that actually contains selected text.
    """

    start, end = sorted((max(0, min(start, len(text))), max(0, min(end, len(text)))))
    if end > start and text[end - 1] == "\n":
        end -= 1
    start_line, start_col = line_and_column(text, start)
    end_line, end_col = line_and_column(text, end)
    return Region(start_line, start_col, end_line, end_col)


def region_from_positions(
    start_line: int,
    start_col: int = 1,
    end_line: int | None = None,
    end_col: int | None = None,
) -> Region:
    """Build a Region from 1-based line and column numbers."""

    if start_line < 1 or start_col < 1:
        raise ValueError("Line and column numbers start at 1.")
    if end_line is None:
        end_line, end_col = start_line, start_col
    elif end_col is None:
        end_col = 1
    if end_line < 1 or end_col < 1:
        raise ValueError("Line and column numbers start at 1.")
    return Region(start_line - 1, start_col - 1, end_line - 1, end_col - 1)


def selected_text(text: str, start: int, end: int) -> str:
    start, end = sorted((start, end))
    return text[max(0, start):max(0, end)]


def symbol_at(text: str, offset: int) -> str:
    """Return the identifier under (or immediately before) ``offset``."""

    offset = max(0, min(offset, len(text)))
    begin = offset
    while begin > 0 and _SYMBOL_CHAR.match(text[begin - 1]):
        begin -= 1
    finish = offset
    while finish < len(text) and _SYMBOL_CHAR.match(text[finish]):
        finish += 1
    return text[begin:finish]
