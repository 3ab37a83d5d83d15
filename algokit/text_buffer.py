"""A text buffer held as rows of characters keyed by their starting offset."""

from __future__ import annotations

from bisect import bisect_right

Row = tuple[int, list[str]]


def insert_at_index(rows: list[Row], index: int, text: str) -> None:
    """Insert ``text`` at global character offset ``index``.

    ``rows`` is a list of ``(start, characters)`` pairs sorted by start, each
    row beginning where the previous one ends. The text goes into the row
    holding ``index`` (an offset on a row boundary belongs to the later row,
    the very end to the last row), and the starts of later rows are shifted.
    """
    if not rows:
        raise IndexError("buffer has no rows")
    starts = [start for start, _ in rows]
    last_start, last_chars = rows[-1]
    if not starts[0] <= index <= last_start + len(last_chars):
        raise IndexError(f"index {index} lies outside the buffer")
    row = bisect_right(starts, index) - 1
    start, chars = rows[row]
    offset = index - start
    chars[offset:offset] = text
    shift = len(text)
    rows[row + 1 :] = [(later + shift, later_chars) for later, later_chars in rows[row + 1 :]]