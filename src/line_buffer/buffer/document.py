"""Structural helpers over the ordered line sequence.

Every helper returns a fresh tuple and routes through ``renumber`` so that
``Line.index`` always equals the line's position in the sequence.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Tuple

from .state import Line

Lines = Tuple[Line, ...]


def renumber(lines: Iterable[Line]) -> Lines:
    """Return ``lines`` with each index rebuilt from its position."""

    return tuple(
        line if line.index == position else Line(position, line.text)
        for position, line in enumerate(lines)
    )


def replace_text(lines: Sequence[Line], index: int, text: str) -> Lines:
    """Return a sequence where the line at ``index`` holds ``text``."""

    updated = list(lines)
    updated[index] = updated[index].with_text(text)
    return tuple(updated)


def split_line(lines: Sequence[Line], index: int, column: int) -> Lines:
    """Split line ``index`` at ``column`` into two consecutive lines."""

    text = lines[index].text
    head = Line(index, text[:column])
    tail = Line(index + 1, text[column:])
    return renumber((*lines[:index], head, tail, *lines[index + 1 :]))


def merge_with_previous(lines: Sequence[Line], index: int) -> Lines:
    """Append line ``index`` onto line ``index - 1`` and drop it."""

    previous = lines[index - 1]
    merged = previous.with_text(previous.text + lines[index].text)
    return renumber((*lines[: index - 1], merged, *lines[index + 1 :]))


__all__ = ["Lines", "renumber", "replace_text", "split_line", "merge_with_previous"]
