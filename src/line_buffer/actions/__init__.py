"""Editing verbs reachable from key bindings."""

from .core import (
    cursor_down,
    cursor_left,
    cursor_right,
    cursor_up,
    delete_backward,
    insert_printable,
    split_line,
)

__all__ = [
    "insert_printable",
    "split_line",
    "delete_backward",
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "cursor_down",
]
