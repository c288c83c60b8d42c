"""Action handlers bound by the default keymaps.

Each handler takes the current snapshot and the triggering key event and
returns the next snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from line_buffer.buffer import (
    Direction,
    EditorState,
    delete_character,
    handle_enter,
    insert_character,
    move_cursor,
)

if TYPE_CHECKING:  # pragma: no cover
    from line_buffer.keymaps.models import KeyEvent


def insert_printable(state: EditorState, event: KeyEvent) -> EditorState:
    return insert_character(state, event.key)


def split_line(state: EditorState, event: KeyEvent) -> EditorState:
    del event
    return handle_enter(state)


def delete_backward(state: EditorState, event: KeyEvent) -> EditorState:
    del event
    return delete_character(state)


def cursor_left(state: EditorState, event: KeyEvent) -> EditorState:
    del event
    return move_cursor(state, Direction.LEFT)


def cursor_right(state: EditorState, event: KeyEvent) -> EditorState:
    del event
    return move_cursor(state, Direction.RIGHT)


def cursor_up(state: EditorState, event: KeyEvent) -> EditorState:
    del event
    return move_cursor(state, Direction.UP)


def cursor_down(state: EditorState, event: KeyEvent) -> EditorState:
    del event
    return move_cursor(state, Direction.DOWN)


__all__ = [
    "insert_printable",
    "split_line",
    "delete_backward",
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "cursor_down",
]
