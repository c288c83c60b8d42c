"""Cursor movement clamped to the buffer bounds."""

from __future__ import annotations

from dataclasses import replace
from enum import Enum
from typing import Callable, Dict

from .state import CursorPosition, EditorState


class Direction(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


def cursor_left(state: EditorState) -> CursorPosition:
    line, column = state.cursor_position.as_tuple()
    if state.line_at(line) is None:
        return state.cursor_position
    if column > 0:
        return CursorPosition(line, column - 1)
    if line == 0:
        return state.cursor_position
    previous = state.line_at(line - 1)
    if previous is None:
        return state.cursor_position
    return CursorPosition(line - 1, len(previous.text))


def cursor_right(state: EditorState) -> CursorPosition:
    line, column = state.cursor_position.as_tuple()
    current = state.line_at(line)
    if current is None:
        return state.cursor_position
    if column < len(current.text):
        return CursorPosition(line, column + 1)
    if line >= state.total_lines - 1:
        return state.cursor_position
    return CursorPosition(line + 1, 0)


def cursor_up(state: EditorState) -> CursorPosition:
    line, column = state.cursor_position.as_tuple()
    if line == 0:
        return state.cursor_position
    previous = state.line_at(line - 1)
    if previous is None:
        return state.cursor_position
    return CursorPosition(line - 1, min(column, len(previous.text)))


def cursor_down(state: EditorState) -> CursorPosition:
    line, column = state.cursor_position.as_tuple()
    if line >= state.total_lines - 1:
        return state.cursor_position
    following = state.line_at(line + 1)
    if following is None:
        return state.cursor_position
    return CursorPosition(line + 1, min(column, len(following.text)))


_MOVES: Dict[Direction, Callable[[EditorState], CursorPosition]] = {
    Direction.LEFT: cursor_left,
    Direction.RIGHT: cursor_right,
    Direction.UP: cursor_up,
    Direction.DOWN: cursor_down,
}


def move_cursor(state: EditorState, direction: Direction | str) -> EditorState:
    """Return ``state`` with the cursor moved one step in ``direction``."""

    target = _MOVES[Direction(direction)](state)
    if target == state.cursor_position:
        return state
    return replace(state, cursor_position=target)


__all__ = [
    "Direction",
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "cursor_down",
    "move_cursor",
]
