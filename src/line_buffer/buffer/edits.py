"""Text-mutating operations: insert, backspace and line split."""

from __future__ import annotations

from dataclasses import replace

from .document import merge_with_previous, replace_text, split_line
from .state import CursorPosition, EditorState


def insert_character(state: EditorState, char: str) -> EditorState:
    """Splice ``char`` into the cursor's line and advance the column.

    ``char`` must be exactly one character, otherwise the cursor would drift
    away from the text it points into.
    """

    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")

    line, column = state.cursor_position.as_tuple()
    current = state.line_at(line)
    if current is None:
        return state

    text = current.text
    return replace(
        state,
        lines=replace_text(state.lines, line, text[:column] + char + text[column:]),
        cursor_position=CursorPosition(line, column + 1),
    )


def delete_character(state: EditorState) -> EditorState:
    """Backspace: drop the character before the cursor or merge lines.

    At column 0 the current line is appended to the previous one and the
    cursor lands where the previous line used to end. At the very start of
    the buffer nothing happens.
    """

    line, column = state.cursor_position.as_tuple()
    if line == 0 and column == 0:
        return state

    current = state.line_at(line)
    if current is None:
        return state

    if column == 0:
        previous = state.line_at(line - 1)
        if previous is None:
            return state
        return replace(
            state,
            lines=merge_with_previous(state.lines, line),
            cursor_position=CursorPosition(line - 1, len(previous.text)),
        )

    text = current.text
    return replace(
        state,
        lines=replace_text(state.lines, line, text[: column - 1] + text[column:]),
        cursor_position=CursorPosition(line, column - 1),
    )


def handle_enter(state: EditorState) -> EditorState:
    """Split the cursor's line and move to the start of the new line."""

    line, column = state.cursor_position.as_tuple()
    if state.line_at(line) is None:
        return state

    return replace(
        state,
        lines=split_line(state.lines, line, column),
        cursor_position=CursorPosition(line + 1, 0),
    )


__all__ = ["insert_character", "delete_character", "handle_enter"]
