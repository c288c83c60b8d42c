"""Invariant checks shared by the session and the test-suite."""

from __future__ import annotations

from .state import CursorPosition, EditorState


class BufferValidationError(RuntimeError):
    """Raised when a snapshot breaks a line-numbering or cursor invariant."""

    def __init__(
        self, message: str, *, cursor: CursorPosition | None = None
    ) -> None:
        super().__init__(message)
        self.cursor = cursor


def ensure_cursor(state: EditorState, cursor: CursorPosition) -> CursorPosition:
    line, column = cursor.as_tuple()
    if line < 0 or line >= state.total_lines:
        raise BufferValidationError("Line out of range", cursor=cursor)
    if column < 0 or column > len(state.lines[line].text):
        raise BufferValidationError("Column out of range", cursor=cursor)
    return cursor


def validate_state(state: EditorState, *, allow_selection: bool = True) -> EditorState:
    """Raise ``BufferValidationError`` unless ``state`` is well formed."""

    if not state.lines:
        raise BufferValidationError("Buffer must hold at least one line")
    for position, line in enumerate(state.lines):
        if line.index != position:
            raise BufferValidationError(
                f"Line at position {position} carries index {line.index}"
            )
    ensure_cursor(state, state.cursor_position)
    if state.selection is not None and not allow_selection:
        raise BufferValidationError(
            "Selection is reserved and must stay empty", cursor=state.cursor_position
        )
    return state


__all__ = ["BufferValidationError", "ensure_cursor", "validate_state"]
