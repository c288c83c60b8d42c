"""Buffer snapshot types and the pure editing operations."""

from .document import merge_with_previous, renumber, replace_text, split_line
from .edits import delete_character, handle_enter, insert_character
from .motion import (
    Direction,
    cursor_down,
    cursor_left,
    cursor_right,
    cursor_up,
    move_cursor,
)
from .state import (
    CursorPosition,
    EditorState,
    Line,
    Metadata,
    Selection,
    sample_state,
)
from .validation import BufferValidationError, ensure_cursor, validate_state
from .view import RenderedLine, render_lines, render_text

__all__ = [
    "EditorState",
    "Line",
    "CursorPosition",
    "Selection",
    "Metadata",
    "sample_state",
    "renumber",
    "replace_text",
    "split_line",
    "merge_with_previous",
    "insert_character",
    "delete_character",
    "handle_enter",
    "Direction",
    "move_cursor",
    "cursor_left",
    "cursor_right",
    "cursor_up",
    "cursor_down",
    "BufferValidationError",
    "ensure_cursor",
    "validate_state",
    "RenderedLine",
    "render_lines",
    "render_text",
]
