"""Projection of a snapshot into display rows for host renderers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .state import EditorState

DEFAULT_CARET = "│"


@dataclass(frozen=True, slots=True)
class RenderedLine:
    number: Optional[int]
    text: str
    caret: Optional[int] = None


def render_lines(
    state: EditorState, *, line_numbers: bool = True
) -> Tuple[RenderedLine, ...]:
    """Return one row per line; only the cursor's line carries a caret."""

    cursor = state.cursor_position
    return tuple(
        RenderedLine(
            number=line.index + 1 if line_numbers else None,
            text=line.text,
            caret=cursor.column if cursor.line == line.index else None,
        )
        for line in state.lines
    )


def render_text(
    state: EditorState,
    *,
    line_numbers: bool = True,
    caret: str = DEFAULT_CARET,
) -> str:
    rows = render_lines(state, line_numbers=line_numbers)
    width = len(str(len(rows)))
    output = []
    for row in rows:
        text = row.text
        if row.caret is not None:
            text = text[: row.caret] + caret + text[row.caret :]
        if row.number is not None:
            text = f"{row.number:>{width}} {text}"
        output.append(text)
    return "\n".join(output)


__all__ = ["DEFAULT_CARET", "RenderedLine", "render_lines", "render_text"]
