"""Immutable snapshot types for the line buffer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional, Tuple


@dataclass(frozen=True, slots=True)
class Line:
    """One logical row of text and its position in the buffer."""

    index: int
    text: str = ""

    def with_text(self, text: str) -> "Line":
        return replace(self, text=text)


@dataclass(frozen=True, slots=True, order=True)
class CursorPosition:
    line: int = 0
    column: int = 0

    def as_tuple(self) -> Tuple[int, int]:
        return (self.line, self.column)


@dataclass(frozen=True, slots=True)
class Selection:
    """Reserved range selection; no editing operation reads or writes it."""

    start: CursorPosition
    end: CursorPosition


@dataclass(frozen=True, slots=True)
class Metadata:
    file_path: str
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)


@dataclass(frozen=True, slots=True)
class EditorState:
    """Full editor snapshot, replaced wholesale on every command.

    ``total_lines`` is derived from ``lines`` so the two can never drift;
    ``lines`` is a tuple so older snapshots stay valid when retained.
    """

    lines: Tuple[Line, ...] = (Line(0, ""),)
    cursor_position: CursorPosition = CursorPosition()
    selection: Optional[Selection] = None
    metadata: Optional[Metadata] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "lines", tuple(self.lines))

    @classmethod
    def initial(cls) -> "EditorState":
        return cls()

    @classmethod
    def from_text(
        cls, text: str, *, metadata: Optional[Metadata] = None
    ) -> "EditorState":
        rows = text.split("\n") if text else [""]
        lines = tuple(Line(index, row) for index, row in enumerate(rows))
        return cls(lines=lines, metadata=metadata)

    @property
    def total_lines(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(line.text for line in self.lines)

    @property
    def current_line(self) -> Optional[Line]:
        return self.line_at(self.cursor_position.line)

    def line_at(self, index: int) -> Optional[Line]:
        if 0 <= index < len(self.lines):
            return self.lines[index]
        return None


def sample_state() -> EditorState:
    """Return the four-line demo document used by the Textual app."""

    return EditorState.from_text(
        "Hello, Jayakrishnan!!\nThis is a sample text editor.\nyea!\n",
        metadata=Metadata(file_path="/"),
    )


__all__ = [
    "Line",
    "CursorPosition",
    "Selection",
    "Metadata",
    "EditorState",
    "sample_state",
]
