"""Session object holding the current snapshot reference."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

from line_buffer.buffer import (
    CursorPosition,
    Direction,
    EditorState,
    Line,
    delete_character,
    handle_enter,
    insert_character,
    move_cursor,
    validate_state,
)
from line_buffer.keymaps import KeyEvent, KeymapResolver
from line_buffer.runtime import telemetry

from .dispatch import KeyResult, default_resolver, dispatch_key


class LineBuffer:
    """Applies commands one at a time, replacing the snapshot wholesale.

    Snapshots handed out by ``state`` are never mutated afterwards, so a
    caller may keep older ones around.
    """

    def __init__(
        self,
        state: Optional[EditorState] = None,
        *,
        name: str = "default",
        resolver: Optional[KeymapResolver] = None,
        strict: Optional[bool] = None,
    ) -> None:
        self.name = name
        self.resolver = resolver or default_resolver()
        self.strict = telemetry.env_flag("STRICT") if strict is None else strict
        initial = state or EditorState.initial()
        if self.strict:
            validate_state(initial)
        self._state = initial

    @classmethod
    def from_text(
        cls, text: str, *, name: str = "default", strict: Optional[bool] = None
    ) -> "LineBuffer":
        return cls(EditorState.from_text(text), name=name, strict=strict)

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def lines(self) -> Tuple[Line, ...]:
        return self._state.lines

    @property
    def cursor(self) -> CursorPosition:
        return self._state.cursor_position

    @property
    def total_lines(self) -> int:
        return self._state.total_lines

    @property
    def text(self) -> str:
        return self._state.text

    def handle_key(self, event: KeyEvent) -> KeyResult:
        with telemetry.span(
            "buffer::key",
            component=True,
            metadata={"buffer": self.name, "key": event.token},
        ) as handle:
            result = dispatch_key(self._state, event, resolver=self.resolver)
            handle.add_metadata("status", result.status)
            if result.action_id:
                handle.add_metadata("action", result.action_id)
            self._commit(result.state, result.action_id or result.status)
        return result

    def insert_character(self, char: str) -> EditorState:
        return self._run(
            "insert_character", lambda state: insert_character(state, char)
        )

    def delete_character(self) -> EditorState:
        return self._run("delete_character", delete_character)

    def handle_enter(self) -> EditorState:
        return self._run("handle_enter", handle_enter)

    def move_cursor(self, direction: Direction | str) -> EditorState:
        return self._run(
            f"move_cursor::{Direction(direction).value}",
            lambda state: move_cursor(state, direction),
        )

    def reset(self, state: Optional[EditorState] = None) -> EditorState:
        self._commit(state or EditorState.initial(), "reset")
        return self._state

    def _run(
        self, label: str, operation: Callable[[EditorState], EditorState]
    ) -> EditorState:
        with telemetry.span(
            f"buffer::{label}", component=True, metadata={"buffer": self.name}
        ):
            self._commit(operation(self._state), label)
        return self._state

    def _commit(self, updated: EditorState, label: str) -> None:
        if self.strict:
            validate_state(updated)
        previous = self._state
        self._state = updated
        if previous.total_lines != updated.total_lines:
            telemetry.record_event(
                "buffer.structure",
                data={
                    "buffer": self.name,
                    "command": label,
                    "lines_before": previous.total_lines,
                    "lines_after": updated.total_lines,
                },
            )


__all__ = ["LineBuffer"]
