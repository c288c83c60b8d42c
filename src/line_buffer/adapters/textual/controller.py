"""Adapter that feeds Textual key events into a LineBuffer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional, Tuple

from line_buffer.buffer import RenderedLine, render_lines
from line_buffer.engine import KeyResult, LineBuffer
from line_buffer.keymaps import KeyEvent

TEXTUAL_KEY_NAMES: Dict[str, str] = {
    "enter": "Enter",
    "return": "Enter",
    "backspace": "Backspace",
    "left": "ArrowLeft",
    "right": "ArrowRight",
    "up": "ArrowUp",
    "down": "ArrowDown",
}

_MODIFIERS = {"ctrl", "meta", "alt", "shift", "super", "hyper"}


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_view: Callable[[Tuple[RenderedLine, ...]], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def translate_key(key: str, character: Optional[str] = None) -> KeyEvent:
    """Build a ``KeyEvent`` from a Textual key name and its character.

    A printable character wins unless the key carries ctrl/meta/alt, in
    which case the bare key name is kept alongside the modifier flags.
    """

    if key in TEXTUAL_KEY_NAMES:
        return KeyEvent(TEXTUAL_KEY_NAMES[key])

    parts = key.split("+")
    modifiers = {part for part in parts[:-1] if part in _MODIFIERS}
    base = TEXTUAL_KEY_NAMES.get(parts[-1], parts[-1]) if len(parts) > 1 else key
    ctrl = "ctrl" in modifiers
    meta = "meta" in modifiers or "super" in modifiers or "hyper" in modifiers
    alt = "alt" in modifiers

    if (
        character is not None
        and len(character) == 1
        and character.isprintable()
        and not (ctrl or meta or alt)
    ):
        return KeyEvent(character)
    return KeyEvent(base or key, ctrl=ctrl, meta=meta, alt=alt)


class TextualBufferAdapter:
    """Bridges Textual key presses to a LineBuffer and pushes rendered rows."""

    def __init__(
        self,
        buffer: LineBuffer,
        hooks: TextualUIHooks,
        *,
        line_numbers: bool = True,
    ) -> None:
        self.buffer = buffer
        self.hooks = hooks
        self.line_numbers = line_numbers
        self._refresh_view()

    def handle_textual_key(
        self, key: str, *, character: Optional[str] = None
    ) -> KeyResult:
        """Translate and dispatch one key; the caller honours ``prevent_default``."""

        event = translate_key(key, character)
        self._log_state("key ->", key=key, event=event.token)
        result = self.buffer.handle_key(event)
        self.hooks.update_status(self._status_text(result))
        if result.changed:
            self._refresh_view()
        self._log_state(
            "result <-",
            status=result.status,
            action=result.action_id,
            changed=result.changed,
            prevent_default=result.prevent_default,
        )
        return result

    def handle_keys(
        self, keys: Iterable[Tuple[str, Optional[str]]]
    ) -> KeyResult | None:
        result = None
        for key, character in keys:
            result = self.handle_textual_key(key, character=character)
        return result

    def _refresh_view(self) -> None:
        self.hooks.update_view(
            render_lines(self.buffer.state, line_numbers=self.line_numbers)
        )

    def _status_text(self, result: KeyResult) -> str:
        cursor = self.buffer.cursor
        label = result.action_id or result.status
        return (
            f"Ln {cursor.line + 1}, Col {cursor.column + 1} | "
            f"{self.buffer.total_lines} lines | {label}"
        )

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        return {
            "cursor": self.buffer.cursor.as_tuple(),
            "lines": self.buffer.total_lines,
            "buffer": self.buffer.name,
        }


__all__ = [
    "TEXTUAL_KEY_NAMES",
    "TextualBufferAdapter",
    "TextualUIHooks",
    "translate_key",
]
