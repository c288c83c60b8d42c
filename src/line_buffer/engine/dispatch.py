"""Pure key dispatch: ``apply_key(state, event) -> state``."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, cast

from line_buffer.buffer import EditorState
from line_buffer.keymaps import KeyEvent, KeymapResolver, build_default_resolver
from line_buffer.keymaps.resolver import ResolutionStatus

_DEFAULT_RESOLVER: Optional[KeymapResolver] = None


@dataclass(frozen=True, slots=True)
class KeyResult:
    """Outcome of dispatching one key event."""

    state: EditorState
    status: ResolutionStatus
    action_id: Optional[str] = None
    changed: bool = False
    prevent_default: bool = False


def default_resolver() -> KeymapResolver:
    global _DEFAULT_RESOLVER
    if _DEFAULT_RESOLVER is None:
        _DEFAULT_RESOLVER = build_default_resolver(logger_name="line_buffer.keymaps")
    return _DEFAULT_RESOLVER


def dispatch_key(
    state: EditorState,
    event: KeyEvent,
    *,
    resolver: Optional[KeymapResolver] = None,
) -> KeyResult:
    resolution = (resolver or default_resolver()).resolve(event)
    if resolution.match is None:
        return KeyResult(state=state, status=resolution.status)

    action = resolution.match.action
    updated = cast(EditorState, action(state, event))
    return KeyResult(
        state=updated,
        status=resolution.status,
        action_id=action.id,
        changed=updated != state,
        prevent_default=resolution.prevent_default,
    )


def apply_key(
    state: EditorState,
    event: KeyEvent,
    *,
    resolver: Optional[KeymapResolver] = None,
) -> EditorState:
    """Return the snapshot that follows ``state`` after ``event``."""

    return dispatch_key(state, event, resolver=resolver).state


__all__ = ["KeyResult", "apply_key", "dispatch_key", "default_resolver"]
