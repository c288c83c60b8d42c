"""Built-in actions and control-key bindings."""

from __future__ import annotations

from typing import Iterable, Sequence

from line_buffer.actions import core as core_actions

from .models import ActionRef, Binding
from .registry import KeymapRegistry
from .resolver import INSERT_ACTION_ID, KeymapResolver

CONTROL_KEYS: tuple[str, ...] = (
    "Enter",
    "ArrowUp",
    "ArrowDown",
    "ArrowLeft",
    "ArrowRight",
    "Backspace",
)

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef(
        id=INSERT_ACTION_ID,
        handler=core_actions.insert_printable,
        description="Insert a printable character at the cursor",
    ),
    ActionRef(
        id="edit.split_line",
        handler=core_actions.split_line,
        description="Split the line at the cursor",
    ),
    ActionRef(
        id="edit.delete_backward",
        handler=core_actions.delete_backward,
        description="Delete before the cursor, merging lines at column 0",
    ),
    ActionRef(
        id="cursor.left",
        handler=core_actions.cursor_left,
        description="Move cursor left",
    ),
    ActionRef(
        id="cursor.right",
        handler=core_actions.cursor_right,
        description="Move cursor right",
    ),
    ActionRef(
        id="cursor.up",
        handler=core_actions.cursor_up,
        description="Move cursor up",
    ),
    ActionRef(
        id="cursor.down",
        handler=core_actions.cursor_down,
        description="Move cursor down",
    ),
)

DEFAULT_BINDINGS: tuple[Binding, ...] = (
    Binding(id="key.enter", key="Enter", action_id="edit.split_line"),
    Binding(id="key.backspace", key="Backspace", action_id="edit.delete_backward"),
    Binding(id="key.left", key="ArrowLeft", action_id="cursor.left"),
    Binding(id="key.right", key="ArrowRight", action_id="cursor.right"),
    Binding(id="key.up", key="ArrowUp", action_id="cursor.up"),
    Binding(id="key.down", key="ArrowDown", action_id="cursor.down"),
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    include_bindings: Sequence[str] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register the built-in actions and control-key bindings."""

    include = set(include_bindings) if include_bindings else None
    exclude = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if include is not None and binding.id not in include:
            continue
        if binding.id in exclude:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=replace)


def build_default_resolver(*, logger_name: str | None = None) -> KeymapResolver:
    """Return a resolver over a fresh registry seeded with the defaults."""

    registry = KeymapRegistry(logger_name=logger_name)
    load_default_keymaps(registry)
    return KeymapResolver(registry, logger_name=logger_name)


__all__ = [
    "CONTROL_KEYS",
    "DEFAULT_ACTIONS",
    "DEFAULT_BINDINGS",
    "load_default_keymaps",
    "build_default_resolver",
]
