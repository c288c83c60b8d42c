"""Dataclasses describing key events, actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class KeyEvent:
    """Raw key press: a key identifier plus the three modifier flags.

    ``key`` is either a control key name (``"Enter"``, ``"ArrowUp"``...) or
    the character the key produced. Shift is folded into the character.
    Hosts must only send printable characters here: any single character
    without ctrl/meta/alt counts as printable, so a raw ``"\\n"`` would land
    inside a line. ``translate_key`` filters with ``str.isprintable``.
    """

    key: str
    ctrl: bool = False
    meta: bool = False
    alt: bool = False

    def __post_init__(self) -> None:
        if not self.key:
            raise ValueError("key cannot be empty")

    @property
    def has_modifier(self) -> bool:
        return self.ctrl or self.meta or self.alt

    @property
    def is_printable(self) -> bool:
        return len(self.key) == 1 and not self.has_modifier

    @property
    def token(self) -> str:
        pairs = (("ctrl", self.ctrl), ("meta", self.meta), ("alt", self.alt))
        flags = [name for name, active in pairs if active]
        return "+".join((*flags, self.key))


@dataclass(frozen=True, slots=True)
class ActionRef:
    """Named handler invoked as ``handler(state, event) -> state``."""

    id: str
    handler: Callable[..., object]
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("ActionRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


@dataclass(frozen=True, slots=True)
class Binding:
    """Associates a control key name with an action."""

    id: str
    key: str
    action_id: str
    description: str = ""

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("binding id cannot be empty")
        if not self.key:
            raise ValueError("binding key cannot be empty")
        if not self.action_id:
            raise ValueError("binding action_id cannot be empty")


__all__ = ["KeyEvent", "ActionRef", "Binding"]
