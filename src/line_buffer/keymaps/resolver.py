"""Classifies key events as control, printable or ignored."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Optional

from line_buffer.runtime.telemetry import span

from .models import ActionRef, Binding, KeyEvent
from .registry import KeymapRegistry

INSERT_ACTION_ID = "edit.insert_character"

ResolutionStatus = Literal["control", "printable", "ignored"]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Action selected for an event; ``binding`` is ``None`` for printables."""

    action: ActionRef
    binding: Optional[Binding] = None


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    status: ResolutionStatus
    match: Optional[ResolutionMatch] = None
    prevent_default: bool = False

    @property
    def mutates(self) -> bool:
        return self.match is not None


class KeymapResolver:
    """Maps key events onto registered actions.

    A bound control key wins regardless of modifiers and asks the host to
    suppress its default handling. Otherwise a single character with no
    ctrl/meta/alt flag is printable and goes to the insert action.
    Anything else is ignored.
    """

    def __init__(
        self,
        registry: KeymapRegistry,
        *,
        insert_action_id: str = INSERT_ACTION_ID,
        logger_name: str | None = None,
    ) -> None:
        self._registry = registry
        self._insert_action_id = insert_action_id
        self._logger_name = logger_name
        self._cache: Optional[tuple[int, Dict[str, ResolutionMatch]]] = None

    def resolve(self, event: KeyEvent) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"key": event.token},
        ) as handle:
            control = self._control_table().get(event.key)
            if control is not None:
                handle.add_metadata("status", "control")
                handle.add_metadata("action", control.action.id)
                return ResolutionResult(
                    status="control", match=control, prevent_default=True
                )

            if event.is_printable and self._registry.has_action(
                self._insert_action_id
            ):
                handle.add_metadata("status", "printable")
                action = self._registry.get_action(self._insert_action_id)
                return ResolutionResult(
                    status="printable", match=ResolutionMatch(action=action)
                )

            handle.add_metadata("status", "ignored")
            return ResolutionResult(status="ignored")

    def is_control_key(self, key: str) -> bool:
        return key in self._control_table()

    def reset(self) -> None:
        self._cache = None

    def _control_table(self) -> Dict[str, ResolutionMatch]:
        revision = self._registry.revision()
        if self._cache is not None and self._cache[0] == revision:
            return self._cache[1]

        table = {
            binding.key: ResolutionMatch(
                action=self._registry.get_action(binding.action_id), binding=binding
            )
            for binding in self._registry.iter_bindings()
        }
        self._cache = (revision, table)
        return table


__all__ = [
    "INSERT_ACTION_ID",
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
]
