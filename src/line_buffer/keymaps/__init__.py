"""Key classification, action registry and default control-key bindings."""

from .models import ActionRef, Binding, KeyEvent
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import (
    INSERT_ACTION_ID,
    KeymapResolver,
    ResolutionMatch,
    ResolutionResult,
)
from .defaults import CONTROL_KEYS, build_default_resolver, load_default_keymaps

__all__ = [
    "ActionRef",
    "Binding",
    "KeyEvent",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "INSERT_ACTION_ID",
    "KeymapResolver",
    "ResolutionMatch",
    "ResolutionResult",
    "CONTROL_KEYS",
    "build_default_resolver",
    "load_default_keymaps",
]
