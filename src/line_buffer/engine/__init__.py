"""Command interface over the line buffer."""

from .dispatch import KeyResult, apply_key, default_resolver, dispatch_key
from .session import LineBuffer

__all__ = ["KeyResult", "LineBuffer", "apply_key", "default_resolver", "dispatch_key"]
