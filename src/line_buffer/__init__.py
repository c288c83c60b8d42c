"""UI-agnostic line buffer editing model."""

__all__ = [
    "adapters",
    "buffer",
    "actions",
    "engine",
    "keymaps",
    "runtime",
]

__version__ = "0.1.0"
