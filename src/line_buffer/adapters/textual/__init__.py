"""Textual host adapter. ``app`` needs the ``textual`` package at import."""

from .controller import TextualBufferAdapter, TextualUIHooks, translate_key

__all__ = ["TextualBufferAdapter", "TextualUIHooks", "translate_key"]
