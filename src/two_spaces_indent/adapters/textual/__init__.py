"""Textual host integration; ``app`` needs the ``textual`` package."""

from .controller import TextualIndentAdapter, TextualUIHooks

__all__ = ["TextualIndentAdapter", "TextualUIHooks"]
