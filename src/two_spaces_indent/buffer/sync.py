"""Adapter boundary types for exchanging text with host editors."""

from __future__ import annotations

from typing import Protocol, Sequence

from .state import Position, Selection


class HostEditor(Protocol):
    """Everything the indent commands need from the editor hosting them.

    The host owns the document, the selection set and the undo history; the
    commands only read a snapshot and write a full replacement back.
    """

    def read_lines(self) -> Sequence[str]:
        """Return the document as a sequence of lines without newlines."""
        ...

    def write_lines(self, lines: Sequence[str]) -> None:
        """Replace the whole document."""
        ...

    def read_selections(self) -> Sequence[Selection]:
        ...

    def write_selections(self, selections: Sequence[Selection]) -> None:
        ...

    def notify(self, message: str) -> None:
        """Show a short, non-fatal message to the user."""
        ...


class BufferValidationError(RuntimeError):
    """Raised when a host provides out-of-bounds cursor info."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position
