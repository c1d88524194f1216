"""Cursor positions and selection ranges exchanged with host editors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Zero-based ``(line, ch)`` location inside a document."""

    line: int
    ch: int

    def shifted(self, delta: int) -> "Position":
        """Return the position moved by ``delta`` columns, never below 0."""

        return Position(self.line, max(0, self.ch + delta))


@dataclass(frozen=True, slots=True)
class Selection:
    """A head/anchor pair; head is where the cursor sits."""

    head: Position
    anchor: Position

    @classmethod
    def caret(cls, line: int, ch: int) -> "Selection":
        position = Position(line, ch)
        return cls(head=position, anchor=position)

    @property
    def first_line(self) -> int:
        return min(self.head.line, self.anchor.line)

    @property
    def last_line(self) -> int:
        return max(self.head.line, self.anchor.line)

    def line_range(self) -> range:
        return range(self.first_line, self.last_line + 1)
