"""Line-based document snapshots handed to the indent operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence


@dataclass(slots=True)
class BufferDocument:
    """List-of-lines text storage.

    Lines never carry their newline. ``from_text`` splits on ``\\n`` only so
    that ``text`` always reproduces the original string, including a trailing
    newline (kept as a final empty line).
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "BufferDocument":
        return cls(_lines=text.split("\n"), version=0)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def replace(self, lines: Iterable[str]) -> "BufferDocument":
        """Return a new document with the provided lines and bumped version."""

        collected = list(lines)
        return BufferDocument(_lines=collected or [""], version=self.version + 1)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def get_line(self, index: int) -> str:
        return self._lines[index]
