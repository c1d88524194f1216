"""In-memory host editor used by tests and the Textual adapter."""

from __future__ import annotations

from typing import Callable, List, Optional, Sequence

from .document import BufferDocument
from .state import Selection
from .validation import ensure_selection


class EditorBuffer:
    """Keeps a document, its selections and the notices shown to the user.

    Implements :class:`~two_spaces_indent.buffer.sync.HostEditor`.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        selections: Sequence[Selection] = (),
        on_notify: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self._selections: List[Selection] = [ensure_selection(s) for s in selections]
        self.notices: List[str] = []
        self._on_notify = on_notify

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        selections: Sequence[Selection] = (),
        name: str = "default",
    ) -> "EditorBuffer":
        return cls(
            name=name,
            document=BufferDocument.from_text(text),
            selections=selections,
        )

    @property
    def text(self) -> str:
        return self.document.text

    def read_lines(self) -> Sequence[str]:
        return self.document.snapshot()

    def write_lines(self, lines: Sequence[str]) -> None:
        self.document = self.document.replace(lines)

    def read_selections(self) -> Sequence[Selection]:
        return tuple(self._selections)

    def write_selections(self, selections: Sequence[Selection]) -> None:
        self._selections = [ensure_selection(s) for s in selections]

    def notify(self, message: str) -> None:
        self.notices.append(message)
        if self._on_notify is not None:
            self._on_notify(message)
