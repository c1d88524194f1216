"""Document, selection and host-editor abstractions."""

from .buffer import EditorBuffer
from .document import BufferDocument
from .state import Position, Selection
from .sync import BufferValidationError, HostEditor
from .validation import ensure_position, ensure_selection

__all__ = [
    "BufferDocument",
    "EditorBuffer",
    "Position",
    "Selection",
    "HostEditor",
    "BufferValidationError",
    "ensure_position",
    "ensure_selection",
]
