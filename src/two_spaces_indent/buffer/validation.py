"""Validation helpers shared across buffer services."""

from __future__ import annotations

from .state import Position, Selection
from .sync import BufferValidationError


def ensure_position(position: Position) -> Position:
    if position.line < 0:
        raise BufferValidationError("Line out of range", position=position)
    if position.ch < 0:
        raise BufferValidationError("Column out of range", position=position)
    return position


def ensure_selection(selection: Selection) -> Selection:
    ensure_position(selection.head)
    ensure_position(selection.anchor)
    return selection
