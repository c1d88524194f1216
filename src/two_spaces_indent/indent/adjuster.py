"""Increase/decrease the two-space indent of every selected line.

Both operations are pure: they take a snapshot of the document lines, the
selection set and an :class:`IndentSettings`, and return an
:class:`AdjustResult` the caller writes back to its host.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Collection, Iterable, Literal, Optional, Sequence

from two_spaces_indent.buffer.state import Position, Selection
from two_spaces_indent.settings import IndentSettings

from .levels import INDENT_UNIT, INDENT_WIDTH, compute_indent_level, has_removable_indent

NoticeKind = Literal["max_level_reached", "nothing_to_decrease"]

NOTHING_TO_DECREASE_MESSAGE = "No indentation to decrease"


@dataclass(frozen=True, slots=True)
class Notice:
    """Informational message for the user; never an error."""

    kind: NoticeKind
    message: str


@dataclass(frozen=True, slots=True)
class AdjustResult:
    lines: tuple[str, ...]
    selections: tuple[Selection, ...]
    notice: Optional[Notice] = None
    modified_lines: tuple[int, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.modified_lines)


def max_level_message(max_level: int) -> str:
    return f"Maximum indent level ({max_level}) reached"


def affected_lines(selections: Iterable[Selection], line_count: int) -> list[int]:
    """Line indices touched by any selection, each once, in ascending order.

    Indices are collected first-touch-wins in selection order; lines past the
    end of the document are dropped.
    """

    touched = dict.fromkeys(
        index
        for selection in selections
        for index in selection.line_range()
        if 0 <= index < line_count
    )
    return sorted(touched)


def increase_indent(
    lines: Sequence[str],
    selections: Sequence[Selection],
    settings: IndentSettings,
) -> AdjustResult:
    if not selections:
        return AdjustResult(lines=tuple(lines), selections=tuple(selections))

    updated = list(lines)
    modified: list[int] = []
    capped = False
    for index in affected_lines(selections, len(updated)):
        if compute_indent_level(updated[index]) < settings.max_indent_level:
            updated[index] = INDENT_UNIT + updated[index]
            modified.append(index)
        else:
            capped = True

    notice = None
    if capped:
        notice = Notice(
            "max_level_reached", max_level_message(settings.max_indent_level)
        )
    return AdjustResult(
        lines=tuple(updated),
        selections=_shift_selections(selections, INDENT_WIDTH, modified, settings),
        notice=notice,
        modified_lines=tuple(modified),
    )


def decrease_indent(
    lines: Sequence[str],
    selections: Sequence[Selection],
    settings: Optional[IndentSettings] = None,
) -> AdjustResult:
    settings = settings or IndentSettings()
    if not selections:
        return AdjustResult(lines=tuple(lines), selections=tuple(selections))

    updated = list(lines)
    modified: list[int] = []
    for index in affected_lines(selections, len(updated)):
        if has_removable_indent(updated[index]):
            updated[index] = updated[index][INDENT_WIDTH:]
            modified.append(index)

    notice = None
    if not modified:
        notice = Notice("nothing_to_decrease", NOTHING_TO_DECREASE_MESSAGE)
    return AdjustResult(
        lines=tuple(updated),
        selections=_shift_selections(selections, -INDENT_WIDTH, modified, settings),
        notice=notice,
        modified_lines=tuple(modified),
    )


def _shift_selections(
    selections: Sequence[Selection],
    delta: int,
    modified: Collection[int],
    settings: IndentSettings,
) -> tuple[Selection, ...]:
    # "always" shifts even positions on capped or untouched lines.
    if settings.column_shift == "always":
        return tuple(
            Selection(head=s.head.shifted(delta), anchor=s.anchor.shifted(delta))
            for s in selections
        )

    touched = set(modified)

    def move(position: Position) -> Position:
        return position.shifted(delta) if position.line in touched else position

    return tuple(Selection(head=move(s.head), anchor=move(s.anchor)) for s in selections)


__all__ = [
    "AdjustResult",
    "Notice",
    "NoticeKind",
    "NOTHING_TO_DECREASE_MESSAGE",
    "affected_lines",
    "decrease_indent",
    "increase_indent",
    "max_level_message",
]
