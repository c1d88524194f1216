"""Indent level arithmetic for two-space indentation."""

from __future__ import annotations

INDENT_UNIT = "  "
INDENT_WIDTH = len(INDENT_UNIT)


def count_leading_spaces(line: str) -> int:
    # Only ' ' counts; a tab ends the run.
    return len(line) - len(line.lstrip(" "))


def compute_indent_level(line: str) -> int:
    return count_leading_spaces(line) // INDENT_WIDTH


def has_removable_indent(line: str) -> bool:
    return line.startswith(INDENT_UNIT)


__all__ = [
    "INDENT_UNIT",
    "INDENT_WIDTH",
    "count_leading_spaces",
    "compute_indent_level",
    "has_removable_indent",
]
