"""Line indent computation and the increase/decrease operations."""

from .adjuster import (
    NOTHING_TO_DECREASE_MESSAGE,
    AdjustResult,
    Notice,
    affected_lines,
    decrease_indent,
    increase_indent,
    max_level_message,
)
from .levels import (
    INDENT_UNIT,
    INDENT_WIDTH,
    compute_indent_level,
    count_leading_spaces,
    has_removable_indent,
)

__all__ = [
    "AdjustResult",
    "Notice",
    "NOTHING_TO_DECREASE_MESSAGE",
    "affected_lines",
    "increase_indent",
    "decrease_indent",
    "max_level_message",
    "INDENT_UNIT",
    "INDENT_WIDTH",
    "compute_indent_level",
    "count_leading_spaces",
    "has_removable_indent",
]
