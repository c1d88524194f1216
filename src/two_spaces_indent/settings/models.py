"""The configuration object passed into every indent operation."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Mapping, Optional

from two_spaces_indent.runtime import telemetry

ColumnShift = Literal["always", "modified"]

MIN_INDENT_LEVEL = 1
MAX_INDENT_LEVEL = 20
DEFAULT_MAX_INDENT_LEVEL = 10

MAX_LEVEL_KEY = "maxIndentLevel"
# Key written by the first release of the plugin.
LEGACY_MAX_LEVEL_KEY = "maxIndentLevels"
COLUMN_SHIFT_KEY = "columnShift"

_COLUMN_SHIFTS: tuple[str, ...] = ("always", "modified")


class SettingsValidationError(ValueError):
    """Raised when a setting is changed to a value outside its bounds."""

    def __init__(self, key: str, value: Any, message: str) -> None:
        super().__init__(message)
        self.key = key
        self.value = value


@dataclass(frozen=True, slots=True)
class IndentSettings:
    """User-tunable indent behaviour.

    ``column_shift`` selects how cursor columns follow an adjust:
    ``"always"`` moves every selection by two columns whether or not its line
    changed; ``"modified"`` only moves positions whose own line was rewritten.
    """

    max_indent_level: int = DEFAULT_MAX_INDENT_LEVEL
    column_shift: ColumnShift = "always"

    def __post_init__(self) -> None:
        validate_max_indent_level(self.max_indent_level)
        if self.column_shift not in _COLUMN_SHIFTS:
            raise SettingsValidationError(
                COLUMN_SHIFT_KEY,
                self.column_shift,
                f"column_shift must be one of {_COLUMN_SHIFTS}",
            )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "IndentSettings":
        """Merge stored data over the defaults.

        Unknown keys are ignored. A stored maximum outside the allowed range
        is clamped into it; an unreadable one falls back to the default.
        """

        if not data:
            return cls()

        raw_level = data.get(MAX_LEVEL_KEY, data.get(LEGACY_MAX_LEVEL_KEY))
        level = _coerce_level(raw_level)
        shift = data.get(COLUMN_SHIFT_KEY, "always")
        if shift not in _COLUMN_SHIFTS:
            telemetry.record_event(
                "settings.invalid",
                level="warning",
                data={"key": COLUMN_SHIFT_KEY, "value": shift},
            )
            shift = "always"
        return cls(max_indent_level=level, column_shift=shift)

    def to_mapping(self) -> Dict[str, Any]:
        return {
            MAX_LEVEL_KEY: self.max_indent_level,
            COLUMN_SHIFT_KEY: self.column_shift,
        }

    def with_max_indent_level(self, value: Any) -> "IndentSettings":
        return replace(self, max_indent_level=validate_max_indent_level(value))


def validate_max_indent_level(value: Any) -> int:
    # bool is an int subclass; a checkbox value is not a level.
    if isinstance(value, bool) or not isinstance(value, int):
        raise SettingsValidationError(
            MAX_LEVEL_KEY, value, "max_indent_level must be an integer"
        )
    if not MIN_INDENT_LEVEL <= value <= MAX_INDENT_LEVEL:
        raise SettingsValidationError(
            MAX_LEVEL_KEY,
            value,
            f"max_indent_level must be between {MIN_INDENT_LEVEL} "
            f"and {MAX_INDENT_LEVEL}, got {value}",
        )
    return value


def _coerce_level(raw: Any) -> int:
    if raw is None:
        return DEFAULT_MAX_INDENT_LEVEL
    try:
        if isinstance(raw, bool) or (isinstance(raw, float) and not raw.is_integer()):
            raise ValueError(raw)
        level = int(raw)
    except (TypeError, ValueError):
        telemetry.record_event(
            "settings.invalid",
            level="warning",
            data={"key": MAX_LEVEL_KEY, "value": raw},
        )
        return DEFAULT_MAX_INDENT_LEVEL
    clamped = max(MIN_INDENT_LEVEL, min(level, MAX_INDENT_LEVEL))
    if clamped != level:
        telemetry.record_event(
            "settings.clamped",
            level="warning",
            data={"key": MAX_LEVEL_KEY, "value": level, "clamped": clamped},
        )
    return clamped


__all__ = [
    "ColumnShift",
    "IndentSettings",
    "SettingsValidationError",
    "validate_max_indent_level",
    "MIN_INDENT_LEVEL",
    "MAX_INDENT_LEVEL",
    "DEFAULT_MAX_INDENT_LEVEL",
]
