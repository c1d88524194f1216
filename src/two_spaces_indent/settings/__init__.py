"""Plugin settings and their persistence."""

from .models import (
    DEFAULT_MAX_INDENT_LEVEL,
    MAX_INDENT_LEVEL,
    MIN_INDENT_LEVEL,
    ColumnShift,
    IndentSettings,
    SettingsValidationError,
    validate_max_indent_level,
)
from .store import JsonSettingsStore, MemorySettingsStore, SettingsStore

__all__ = [
    "ColumnShift",
    "IndentSettings",
    "SettingsValidationError",
    "validate_max_indent_level",
    "MIN_INDENT_LEVEL",
    "MAX_INDENT_LEVEL",
    "DEFAULT_MAX_INDENT_LEVEL",
    "SettingsStore",
    "MemorySettingsStore",
    "JsonSettingsStore",
]
