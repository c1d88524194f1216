"""Command surface: named actions, hotkeys and their registry."""

from .defaults import (
    DECREASE_INDENT,
    INCREASE_INDENT,
    default_commands,
    load_default_commands,
)
from .models import CommandRef, Hotkey
from .registry import CommandRegistry, HotkeyConflictError, RegistryStats

__all__ = [
    "CommandRef",
    "Hotkey",
    "CommandRegistry",
    "HotkeyConflictError",
    "RegistryStats",
    "INCREASE_INDENT",
    "DECREASE_INDENT",
    "default_commands",
    "load_default_commands",
]
