"""Built-in commands exposed by the plugin."""

from __future__ import annotations

from typing import TYPE_CHECKING, Mapping

from .models import CommandRef, Hotkey
from .registry import CommandRegistry

if TYPE_CHECKING:  # pragma: no cover
    from two_spaces_indent.plugin import TwoSpacesIndentPlugin

INCREASE_INDENT = "increase-indent"
DECREASE_INDENT = "decrease-indent"

DEFAULT_HOTKEYS: Mapping[str, tuple[str, ...]] = {
    INCREASE_INDENT: ("alt+right",),
    DECREASE_INDENT: ("alt+left",),
}


def default_commands(plugin: "TwoSpacesIndentPlugin") -> tuple[CommandRef, ...]:
    return (
        CommandRef(
            id=INCREASE_INDENT,
            name="Increase Indent",
            handler=plugin.increase_indent,
            hotkeys=tuple(Hotkey.parse(k) for k in DEFAULT_HOTKEYS[INCREASE_INDENT]),
            description="Indent the selected lines by two spaces",
        ),
        CommandRef(
            id=DECREASE_INDENT,
            name="Decrease Indent",
            handler=plugin.decrease_indent,
            hotkeys=tuple(Hotkey.parse(k) for k in DEFAULT_HOTKEYS[DECREASE_INDENT]),
            description="Remove two leading spaces from the selected lines",
        ),
    )


def load_default_commands(
    registry: CommandRegistry, plugin: "TwoSpacesIndentPlugin"
) -> None:
    for command in default_commands(plugin):
        registry.register(command)


__all__ = [
    "INCREASE_INDENT",
    "DECREASE_INDENT",
    "DEFAULT_HOTKEYS",
    "default_commands",
    "load_default_commands",
]
