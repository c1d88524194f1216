"""Plugin façade wiring settings, commands and a host editor together."""

from __future__ import annotations

from typing import Any, Callable, Optional

from two_spaces_indent.buffer import HostEditor
from two_spaces_indent.commands import CommandRegistry, load_default_commands
from two_spaces_indent.indent import AdjustResult, decrease_indent, increase_indent
from two_spaces_indent.runtime import telemetry
from two_spaces_indent.settings import (
    IndentSettings,
    MemorySettingsStore,
    SettingsStore,
)

Operation = Callable[..., AdjustResult]


class TwoSpacesIndentPlugin:
    """Owns the settings and runs indent commands against a host editor."""

    def __init__(
        self,
        *,
        store: Optional[SettingsStore] = None,
        registry: Optional[CommandRegistry] = None,
        logger_name: str = "two_spaces_indent.plugin",
    ) -> None:
        self.store = store or MemorySettingsStore()
        self.settings = IndentSettings()
        self.commands = registry or CommandRegistry(
            logger_name="two_spaces_indent.commands"
        )
        self._logger_name = logger_name
        self._loaded = False

    def load(self) -> "TwoSpacesIndentPlugin":
        """Load persisted settings and register the built-in commands."""

        if self._loaded:
            return self
        self.load_settings()
        load_default_commands(self.commands, self)
        self._loaded = True
        telemetry.record_event(
            "plugin.loaded",
            data={"max_indent_level": self.settings.max_indent_level},
            logger_name=self._logger_name,
        )
        return self

    def load_settings(self) -> IndentSettings:
        self.settings = IndentSettings.from_mapping(self.store.load_data())
        return self.settings

    def save_settings(self) -> None:
        self.store.save_data(self.settings.to_mapping())

    def update_max_indent_level(self, value: Any) -> IndentSettings:
        """Change the cap from the settings UI and persist it."""

        self.settings = self.settings.with_max_indent_level(value)
        self.save_settings()
        telemetry.record_event(
            "settings.updated",
            data={"max_indent_level": self.settings.max_indent_level},
            logger_name=self._logger_name,
        )
        return self.settings

    def increase_indent(self, editor: HostEditor) -> AdjustResult:
        return self._run("increase", increase_indent, editor)

    def decrease_indent(self, editor: HostEditor) -> AdjustResult:
        return self._run("decrease", decrease_indent, editor)

    def _run(self, label: str, operation: Operation, editor: HostEditor) -> AdjustResult:
        settings = self.settings
        with telemetry.span(
            f"indent::{label}",
            logger_name=self._logger_name,
            component="indent",
            metadata={"max_indent_level": settings.max_indent_level},
        ) as handle:
            selections = editor.read_selections()
            if not selections:
                handle.add_metadata("status", "no_selection")
                return AdjustResult(lines=tuple(editor.read_lines()), selections=())

            result = operation(editor.read_lines(), selections, settings)
            editor.write_lines(result.lines)
            editor.write_selections(result.selections)
            handle.add_metadata("modified", len(result.modified_lines))

            if result.notice is not None:
                handle.add_metadata("notice", result.notice.kind)
                telemetry.record_event(
                    f"indent.{result.notice.kind}",
                    level="warning",
                    data={"message": result.notice.message},
                    logger_name=self._logger_name,
                )
                editor.notify(result.notice.message)
            return result


__all__ = ["TwoSpacesIndentPlugin"]
