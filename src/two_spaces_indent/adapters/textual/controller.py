"""Adapter that routes key chords to indent commands and reports back to the UI."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from two_spaces_indent.buffer import HostEditor
from two_spaces_indent.indent import AdjustResult
from two_spaces_indent.plugin import TwoSpacesIndentPlugin


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


class TextualIndentAdapter:
    """Bridges key chords and command ids to the plugin for one host editor."""

    def __init__(
        self,
        plugin: TwoSpacesIndentPlugin,
        host: HostEditor,
        hooks: Optional[TextualUIHooks] = None,
    ) -> None:
        self.plugin = plugin.load()
        self.host = host
        self.hooks = hooks or TextualUIHooks()

    def handle_key(self, chord: str) -> Optional[AdjustResult]:
        """Run the command bound to ``chord``; ``None`` when nothing is bound."""

        command = self.plugin.commands.command_for_hotkey(chord)
        if command is None:
            return None
        self._log("key ->", chord=chord, command=command.id)
        return self.run_command(command.id)

    def run_command(self, command_id: str) -> AdjustResult:
        result = self.plugin.commands.execute(command_id, self.host)
        if not isinstance(result, AdjustResult):
            raise TypeError(f"Command '{command_id}' returned {type(result).__name__}")
        self.hooks.update_status(self._status_for(command_id, result))
        self._log(
            "result <-",
            command=command_id,
            modified=list(result.modified_lines),
            notice=result.notice.kind if result.notice else None,
        )
        return result

    def _status_for(self, command_id: str, result: AdjustResult) -> str:
        if result.notice is not None:
            return result.notice.message
        count = len(result.modified_lines)
        noun = "line" if count == 1 else "lines"
        return f"{self.plugin.commands.get(command_id).name}: {count} {noun}"

    def _log(self, prefix: str, **fields: object) -> None:
        parts = [prefix]
        parts.extend(f"{key}={value!r}" for key, value in fields.items() if value is not None)
        self.hooks.log(" ".join(parts))


__all__ = ["TextualIndentAdapter", "TextualUIHooks"]
