"""Command registry responsible for storing commands and their hotkeys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from two_spaces_indent.runtime.telemetry import span

from .models import CommandRef, Hotkey


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    command_count: int
    hotkey_count: int


class HotkeyConflictError(RuntimeError):
    """Raised when a command claims a hotkey another command already owns."""

    def __init__(self, command: CommandRef, hotkey: Hotkey, owner: str) -> None:
        super().__init__(
            f"Command '{command.id}' hotkey '{hotkey.token}' is already bound to '{owner}'"
        )
        self.command = command
        self.hotkey = hotkey
        self.owner = owner


class CommandRegistry:
    """Owns command references and the hotkey index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[str, CommandRef] = {}
        self._hotkeys: Dict[str, str] = {}
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get(self, command_id: str) -> CommandRef:
        try:
            return self._commands[command_id]
        except KeyError as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register(self, command: CommandRef, *, replace: bool = False) -> CommandRef:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ) as handle:
            if not replace and command.id in self._commands:
                raise ValueError(f"Command '{command.id}' already registered")

            existing = self._commands.get(command.id)
            for hotkey in command.hotkeys:
                owner = self._hotkeys.get(hotkey.token)
                if owner is not None and owner != command.id:
                    handle.add_metadata("conflict", hotkey.token)
                    raise HotkeyConflictError(command, hotkey, owner)

            if existing is not None:
                self._unindex(existing)
            self._commands[command.id] = command
            self._index(command)
            self._revision += 1
            return command

    def unregister(self, command_id: str) -> Optional[CommandRef]:
        command = self._commands.pop(command_id, None)
        if command is None:
            return None
        self._unindex(command)
        self._revision += 1
        return command

    def command_for_hotkey(self, chord: str | Hotkey) -> Optional[CommandRef]:
        hotkey = chord if isinstance(chord, Hotkey) else Hotkey.parse(chord)
        command_id = self._hotkeys.get(hotkey.token)
        if command_id is None:
            return None
        return self._commands[command_id]

    def iter_commands(self) -> Iterator[CommandRef]:
        yield from self._commands.values()

    def execute(self, command_id: str, *args: object, **kwargs: object) -> object:
        command = self.get(command_id)
        with span(
            f"command::{command.telemetry_name}",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id},
        ):
            return command(*args, **kwargs)

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands),
            hotkey_count=len(self._hotkeys),
        )

    def _index(self, command: CommandRef) -> None:
        for hotkey in command.hotkeys:
            self._hotkeys[hotkey.token] = command.id

    def _unindex(self, command: CommandRef) -> None:
        for hotkey in command.hotkeys:
            if self._hotkeys.get(hotkey.token) == command.id:
                del self._hotkeys[hotkey.token]


__all__ = ["CommandRegistry", "HotkeyConflictError", "RegistryStats"]
