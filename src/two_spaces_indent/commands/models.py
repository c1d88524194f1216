"""Dataclasses describing user-invocable commands and their hotkeys."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable


def _normalize_modifiers(modifiers: Iterable[str]) -> tuple[str, ...]:
    values = tuple(m.strip().lower() for m in modifiers if m.strip())
    return tuple(sorted(dict.fromkeys(values)))


@dataclass(frozen=True, slots=True)
class Hotkey:
    """Single normalized key chord, e.g. ``alt+right``."""

    key: str
    modifiers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        key = self.key.strip().lower()
        if not key:
            raise ValueError("key cannot be empty")
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "modifiers", _normalize_modifiers(self.modifiers))

    @classmethod
    def parse(cls, chord: str) -> "Hotkey":
        parts = [part for part in chord.split("+") if part.strip()]
        if not parts:
            raise ValueError("chord cannot be empty")
        return cls(key=parts[-1], modifiers=tuple(parts[:-1]))

    @property
    def token(self) -> str:
        if self.modifiers:
            return "+".join(self.modifiers + (self.key,))
        return self.key


@dataclass(frozen=True, slots=True)
class CommandRef:
    """Named action plus the metadata hosts need to list and bind it."""

    id: str
    name: str
    handler: Callable[..., object]
    hotkeys: tuple[Hotkey, ...] = ()
    description: str = ""
    telemetry_name: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CommandRef id cannot be empty")
        if not self.name:
            raise ValueError("CommandRef name cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        hotkeys = tuple(
            key if isinstance(key, Hotkey) else Hotkey.parse(str(key))
            for key in self.hotkeys
        )
        object.__setattr__(self, "hotkeys", hotkeys)
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id)

    def __call__(self, *args: object, **kwargs: object) -> object:
        return self.handler(*args, **kwargs)


__all__ = ["Hotkey", "CommandRef"]
