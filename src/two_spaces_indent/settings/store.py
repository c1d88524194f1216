"""Key-value stores the host uses to persist plugin settings."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Protocol

from two_spaces_indent.runtime import telemetry


class SettingsStore(Protocol):
    """Generic persistence owned by the host, not by the plugin."""

    def load_data(self) -> Optional[Mapping[str, Any]]:
        """Return previously saved data, or ``None`` when nothing is stored."""
        ...

    def save_data(self, data: Mapping[str, Any]) -> None:
        ...


class MemorySettingsStore:
    def __init__(self, initial: Optional[Mapping[str, Any]] = None) -> None:
        self._data: Optional[Dict[str, Any]] = (
            dict(initial) if initial is not None else None
        )

    def load_data(self) -> Optional[Mapping[str, Any]]:
        return dict(self._data) if self._data is not None else None

    def save_data(self, data: Mapping[str, Any]) -> None:
        self._data = dict(data)


class JsonSettingsStore:
    """Stores settings as a JSON object in a single file (``data.json``)."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def load_data(self) -> Optional[Mapping[str, Any]]:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            telemetry.record_event(
                "settings.unreadable",
                level="warning",
                data={"path": str(self.path), "error": str(exc)},
            )
            return None
        if not isinstance(data, dict):
            telemetry.record_event(
                "settings.unreadable",
                level="warning",
                data={"path": str(self.path), "error": "not an object"},
            )
            return None
        return data

    def save_data(self, data: Mapping[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(dict(data), indent=2) + "\n", encoding="utf-8")


__all__ = ["SettingsStore", "MemorySettingsStore", "JsonSettingsStore"]
