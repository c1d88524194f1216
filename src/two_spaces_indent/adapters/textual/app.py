"""Executable Textual app that hosts the indent commands."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Sequence

try:  # pragma: no cover - imported only when the demo is run
    from textual.app import App, ComposeResult
    from textual.binding import Binding
    from textual.containers import Vertical
    from textual.screen import ModalScreen
    from textual.widgets import Footer, Header, Input, Label, Static, TextArea
    from textual.widgets.text_area import Selection as TextSelection
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use two_spaces_indent.adapters.textual.app"
    ) from exc

from two_spaces_indent.buffer import Position, Selection
from two_spaces_indent.commands.defaults import DEFAULT_HOTKEYS
from two_spaces_indent.plugin import TwoSpacesIndentPlugin
from two_spaces_indent.runtime import telemetry
from two_spaces_indent.settings import (
    MAX_INDENT_LEVEL,
    MIN_INDENT_LEVEL,
    JsonSettingsStore,
    validate_max_indent_level,
)

from .controller import TextualIndentAdapter, TextualUIHooks

DEFAULT_SETTINGS_FILE = ".two_spaces_indent.json"


@dataclass
class UIState:
    status_text: str = ""


class TextAreaHost:
    """``HostEditor`` backed by a Textual ``TextArea``.

    ``TextArea`` has a single selection, so only the first selection written
    back is applied. Whole-document writes go through ``replace`` so the
    widget's own undo history keeps working.
    """

    def __init__(self, area: TextArea, notify: Callable[[str], None]) -> None:
        self.area = area
        self._notify = notify

    def read_lines(self) -> Sequence[str]:
        return self.area.text.split("\n")

    def write_lines(self, lines: Sequence[str]) -> None:
        self.area.replace("\n".join(lines), (0, 0), self.area.document.end)

    def read_selections(self) -> Sequence[Selection]:
        start, end = self.area.selection
        return (Selection(head=Position(*end), anchor=Position(*start)),)

    def write_selections(self, selections: Sequence[Selection]) -> None:
        if not selections:
            return
        first = selections[0]
        self.area.selection = TextSelection(
            start=self._clamp(first.anchor), end=self._clamp(first.head)
        )

    def notify(self, message: str) -> None:
        self._notify(message)

    def _clamp(self, position: Position) -> tuple[int, int]:
        document = self.area.document
        row = min(position.line, document.line_count - 1)
        col = min(position.ch, len(document.get_line(row)))
        return (row, col)


class SettingsScreen(ModalScreen[Optional[int]]):
    """Edit the maximum indent level."""

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, current: int) -> None:
        super().__init__()
        self._current = current

    def compose(self) -> ComposeResult:
        with Vertical(id="settings-dialog"):
            yield Label("Two Spaces Indent Settings")
            yield Label(
                f"Maximum indent levels ({MIN_INDENT_LEVEL}-{MAX_INDENT_LEVEL}, default 10)"
            )
            yield Input(value=str(self._current), type="integer", id="max-level")
            yield Static("", id="settings-error")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        try:
            value = validate_max_indent_level(int(event.value))
        except ValueError as exc:
            self.query_one("#settings-error", Static).update(str(exc))
            return
        self.dismiss(value)

    def action_cancel(self) -> None:
        self.dismiss(None)


class TwoSpacesIndentApp(App[None]):
    """Minimal Textual editor with the indent commands bound to keys."""

    CSS = """
	#editor {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}

	#settings-dialog {
		width: 60;
		height: auto;
		border: round $accent;
		padding: 1 2;
		background: $surface;
	}
	"""

    BINDINGS = [
        Binding(
            chord,
            f"run_command('{command_id}')",
            command_id.replace("-", " ").title(),
            priority=True,
        )
        for command_id, chords in DEFAULT_HOTKEYS.items()
        for chord in chords
    ] + [
        Binding("f2", "open_settings", "Settings"),
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        text: str = "",
        settings_path: str | Path = DEFAULT_SETTINGS_FILE,
    ) -> None:
        super().__init__()
        self._initial_text = text
        self.plugin = TwoSpacesIndentPlugin(store=JsonSettingsStore(settings_path))
        self.adapter: TextualIndentAdapter | None = None
        self.ui_state = UIState()

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield TextArea(self._initial_text, id="editor")
        yield Static("", id="status-line")
        yield Footer()

    def on_mount(self) -> None:
        area = self.query_one("#editor", TextArea)
        host = TextAreaHost(area, notify=lambda msg: self.notify(msg, severity="warning"))
        hooks = TextualUIHooks(update_status=self._update_status)
        self.adapter = TextualIndentAdapter(self.plugin, host, hooks)
        self._update_status(
            f"Max indent level: {self.plugin.settings.max_indent_level}"
        )
        area.focus()

    def action_run_command(self, command_id: str) -> None:
        if self.adapter is not None:
            self.adapter.run_command(command_id)

    def action_open_settings(self) -> None:
        self.push_screen(
            SettingsScreen(self.plugin.settings.max_indent_level),
            self._apply_max_level,
        )

    def _apply_max_level(self, value: Optional[int]) -> None:
        if value is None:
            return
        self.plugin.update_max_indent_level(value)
        self._update_status(f"Max indent level: {value}")

    def _update_status(self, status: str) -> None:
        self.ui_state.status_text = status
        self.query_one("#status-line", Static).update(status)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Edit a file with two-space indent commands."
    )
    parser.add_argument("path", nargs="?", help="File to open (read-only demo)")
    parser.add_argument(
        "--settings-file",
        default=os.environ.get("TWO_SPACES_INDENT_SETTINGS", DEFAULT_SETTINGS_FILE),
        help=f"JSON file holding the plugin settings (default: {DEFAULT_SETTINGS_FILE})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset="production")
    text = Path(args.path).read_text(encoding="utf-8") if args.path else ""
    app = TwoSpacesIndentApp(text=text, settings_path=args.settings_file)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
