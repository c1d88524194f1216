import pytest

from two_spaces_indent.commands import (
    CommandRef,
    CommandRegistry,
    Hotkey,
    HotkeyConflictError,
)


def make_command(
    command_id: str = "test-command",
    *,
    hotkeys: tuple[str, ...] = (),
    result: object = None,
) -> CommandRef:
    return CommandRef(
        id=command_id,
        name=command_id.replace("-", " ").title(),
        handler=lambda *args, **kwargs: result,
        hotkeys=tuple(Hotkey.parse(chord) for chord in hotkeys),
    )


def test_hotkey_parse_normalizes() -> None:
    assert Hotkey.parse("Alt+Right").token == "alt+right"
    assert Hotkey.parse("shift+ctrl+a") == Hotkey("a", ("ctrl", "shift"))
    assert Hotkey.parse("f2").token == "f2"


def test_hotkey_rejects_empty() -> None:
    with pytest.raises(ValueError):
        Hotkey.parse("")
    with pytest.raises(ValueError):
        Hotkey("")
    with pytest.raises(ValueError):
        Hotkey("  ")


def test_hotkey_key_is_stripped() -> None:
    assert Hotkey(" F2 ").key == "f2"


def test_command_ref_validation() -> None:
    with pytest.raises(ValueError):
        CommandRef(id="", name="x", handler=print)
    with pytest.raises(ValueError):
        CommandRef(id="x", name="", handler=print)
    with pytest.raises(TypeError):
        CommandRef(id="x", name="X", handler="not callable")  # type: ignore[arg-type]


def test_command_ref_defaults_telemetry_name() -> None:
    command = make_command("increase-indent")

    assert command.telemetry_name == "increase-indent"


def test_command_ref_accepts_string_hotkeys() -> None:
    command = CommandRef(id="x", name="X", handler=print, hotkeys=("Alt+Up",))  # type: ignore[arg-type]

    assert command.hotkeys == (Hotkey("up", ("alt",)),)


def test_register_command_success() -> None:
    registry = CommandRegistry()
    command = make_command(hotkeys=("alt+right",))

    registry.register(command)

    assert registry.stats().command_count == 1
    assert registry.stats().hotkey_count == 1
    assert list(registry.iter_commands()) == [command]
    assert registry.command_for_hotkey("alt+right") is command


def test_register_duplicate_id_rejected() -> None:
    registry = CommandRegistry()
    registry.register(make_command())

    with pytest.raises(ValueError):
        registry.register(make_command())


def test_register_with_replace() -> None:
    registry = CommandRegistry()
    first = make_command(hotkeys=("alt+right",))
    second = make_command(hotkeys=("alt+up",))
    registry.register(first)

    registry.register(second, replace=True)

    assert list(registry.iter_commands()) == [second]
    assert registry.command_for_hotkey("alt+right") is None
    assert registry.command_for_hotkey("alt+up") is second


def test_hotkey_conflict_detection() -> None:
    registry = CommandRegistry()
    registry.register(make_command("first", hotkeys=("alt+right",)))

    with pytest.raises(HotkeyConflictError) as info:
        registry.register(make_command("second", hotkeys=("Alt+Right",)))

    assert info.value.owner == "first"
    assert registry.stats().command_count == 1


def test_register_bumps_revision() -> None:
    registry = CommandRegistry()
    before = registry.revision()

    registry.register(make_command())

    assert registry.revision() == before + 1


def test_execute_returns_handler_result() -> None:
    registry = CommandRegistry()
    registry.register(make_command(result="done"))

    assert registry.execute("test-command", object()) == "done"


def test_execute_propagates_handler_errors() -> None:
    registry = CommandRegistry()

    def boom(_editor: object) -> None:
        raise RuntimeError("boom")

    registry.register(CommandRef(id="boom", name="Boom", handler=boom))

    with pytest.raises(RuntimeError, match="boom"):
        registry.execute("boom", object())


def test_unknown_command() -> None:
    registry = CommandRegistry()

    with pytest.raises(KeyError):
        registry.get("missing")
    with pytest.raises(KeyError):
        registry.execute("missing")


def test_unregister() -> None:
    registry = CommandRegistry()
    command = make_command(hotkeys=("alt+right",))
    registry.register(command)

    removed = registry.unregister("test-command")

    assert removed == command
    assert registry.stats().command_count == 0
    assert registry.command_for_hotkey("alt+right") is None
    assert registry.unregister("test-command") is None
