from pathlib import Path

import pytest

from two_spaces_indent.runtime import telemetry


@pytest.mark.parametrize("preset", ["verbose", "development", "performance"])
def test_configure_rejects_unknown_preset(preset: str) -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset=preset)


@pytest.mark.parametrize("preset", telemetry.PRESETS)
def test_configure_accepts_known_presets(
    preset: str, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("TWO_SPACES_INDENT_LOG_FILE", str(tmp_path / "indent.log"))
    try:
        telemetry.configure(preset=preset)
        assert telemetry.get_logger("two_spaces_indent.test") is not None
    finally:
        telemetry.configure()


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("two_spaces_indent.test") is telemetry.get_logger(
        "two_spaces_indent.test"
    )


def test_span_collects_metadata_and_reraises() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::span", component=True, metadata={"k": 1}) as handle:
            handle.add_metadata("lines", [0, 1])
            assert handle.component_name == "test::span"
            assert handle.metadata == {"k": "1", "lines": "[0, 1]"}
            raise RuntimeError("boom")


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("test.event", level="loud")
