"""Logging and profiling for the indent commands, built on telelog.

``configure(...)`` selects the telelog config, ``get_logger`` hands out cached
loggers, ``record_event`` writes one structured line and ``span`` profiles a
command while attaching its metadata as logger context.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TWO_SPACES_INDENT_"
DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "two_spaces_indent")
PRESETS = ("production", "quiet")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return str(value)


def _build_config(preset: Optional[str] = None) -> Any:
    config = tl.Config()
    if preset == "production":
        # Textual owns the terminal; log to a file.
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE") or "two_spaces_indent.log")
        config.with_buffering(True)
    elif preset == "quiet":
        config.with_min_level("ERROR")
        config.with_console_output(False)
    elif preset is None:
        config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
        console = not _env_flag("DISABLE_CONSOLE")
        config.with_console_output(console)
        if console:
            config.with_colored_output(not _env_flag("NO_COLOR"))
        if _env_flag("LOG_JSON"):
            config.with_json_format(True)
        if _env("LOG_FILE"):
            config.with_file_output(_env("LOG_FILE"))
    else:
        raise ValueError(f"Unknown preset '{preset}', expected one of {PRESETS}.")

    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Swap the active telelog config and drop cached loggers.

    Without arguments the config is rebuilt from ``TWO_SPACES_INDENT_*``
    environment variables. ``config`` and ``preset`` are mutually exclusive.
    """

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")

    _ACTIVE_CONFIG = config if config is not None else _build_config(preset)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if logger_name not in _LOGGER_CACHE:
        if _ACTIVE_CONFIG is None:
            configure()
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _emit(log: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    """Write ``message`` with ``payload`` as key/value pairs when telelog can."""

    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, [(str(k), _text(v)) for k, v in payload.items()])
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {payload}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _emit(get_logger(logger_name), level, f"event::{name}", {"event": name, **(data or {})})


@dataclass
class SpanHandle:
    """Lets the code inside a ``span`` attach results to it."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        payload: Dict[str, Any] = {"span": self.span_name, "reason": reason}
        if self.component_name:
            payload["component"] = self.component_name
        payload.update(self.metadata)
        _emit(self.logger, "error", "span::fail", payload)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block; ``component=True`` also tracks it under ``name``.

    A string ``component`` names the tracked component explicitly. An
    exception escaping the block is logged through ``SpanHandle.fail`` and
    re-raised.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=cast(Optional[str], component_name),
        metadata=dict(context),
    )

    with ExitStack() as stack:
        for key, value in context.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if handle.component_name:
            stack.enter_context(log.track_component(handle.component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


configure()
logger = get_logger()

__all__ = [
    "PRESETS",
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
    "logger",
]
