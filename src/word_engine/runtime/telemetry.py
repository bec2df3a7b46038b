"""Logging and profiling for the editor, backed by telelog.

Other modules import ``configure``, ``get_logger``, ``record_event`` and
``span`` from here. Output settings come from ``WORD_ENGINE_*`` environment
variables unless a named preset is chosen (the Textual app picks ``quiet``
so nothing is printed over its screen).
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "WORD_ENGINE_"
ROOT_LOGGER = "word_engine"
LEVELS = ("debug", "info", "warning", "error", "critical")

_loggers: Dict[str, Any] = {}
_active_config: Optional[Any] = None


def env_value(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read ``WORD_ENGINE_<name>`` from the environment."""

    return os.getenv(f"{ENV_PREFIX}{name}", default)


def env_flag(name: str, default: bool) -> bool:
    raw = env_value(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LogSettings:
    """What telelog should emit and where."""

    level: str = "INFO"
    console: bool = True
    colored: bool = True
    json: bool = False
    log_file: str = ""
    buffered: bool = False

    @classmethod
    def from_env(cls) -> "LogSettings":
        return cls(
            level=(env_value("LOG_LEVEL") or "INFO").upper(),
            console=not env_flag("DISABLE_CONSOLE", False),
            colored=not env_flag("NO_COLOR", False),
            json=env_flag("LOG_JSON", False),
            log_file=env_value("LOG_FILE") or "",
        )

    @classmethod
    def preset(cls, name: str) -> "LogSettings":
        log_file = env_value("LOG_FILE") or ""
        key = name.lower()
        if key == "development":
            return cls(level="DEBUG", log_file=log_file)
        if key == "production":
            return cls(
                console=False,
                log_file=log_file or "word_engine.log",
                buffered=True,
            )
        if key == "quiet":
            # Warnings and errors only, and only to a file if one is set.
            return cls(level="WARNING", console=False, log_file=log_file)
        raise ValueError(f"Unknown preset '{name}'.")

    def build(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output(self.colored)
        config.with_json_format(self.json)
        if self.log_file:
            config.with_file_output(self.log_file)
        if self.buffered:
            config.with_buffering(True)
        # Spans rely on telelog's profiler.
        config.with_profiling(True)
        return config


def configure(
    *, settings: Optional[LogSettings] = None, preset: Optional[str] = None
) -> None:
    """Rebuild the telelog configuration and forget every cached logger.

    With neither argument the settings are read from the environment.
    """

    global _active_config
    if settings is not None and preset:
        raise ValueError("Provide either `settings` or `preset`, not both.")
    if preset:
        settings = LogSettings.preset(preset)
    _active_config = (settings or LogSettings.from_env()).build()
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or env_value("LOGGER") or ROOT_LOGGER
    logger = _loggers.get(logger_name)
    if logger is None:
        if _active_config is None:
            configure()
        logger = tl.Logger.with_config(logger_name, _active_config)
        _loggers[logger_name] = logger
    return logger


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def _emit(logger: Any, level: str, message: str, payload: Dict[str, Any]) -> None:
    level_name = str(level).lower()
    if level_name not in LEVELS:
        raise ValueError(f"Unsupported log level '{level}'.")
    pairs = [(str(key), _stringify(value)) for key, value in payload.items()]
    structured = getattr(logger, f"{level_name}_with", None)
    if structured is not None:
        structured(message, pairs)
    else:
        getattr(logger, level_name)(f"{message} {dict(pairs)}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass
class SpanHandle:
    """Collects metadata reported when the span ends."""

    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def payload(self, **extra: Any) -> Dict[str, Any]:
        data: Dict[str, Any] = {"span": self.span_name}
        if self.component_name:
            data["component"] = self.component_name
        data.update(self.metadata)
        data.update(extra)
        return data


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block, optionally tracked as a telelog component.

    ``component=True`` uses ``name`` as the component id. The initial
    ``metadata`` is pushed as logger context while the block runs. On exit a
    ``span::done`` (debug) or ``span::fail`` (error) line carries everything
    added through the handle.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    handle = SpanHandle(name, component_name)
    for key, value in (metadata or {}).items():
        handle.add_metadata(key, value)
    context_keys = list(handle.metadata)
    for key in context_keys:
        log.add_context(key, handle.metadata[key])

    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            yield handle
    except Exception as exc:
        _emit(log, "error", "span::fail", handle.payload(reason=str(exc)))
        raise
    else:
        _emit(log, "debug", "span::done", handle.payload())
    finally:
        for key in context_keys:
            log.remove_context(key)


configure()

__all__ = [
    "LogSettings",
    "SpanHandle",
    "configure",
    "env_flag",
    "env_value",
    "get_logger",
    "record_event",
    "span",
]
