"""Structured logging for the editor, built on telelog.

The terminal belongs to the editor, so nothing is written to the console
unless ``ATTO_LOG_CONSOLE`` is set; point ``ATTO_LOG_FILE`` (or
``--log-file``) somewhere to keep a trace.

* ``configure`` -- install an explicit ``telelog.Config``, a named preset, or
  the environment-driven default
* ``get_logger`` -- cached per-name ``telelog.Logger``
* ``record_event`` -- one ``event::<name>`` line with key/value data
* ``span`` -- profile a block, optionally as a tracked component
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "ATTO_"
ROOT_LOGGER = "atto"

_loggers: Dict[str, Any] = {}
_active_config: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name)


def _env_on(name: str) -> bool:
    return (_env(name) or "").lower() in {"1", "true", "yes", "on"}


def _text(value: Any) -> str:
    if isinstance(value, (dict, list, tuple, set)):
        return repr(value)
    return value if isinstance(value, str) else str(value)


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), _text(value)) for key, value in data.items()]


def _preset(name: str) -> Any:
    config = tl.Config()
    if name == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif name == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE") or "atto.log")
        config.with_buffering(True)
    elif name == "quiet":
        config.with_min_level("ERROR")
        config.with_console_output(False)
    else:
        raise ValueError(f"Unknown telemetry preset '{name}'.")
    return config


def _from_environment(level: Optional[str], log_file: Optional[str]) -> Any:
    config = tl.Config()
    config.with_min_level((level or _env("LOG_LEVEL") or "INFO").upper())
    console = _env_on("LOG_CONSOLE")
    config.with_console_output(console)
    if console:
        config.with_colored_output(not _env_on("NO_COLOR"))
    if _env_on("LOG_JSON"):
        config.with_json_format(True)
    target = log_file or _env("LOG_FILE")
    if target:
        config.with_file_output(target)
    if _env_on("LOG_BUFFERED"):
        config.with_buffering(True)
        config.with_buffer_size(int(_env("LOG_BUFFER_SIZE") or "2048"))
    return config


def configure(
    *,
    config: Optional[Any] = None,
    preset: Optional[str] = None,
    level: Optional[str] = None,
    log_file: Optional[str] = None,
) -> None:
    """Replace the active configuration and forget cached loggers.

    ``config`` and ``preset`` (``development``, ``production``, ``quiet``)
    are exclusive; with neither, ``level``/``log_file`` override the
    ``ATTO_*`` environment.
    """

    global _active_config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if preset:
        config = _preset(preset.lower())
    elif config is None:
        config = _from_environment(level, log_file)
    config.with_profiling(True)
    _active_config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    key = name or ROOT_LOGGER
    if key not in _loggers:
        if _active_config is None:
            configure()
        _loggers[key] = tl.Logger.with_config(key, _active_config)
    return _loggers[key]


def _emitter(logger: Any, level: str) -> Tuple[Callable[..., Any], bool]:
    """Return the logger method for ``level`` and whether it takes data pairs."""

    name = level.lower()
    structured = getattr(logger, f"{name}_with", None)
    if structured is not None:
        return structured, True
    plain = getattr(logger, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    return plain, False


def _write(logger: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    method, structured = _emitter(logger, level)
    if structured:
        method(message, _pairs(data))
    else:
        method(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    _write(
        get_logger(logger_name),
        level,
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    """Yielded by ``span``; metadata added here goes out with a failure line."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _text(value)

    def fail(self, reason: str) -> None:
        data: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            data["component"] = self.component_name
        data["reason"] = reason
        _write(self.logger, "error", "span::fail", data)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block as ``name``.

    ``component=True`` also tracks it as a component of the same name; a
    string names the component explicitly. ``metadata`` is attached as logger
    context for the duration of the block.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else (component or None)
    context = {key: _text(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(
        logger=log,
        span_name=name,
        component_name=component_name,
        metadata=dict(context),
    )
    try:
        with ExitStack() as stack:
            if component_name:
                stack.enter_context(log.track_component(component_name))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                handle.fail(str(exc))
                raise
    finally:
        for key in context:
            log.remove_context(key)


__all__ = [
    "SpanHandle",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
