"""Structured logging and profiling for the editor, backed by telelog.

The terminal is owned by the editor UI, so every preset except
``development`` keeps telelog off the console. Call sites only use:

``configure(preset=...)`` -- pick how much the editor reports and where
``get_logger(name)`` -- cached telelog logger bound to the active config
``record_event(name, ...)`` -- one structured ``event::<name>`` line
``span(name, ...)`` -- profile a block, logging ``span::fail`` if it raises
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, MutableMapping, NamedTuple, Optional, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "MODAL_EDITOR_"
DEFAULT_LOGGER_NAME = "modal_editor"
DEFAULT_LOG_FILE = "modal_editor.log"
DEFAULT_PRESET = "production"


class _Preset(NamedTuple):
    level: str
    console: bool
    to_file: bool


_PRESETS: Dict[str, _Preset] = {
    "development": _Preset(level="DEBUG", console=True, to_file=False),
    "production": _Preset(level="INFO", console=False, to_file=True),
    "quiet": _Preset(level="ERROR", console=False, to_file=False),
}
PRESETS = tuple(_PRESETS)

_loggers: MutableMapping[str, Any] = {}
_config: Optional[Any] = None


def _stringify(value: Any) -> str:
    if isinstance(value, str):
        return value
    return repr(value) if isinstance(value, (dict, list, tuple, set)) else str(value)


def build_config(preset: str) -> Any:
    """Translate a preset name into a ``telelog.Config``.

    ``MODAL_EDITOR_LOG_LEVEL`` and ``MODAL_EDITOR_LOG_FILE`` override the
    level and file of presets that write to a file.
    """

    try:
        spec = _PRESETS[preset.lower()]
    except KeyError:
        raise ValueError(f"Unknown preset '{preset}'.") from None

    config = tl.Config()
    level = spec.level
    if spec.to_file:
        level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", level)
        config.with_file_output(os.getenv(f"{ENV_PREFIX}LOG_FILE", DEFAULT_LOG_FILE))
        config.with_buffering(True)
    config.with_min_level(level.upper())
    config.with_console_output(spec.console)
    if spec.console:
        config.with_colored_output(True)
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Adopt ``config`` or the named ``preset`` and drop cached loggers."""

    global _config
    if config is not None and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    if config is None:
        config = build_config(preset or DEFAULT_PRESET)
    _config = config
    _loggers.clear()


def get_logger(name: Optional[str] = None) -> Any:
    """Return the cached ``telelog.Logger`` called ``name``."""

    if _config is None:
        configure()
    logger_name = name or DEFAULT_LOGGER_NAME
    logger = _loggers.get(logger_name)
    if logger is None:
        logger = _loggers[logger_name] = tl.Logger.with_config(logger_name, _config)
    return logger


def _emit(logger: Any, level: str, message: str, fields: Dict[str, Any]) -> None:
    structured = getattr(logger, f"{level}_with", None)
    if structured is not None:
        structured(message, [(str(k), _stringify(v)) for k, v in fields.items()])
        return
    plain = getattr(logger, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {fields}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` carrying ``data`` as key/value pairs."""

    _emit(
        get_logger(logger_name),
        level.lower(),
        f"event::{name}",
        {"event": name, **(data or {})},
    )


@dataclass
class SpanHandle:
    """Yielded by ``span``; metadata added here is reported if the block fails."""

    logger: Any
    span_name: str
    component_name: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = _stringify(value)

    def fail(self, reason: str) -> None:
        fields: Dict[str, Any] = {"span": self.span_name, **self.metadata}
        if self.component_name:
            fields["component"] = self.component_name
        fields["reason"] = reason
        _emit(self.logger, "error", "span::fail", fields)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str | bool] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile the block under ``name``.

    ``component=True`` also tracks the block as a component called ``name``;
    a string picks another component name. ``metadata`` is attached to the
    logger context while the block runs.
    """

    log = get_logger(logger_name)
    component_name = name if component is True else component or None
    handle = SpanHandle(logger=log, span_name=name, component_name=component_name)

    with ExitStack() as stack:
        for key, value in (metadata or {}).items():
            handle.add_metadata(key, value)
            log.add_context(key, handle.metadata[key])
            stack.callback(log.remove_context, key)
        if component_name:
            stack.enter_context(log.track_component(component_name))
        stack.enter_context(log.profile(name))
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "DEFAULT_PRESET",
    "PRESETS",
    "SpanHandle",
    "build_config",
    "configure",
    "get_logger",
    "record_event",
    "span",
]
