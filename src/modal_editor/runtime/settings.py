"""Environment-driven editor settings."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Collection, Mapping, Optional

from .telemetry import DEFAULT_PRESET, PRESETS

ENV_PREFIX = "MODAL_EDITOR_"


def _env_int(env: Mapping[str, str], key: str, fallback: int) -> int:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None:
        return fallback
    try:
        parsed = int(value)
    except ValueError:
        return fallback
    return parsed if parsed > 0 else fallback


def _env_choice(
    env: Mapping[str, str], key: str, choices: Collection[str], fallback: str
) -> str:
    value = env.get(f"{ENV_PREFIX}{key}")
    if value is None or value.lower() not in choices:
        return fallback
    return value.lower()


@dataclass(slots=True)
class EditorSettings:
    """Knobs the dispatch layer and the CLI read at startup."""

    tab_width: int = 4
    default_file: str = "new.txt"
    log_preset: str = DEFAULT_PRESET

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "EditorSettings":
        source = os.environ if env is None else env
        defaults = cls()
        return cls(
            tab_width=_env_int(source, "TAB_WIDTH", defaults.tab_width),
            default_file=source.get(
                f"{ENV_PREFIX}DEFAULT_FILE", defaults.default_file
            ),
            log_preset=_env_choice(
                source, "LOG_PRESET", PRESETS, defaults.log_preset
            ),
        )


__all__ = ["EditorSettings"]
