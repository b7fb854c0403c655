"""Normal mode: navigation, history, and the doors into insert mode."""

from __future__ import annotations

from .base_mode import Mode


class NormalMode(Mode):
    name = "normal"
