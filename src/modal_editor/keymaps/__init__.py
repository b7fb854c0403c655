"""Declarative keymap registry.

Default bindings live in ``modal_editor.keymaps.defaults``; they import the
action implementations, which in turn depend on the mode types.
"""

from .models import GLOBAL_MODE, ActionRef, Binding, KeyStroke
from .registry import (
    KeymapConflictError,
    KeymapRegistry,
    RegistryStats,
    ResolutionMatch,
)

__all__ = [
    "GLOBAL_MODE",
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
