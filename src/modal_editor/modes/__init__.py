"""Mode manager and the modal dispatch logic."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .mode_manager import ModeManager

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeResult",
    "NormalMode",
    "InsertMode",
    "ModeManager",
]
