"""Buffer abstractions, cursor state, and undo/redo history."""

from .cursor import CursorState
from .history import EditHistory, Snapshot
from .position import Position
from .sync import BufferIOError, BufferMirror
from .text_buffer import BackspaceResult, SameLine, TextBuffer, WrapLines

__all__ = [
    "Position",
    "TextBuffer",
    "SameLine",
    "WrapLines",
    "BackspaceResult",
    "EditHistory",
    "Snapshot",
    "CursorState",
    "BufferMirror",
    "BufferIOError",
]
