"""Boundary types exchanged between the buffer layer and its hosts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .position import Position


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Host-friendly snapshot describing what the render layer should paint."""

    lines: Tuple[str, ...]
    cursor: Position
    mode: str = "normal"
    status: str = ""
    file: str = ""

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferIOError(RuntimeError):
    """Raised when a buffer cannot be read from or persisted to disk."""

    def __init__(self, message: str, *, path: str) -> None:
        super().__init__(message)
        self.path = path


__all__ = ["BufferMirror", "BufferIOError"]
