"""Raw coordinates used as edit-operation arguments."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Column/row pair. Callers keep it inside the buffer's addressable range."""

    x: int
    y: int

    @classmethod
    def origin(cls) -> "Position":
        return cls(0, 0)

    def with_x(self, x: int) -> "Position":
        return Position(x, self.y)

    def with_y(self, y: int) -> "Position":
        return Position(self.x, y)


__all__ = ["Position"]
