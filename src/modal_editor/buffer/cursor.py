"""Validated caret with sticky-column vertical navigation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .position import Position
from .text_buffer import TextBuffer


@dataclass(slots=True)
class CursorState:
    """Current caret plus the column it should return to on vertical moves.

    Unlike a raw ``Position`` the caret is kept inside the live buffer:
    rows range over ``[0, line_count]`` (the extra row lets typing grow the
    document) and columns never exceed the row length.
    """

    position: Position = field(default_factory=Position.origin)
    previous_x: int = 0

    @property
    def x(self) -> int:
        return self.position.x

    @property
    def y(self) -> int:
        return self.position.y

    def update(self) -> None:
        if self.position.x != self.previous_x:
            self.previous_x = self.position.x

    def set(self, position: Position) -> None:
        self.position = position

    def jump_to_column(self, x: int) -> None:
        self.position = self.position.with_x(x)
        self.update()

    def move_left(self) -> None:
        if self.position.x > 0:
            self.position = self.position.with_x(self.position.x - 1)
            self.update()

    def move_right(self, line_length: int) -> None:
        if self.position.x < line_length:
            self.position = self.position.with_x(self.position.x + 1)
            self.update()

    def move_up(self, buffer: TextBuffer) -> None:
        if self.position.y > 0:
            self.position = self.position.with_y(self.position.y - 1)
        self._settle_column(buffer)

    def move_down(self, buffer: TextBuffer, max_row: Optional[int] = None) -> None:
        limit = buffer.line_count if max_row is None else max_row
        if self.position.y < limit:
            self.position = self.position.with_y(self.position.y + 1)
        self._settle_column(buffer)

    def clamp(self, buffer: TextBuffer) -> Position:
        y = max(0, min(self.position.y, buffer.line_count))
        x = max(0, min(self.position.x, buffer.line_length(y)))
        self.position = Position(x, y)
        return self.position

    def _settle_column(self, buffer: TextBuffer) -> None:
        length = buffer.line_length(self.position.y)
        x = min(self.position.x, length)
        # Recall the remembered column once the row is long enough again.
        if x < self.previous_x:
            x = min(self.previous_x, length)
        self.position = self.position.with_x(x)


__all__ = ["CursorState"]
