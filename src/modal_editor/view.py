"""Viewport render model: which rows of the document are on screen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from modal_editor import __version__

from .buffer import Position

BANNER = f"MODAL-EDITOR {__version__}"
FILLER = "~"


@dataclass(slots=True)
class Viewport:
    """Window of ``width`` x ``height`` cells; the last row is the status line."""

    width: int
    height: int
    top: int = 0

    @property
    def text_rows(self) -> int:
        return max(0, self.height - 1)

    def resize(self, width: int, height: int) -> None:
        self.width = width
        self.height = height

    def follow(self, row: int) -> None:
        """Scroll just enough for ``row`` to be visible."""

        if row < self.top:
            self.top = row
        elif self.text_rows and row >= self.top + self.text_rows:
            self.top = row - self.text_rows + 1

    def screen_cell(self, cursor: Position) -> Tuple[int, int]:
        return (min(cursor.x, max(0, self.width - 1)), cursor.y - self.top)

    def render(self, lines: Sequence[str]) -> List[str]:
        rows: List[str] = []
        for offset in range(self.text_rows):
            index = self.top + offset
            if index < len(lines):
                rows.append(lines[index][: self.width])
            else:
                rows.append(FILLER)

        if self._is_blank(lines) and self.text_rows:
            banner_row = self.text_rows // 3
            if banner_row > 0 and len(BANNER) < self.width:
                rows[banner_row] = (FILLER + BANNER.center(self.width - 1)).rstrip()
        return rows

    @staticmethod
    def _is_blank(lines: Sequence[str]) -> bool:
        return len(lines) == 1 and lines[0] == ""


__all__ = ["Viewport", "BANNER", "FILLER"]
