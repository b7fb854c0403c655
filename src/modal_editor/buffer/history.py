"""Linear undo/redo history of whole-buffer snapshots."""

from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from .position import Position

Snapshot = Tuple[str, ...]


class EditHistory:
    """Index-aligned snapshots and cursors with a movable pointer.

    Recording while in the past discards every entry after the pointer, so
    the history stays a line rather than a tree. The history never touches a
    buffer itself; callers install ``current`` after ``undo``/``redo``.
    """

    def __init__(
        self, initial: Iterable[str], cursor: Optional[Position] = None
    ) -> None:
        self.states: List[Snapshot] = [tuple(initial)]
        self.cursors: List[Position] = [cursor or Position.origin()]
        self.index: int = 0

    def __len__(self) -> int:
        return len(self.states)

    @property
    def current(self) -> Snapshot:
        return self.states[self.index]

    @property
    def is_in_past(self) -> bool:
        return self.index < len(self.states) - 1

    def can_undo(self) -> bool:
        return self.index > 0

    def can_redo(self) -> bool:
        return self.is_in_past

    def record(self, rows: Iterable[str], cursor: Position) -> None:
        if self.is_in_past:
            del self.states[self.index + 1 :]
            del self.cursors[self.index + 1 :]
        self.states.append(tuple(rows))
        self.cursors.append(cursor)
        self.index = len(self.states) - 1

    def undo(self) -> Optional[Position]:
        if not self.can_undo():
            return None
        self.index -= 1
        return self.cursors[self.index]

    def redo(self) -> Optional[Position]:
        if not self.can_redo():
            return None
        self.index += 1
        return self.cursors[self.index]


__all__ = ["EditHistory", "Snapshot"]
