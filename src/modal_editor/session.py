"""Editing session owning one buffer, its history, and the caret."""

from __future__ import annotations

from typing import Optional

from modal_editor.buffer import (
    BufferIOError,
    BufferMirror,
    CursorState,
    EditHistory,
    Position,
    TextBuffer,
    WrapLines,
)
from modal_editor.runtime import telemetry
from modal_editor.runtime.settings import EditorSettings


class EditorSession:
    """Everything one editing session mutates, passed explicitly to actions.

    The session is the only place that clamps the caret before issuing edit
    calls, and the only place that installs history snapshots back into the
    buffer.
    """

    def __init__(
        self,
        buffer: Optional[TextBuffer] = None,
        *,
        settings: Optional[EditorSettings] = None,
    ) -> None:
        self.settings = settings or EditorSettings()
        if buffer is None:
            buffer = TextBuffer([""], self.settings.default_file)
        self.buffer = buffer
        self.cursor = CursorState()
        self.history = EditHistory(self.buffer.snapshot(), self.cursor.position)
        self.status = ""
        self.quit_requested = False

    @classmethod
    def open(
        cls, path: Optional[str] = None, *, settings: Optional[EditorSettings] = None
    ) -> "EditorSession":
        settings = settings or EditorSettings()
        buffer = TextBuffer.load(path or settings.default_file)
        return cls(buffer, settings=settings)

    @property
    def current_line_length(self) -> int:
        return self.buffer.line_length(self.cursor.y)

    def mirror(self, mode: str = "normal") -> BufferMirror:
        return BufferMirror(
            lines=self.buffer.snapshot(),
            cursor=self.cursor.position,
            mode=mode,
            status=self.status,
            file=self.buffer.file,
        )

    # -- navigation -------------------------------------------------------

    def move_left(self) -> None:
        self.cursor.move_left()

    def move_right(self) -> None:
        self.cursor.move_right(self.current_line_length)

    def move_up(self) -> None:
        self.cursor.move_up(self.buffer)

    def move_down(self) -> None:
        self.cursor.move_down(self.buffer)

    def insert_at_line_start(self) -> None:
        self.cursor.jump_to_column(0)

    def append_at_line_end(self) -> None:
        self.cursor.jump_to_column(self.current_line_length)

    # -- editing ------------------------------------------------------------

    def insert_char(self, char: str) -> None:
        self.buffer.write(self.cursor.clamp(self.buffer), char)
        self.move_right()
        self.status = ""

    def insert_tab(self) -> None:
        for _ in range(self.settings.tab_width):
            self.insert_char(" ")

    def backspace(self) -> None:
        result = self.buffer.backspace(self.cursor.clamp(self.buffer))
        if isinstance(result, WrapLines):
            self.cursor.set(result.position)
            self.cursor.update()
        else:
            self.move_left()

    def enter(self) -> None:
        self.buffer.enter(self.cursor.clamp(self.buffer))
        self.move_down()
        self.cursor.jump_to_column(0)

    def open_line_below(self) -> None:
        self.move_down()
        self.buffer.new_line(self.cursor.position)
        self.cursor.clamp(self.buffer)

    # -- history ------------------------------------------------------------

    def record_history(self) -> bool:
        """Snapshot the buffer unless it matches the current history entry."""

        snapshot = self.buffer.snapshot()
        if snapshot == self.history.current:
            return False
        self.history.record(snapshot, self.cursor.position)
        telemetry.record_event(
            "history.record",
            level="debug",
            data={"index": self.history.index, "lines": len(snapshot)},
        )
        return True

    def undo(self) -> bool:
        return self._install(self.history.undo())

    def redo(self) -> bool:
        return self._install(self.history.redo())

    def _install(self, cursor: Optional[Position]) -> bool:
        if cursor is None:
            return False
        self.buffer.restore(self.history.current)
        self.cursor.set(cursor)
        self.cursor.clamp(self.buffer)
        return True

    # -- session ------------------------------------------------------------

    def save(self) -> bool:
        path = self.buffer.file
        try:
            self.buffer.save()
        except BufferIOError as exc:
            self.status = f"Failed to save {path}: {exc.__cause__ or exc}"
            telemetry.record_event(
                "buffer.save_failed", level="error", data={"file": path, "error": exc}
            )
            return False
        self.status = f"Successfully saved to {path}."
        telemetry.record_event("buffer.save", data={"file": path})
        return True

    def quit(self) -> None:
        self.quit_requested = True


__all__ = ["EditorSession"]
