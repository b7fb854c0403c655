"""Insert mode: unbound printable keys are typed into the buffer."""

from __future__ import annotations

from .base_mode import KeyInput, Mode, ModeResult


class InsertMode(Mode):
    name = "insert"

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        # Leaving insert mode is the point where an edit becomes undoable.
        self.context.session.record_history()

    def handle_unbound(self, key: KeyInput) -> ModeResult:
        text = key.text
        if key.modifiers or not text or len(text) != 1 or not text.isprintable():
            return ModeResult(consumed=False, status="miss")
        self.context.session.insert_char(text)
        return ModeResult(consumed=True, status="insert")
