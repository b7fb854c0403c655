"""Mode transitions and session-level actions shared across modes."""

from __future__ import annotations

from modal_editor.keymaps import ResolutionMatch
from modal_editor.modes.base_mode import ModeContext, ModeResult


def enter_insert_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match  # unused for now
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def insert_at_line_start(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.insert_at_line_start()
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def append_after_cursor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.move_right()
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def append_at_line_end(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.append_at_line_end()
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def open_line_below(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.open_line_below()
    return ModeResult(consumed=True, switch_to="insert", message="enter_insert")


def exit_to_normal_mode(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match  # unused for now
    return ModeResult(consumed=True, switch_to="normal", message="exit_insert")


def undo(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    if context.session.undo():
        context.bus.emit("history.undo", context.session.history.index)
        return ModeResult(consumed=True, status="undo")
    return ModeResult(consumed=True, status="noop", message="oldest_change")


def redo(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    if context.session.redo():
        context.bus.emit("history.redo", context.session.history.index)
        return ModeResult(consumed=True, status="redo")
    return ModeResult(consumed=True, status="noop", message="newest_change")


def save_buffer(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    saved = context.session.save()
    context.bus.emit("buffer.save", {"file": context.session.buffer.file, "ok": saved})
    return ModeResult(
        consumed=True,
        status="saved" if saved else "save_failed",
        message=context.session.status,
    )


def quit_editor(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del match
    context.session.quit()
    context.bus.emit("session.quit", None)
    return ModeResult(consumed=True, status="quit")


def noop_action(context: ModeContext, match: ResolutionMatch) -> ModeResult:
    del context, match
    return ModeResult(consumed=True, status="noop")


__all__ = [
    "enter_insert_mode",
    "insert_at_line_start",
    "append_after_cursor",
    "append_at_line_end",
    "open_line_below",
    "exit_to_normal_mode",
    "undo",
    "redo",
    "save_buffer",
    "quit_editor",
    "noop_action",
]
