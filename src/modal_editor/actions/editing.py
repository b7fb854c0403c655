"""Caret movement and buffer edits bound to single keys."""

from __future__ import annotations

from modal_editor.modes.base_mode import ModeContext, ModeResult


def move_left(context: ModeContext, match) -> ModeResult:
    del match
    context.session.move_left()
    return ModeResult(consumed=True, status="move")


def move_right(context: ModeContext, match) -> ModeResult:
    del match
    context.session.move_right()
    return ModeResult(consumed=True, status="move")


def move_up(context: ModeContext, match) -> ModeResult:
    del match
    context.session.move_up()
    return ModeResult(consumed=True, status="move")


def move_down(context: ModeContext, match) -> ModeResult:
    del match
    context.session.move_down()
    return ModeResult(consumed=True, status="move")


def split_line(context: ModeContext, match) -> ModeResult:
    del match
    context.session.enter()
    return ModeResult(consumed=True, status="edit")


def delete_backward(context: ModeContext, match) -> ModeResult:
    del match
    context.session.backspace()
    return ModeResult(consumed=True, status="edit")


def insert_tab(context: ModeContext, match) -> ModeResult:
    del match
    context.session.insert_tab()
    return ModeResult(consumed=True, status="edit")


__all__ = [
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "split_line",
    "delete_backward",
    "insert_tab",
]
