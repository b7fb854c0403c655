"""Editing verbs that keymaps bind to keys."""

from .core import (
    append_after_cursor,
    append_at_line_end,
    enter_insert_mode,
    exit_to_normal_mode,
    insert_at_line_start,
    noop_action,
    open_line_below,
    quit_editor,
    redo,
    save_buffer,
    undo,
)
from .editing import (
    delete_backward,
    insert_tab,
    move_down,
    move_left,
    move_right,
    move_up,
    split_line,
)

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
    "move_left",
    "move_right",
    "move_up",
    "move_down",
    "split_line",
    "delete_backward",
    "insert_tab",
]
