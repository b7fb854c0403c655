"""Built-in keymaps for the Normal and Insert modes."""

from __future__ import annotations

from typing import Iterable, Sequence

from modal_editor import actions

from .models import GLOBAL_MODE, ActionRef, Binding, KeyStroke
from .registry import KeymapRegistry

DEFAULT_ACTIONS: tuple[ActionRef, ...] = (
    ActionRef("core.enter_insert", actions.enter_insert_mode, "Insert before the caret"),
    ActionRef("core.insert_line_start", actions.insert_at_line_start, "Insert at column 0"),
    ActionRef("core.append", actions.append_after_cursor, "Insert after the caret"),
    ActionRef("core.append_line_end", actions.append_at_line_end, "Insert at end of row"),
    ActionRef("core.open_below", actions.open_line_below, "Open a row below"),
    ActionRef("core.exit_to_normal", actions.exit_to_normal_mode, "Return to normal mode"),
    ActionRef("core.undo", actions.undo, "Undo the last recorded change"),
    ActionRef("core.redo", actions.redo, "Redo the next recorded change"),
    ActionRef("core.save", actions.save_buffer, "Write the buffer to its file"),
    ActionRef("core.quit", actions.quit_editor, "Quit the editor"),
    ActionRef("core.noop", actions.noop_action, "Do nothing"),
    ActionRef("edit.move_left", actions.move_left, "Move left"),
    ActionRef("edit.move_right", actions.move_right, "Move right"),
    ActionRef("edit.move_up", actions.move_up, "Move up"),
    ActionRef("edit.move_down", actions.move_down, "Move down"),
    ActionRef("edit.split_line", actions.split_line, "Break the row at the caret"),
    ActionRef("edit.delete_backward", actions.delete_backward, "Delete before the caret"),
    ActionRef("edit.insert_tab", actions.insert_tab, "Insert spaces up to a tab width"),
)

# (mode, key, action id)
_DEFAULT_TABLE: tuple[tuple[str, str, str], ...] = (
    (GLOBAL_MODE, "ctrl+q", "core.quit"),
    (GLOBAL_MODE, "ctrl+s", "core.save"),
    ("normal", "h", "edit.move_left"),
    ("normal", "j", "edit.move_down"),
    ("normal", "k", "edit.move_up"),
    ("normal", "l", "edit.move_right"),
    ("normal", "u", "core.undo"),
    ("normal", "U", "core.redo"),
    ("normal", "i", "core.enter_insert"),
    ("normal", "a", "core.append"),
    ("normal", "I", "core.insert_line_start"),
    ("normal", "A", "core.append_line_end"),
    ("normal", "o", "core.open_below"),
    ("normal", "ESC", "core.noop"),
    ("insert", "ESC", "core.exit_to_normal"),
    ("insert", "ENTER", "edit.split_line"),
    ("insert", "BACKSPACE", "edit.delete_backward"),
    ("insert", "TAB", "edit.insert_tab"),
)


def _binding_id(mode: str, key: str) -> str:
    scope = "global" if mode == GLOBAL_MODE else mode
    return f"{scope}.{key}"


DEFAULT_BINDINGS: tuple[Binding, ...] = tuple(
    Binding(
        id=_binding_id(mode, key),
        mode=mode,
        stroke=KeyStroke.parse(key),
        action_id=action_id,
    )
    for mode, key, action_id in _DEFAULT_TABLE
)


def load_default_keymaps(
    registry: KeymapRegistry,
    *,
    replace: bool = False,
    extra_bindings: Iterable[Binding] | None = None,
    exclude_bindings: Sequence[str] | None = None,
) -> None:
    """Register built-in actions and bindings for every mode."""

    excluded = set(exclude_bindings or ())

    for action in DEFAULT_ACTIONS:
        registry.register_action(action, replace=replace)

    for binding in DEFAULT_BINDINGS:
        if binding.id in excluded:
            continue
        registry.register_binding(binding, replace=replace)

    for binding in extra_bindings or ():
        registry.register_binding(binding, replace=True)


__all__ = ["load_default_keymaps", "DEFAULT_ACTIONS", "DEFAULT_BINDINGS"]
