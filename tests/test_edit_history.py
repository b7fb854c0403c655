from __future__ import annotations

from modal_editor.buffer import EditHistory, Position


def make_history(*steps: str) -> EditHistory:
    history = EditHistory(("start",))
    for index, text in enumerate(steps, start=1):
        history.record((text,), Position(index, 0))
    return history


def test_initial_entry_is_construction_state() -> None:
    history = EditHistory(["a", "b"], Position(1, 1))

    assert len(history) == 1
    assert history.current == ("a", "b")
    assert history.cursors == [Position(1, 1)]
    assert history.index == 0
    assert history.is_in_past is False


def test_record_advances_to_tail() -> None:
    history = make_history("one", "two")

    assert history.index == 2
    assert history.current == ("two",)
    assert len(history.states) == len(history.cursors) == 3


def test_undo_at_origin_returns_none() -> None:
    history = make_history()

    assert history.undo() is None
    assert history.index == 0


def test_redo_at_tail_returns_none() -> None:
    history = make_history("one")

    assert history.redo() is None
    assert history.index == 1


def test_undo_returns_cursor_of_previous_entry() -> None:
    history = make_history("one", "two")

    cursor = history.undo()

    assert cursor == Position(1, 0)
    assert history.current == ("one",)
    assert history.is_in_past is True


def test_undo_then_redo_restores_entry() -> None:
    history = make_history("one", "two", "three")
    history.undo()
    before = (history.current, history.cursors[history.index])

    history.undo()
    cursor = history.redo()

    assert (history.current, cursor) == before


def test_record_in_past_discards_future() -> None:
    history = make_history("one", "two", "three")
    history.undo()
    history.undo()

    history.record(("branch",), Position(9, 0))

    assert history.states == [("start",), ("one",), ("branch",)]
    assert history.cursors[-1] == Position(9, 0)
    assert history.index == 2
    assert history.redo() is None


def test_walk_back_to_origin_and_forward_again() -> None:
    history = make_history("one", "two")

    assert history.undo() == Position(1, 0)
    assert history.undo() == Position(0, 0)
    assert history.undo() is None
    assert history.current == ("start",)
    assert history.redo() == Position(1, 0)
    assert history.redo() == Position(2, 0)
    assert history.redo() is None
    assert history.can_undo() and not history.can_redo()
