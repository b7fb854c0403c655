from __future__ import annotations

from modal_editor.buffer import CursorState, Position, TextBuffer


def make_cursor(x: int = 0, y: int = 0) -> CursorState:
    cursor = CursorState(Position(x, y))
    cursor.update()
    return cursor


def test_horizontal_moves_update_sticky_column() -> None:
    cursor = make_cursor()

    cursor.move_right(5)
    cursor.move_right(5)
    cursor.move_left()

    assert cursor.position == Position(1, 0)
    assert cursor.previous_x == 1


def test_move_right_stops_at_row_end() -> None:
    cursor = make_cursor(3, 0)

    cursor.move_right(3)

    assert cursor.x == 3


def test_move_left_stops_at_column_zero() -> None:
    cursor = make_cursor()

    cursor.move_left()

    assert cursor.position == Position(0, 0)


def test_down_onto_shorter_row_clamps_column() -> None:
    buffer = TextBuffer(["long line", "ab"])
    cursor = make_cursor(7, 0)

    cursor.move_down(buffer)

    assert cursor.position == Position(2, 1)
    assert cursor.previous_x == 7


def test_sticky_column_is_recalled_past_short_row() -> None:
    buffer = TextBuffer(["long line", "ab", "another long one"])
    cursor = make_cursor(7, 0)

    cursor.move_down(buffer)
    cursor.move_down(buffer)

    assert cursor.position == Position(7, 2)


def test_sticky_column_recalled_moving_up() -> None:
    buffer = TextBuffer(["abcdefgh", "", "abcdefgh"])
    cursor = make_cursor(6, 2)

    cursor.move_up(buffer)
    assert cursor.position == Position(0, 1)
    cursor.move_up(buffer)
    assert cursor.position == Position(6, 0)


def test_sticky_column_partially_recalled_on_medium_row() -> None:
    buffer = TextBuffer(["abcdefgh", "a", "abcd"])
    cursor = make_cursor(6, 0)

    cursor.move_down(buffer)
    cursor.move_down(buffer)

    assert cursor.position == Position(4, 2)


def test_move_up_at_top_keeps_row() -> None:
    buffer = TextBuffer(["abc"])
    cursor = make_cursor(2, 0)

    cursor.move_up(buffer)

    assert cursor.position == Position(2, 0)


def test_move_down_reaches_row_below_document_then_stops() -> None:
    buffer = TextBuffer(["abc", "de"])
    cursor = make_cursor(1, 1)

    cursor.move_down(buffer)
    cursor.move_down(buffer)

    assert cursor.position == Position(0, 2)


def test_move_down_respects_explicit_limit() -> None:
    buffer = TextBuffer(["a", "b", "c"])
    cursor = make_cursor()

    cursor.move_down(buffer, max_row=1)
    cursor.move_down(buffer, max_row=1)

    assert cursor.y == 1


def test_clamp_pulls_cursor_inside_buffer() -> None:
    buffer = TextBuffer(["abc", "de"])
    cursor = CursorState(Position(10, 9))

    assert cursor.clamp(buffer) == Position(0, 2)

    cursor.set(Position(10, 0))
    assert cursor.clamp(buffer) == Position(3, 0)


def test_jump_to_column_updates_sticky_column() -> None:
    cursor = make_cursor()

    cursor.jump_to_column(4)

    assert cursor.position == Position(4, 0)
    assert cursor.previous_x == 4
