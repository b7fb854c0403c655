from __future__ import annotations

from modal_editor.buffer import Position
from modal_editor.view import BANNER, FILLER, Viewport


def test_render_pads_with_filler_rows() -> None:
    viewport = Viewport(width=10, height=5)

    rows = viewport.render(["one", "two"])

    assert rows == ["one", "two", FILLER, FILLER]


def test_render_clips_long_rows_to_width() -> None:
    viewport = Viewport(width=4, height=2)

    assert viewport.render(["abcdefgh"]) == ["abcd"]


def test_blank_document_shows_banner() -> None:
    viewport = Viewport(width=40, height=10)

    rows = viewport.render([""])

    assert rows[0] == ""
    assert rows[3].startswith(FILLER)
    assert BANNER in rows[3]
    assert rows.count(FILLER) == 7


def test_banner_skipped_when_too_narrow() -> None:
    viewport = Viewport(width=5, height=10)

    assert BANNER not in "".join(viewport.render([""]))


def test_follow_scrolls_down_and_back_up() -> None:
    viewport = Viewport(width=10, height=4)
    lines = [str(n) for n in range(10)]

    viewport.follow(5)
    assert viewport.top == 3
    assert viewport.render(lines) == ["3", "4", "5"]

    viewport.follow(1)
    assert viewport.top == 1


def test_screen_cell_is_relative_to_scroll() -> None:
    viewport = Viewport(width=10, height=4, top=2)

    assert viewport.screen_cell(Position(3, 4)) == (3, 2)
    assert viewport.screen_cell(Position(30, 2)) == (9, 0)


def test_resize_changes_text_rows() -> None:
    viewport = Viewport(width=10, height=4)

    viewport.resize(20, 8)

    assert viewport.text_rows == 7
    assert len(viewport.render(["x"])) == 7
