from __future__ import annotations

from pathlib import Path

import pytest

from modal_editor.buffer import (
    BufferIOError,
    Position,
    SameLine,
    TextBuffer,
    WrapLines,
)


def make_buffer(*lines: str, file: str = "new.txt") -> TextBuffer:
    return TextBuffer(list(lines), file)


def test_empty_construction_keeps_one_row() -> None:
    buffer = TextBuffer([])

    assert buffer.lines == [""]
    assert len(buffer) == 1


def test_write_splices_into_existing_row() -> None:
    buffer = make_buffer("abc")

    buffer.write(Position(3, 0), "d")
    buffer.write(Position(0, 0), ">")

    assert buffer.lines == [">abcd"]


def test_write_past_end_appends_padding_rows() -> None:
    buffer = make_buffer("abc")

    buffer.write(Position(7, 3), "z")

    assert buffer.lines == ["abc", "", "", "z"]
    assert buffer.line_count == 4


def test_write_on_row_just_below_document() -> None:
    buffer = make_buffer("abc")

    buffer.write(Position(0, 1), "x")

    assert buffer.lines == ["abc", "x"]


def test_backspace_removes_previous_character() -> None:
    buffer = make_buffer("abcd")

    result = buffer.backspace(Position(4, 0))

    assert result == SameLine()
    assert buffer.lines == ["abc"]


def test_backspace_at_document_start_is_noop() -> None:
    buffer = make_buffer("abc", "def")

    result = buffer.backspace(Position(0, 0))

    assert isinstance(result, SameLine)
    assert buffer.lines == ["abc", "def"]


def test_backspace_deletes_empty_row() -> None:
    buffer = make_buffer("ab", "")

    result = buffer.backspace(Position(0, 1))

    assert buffer.lines == ["ab"]
    assert result == WrapLines(Position(2, 0))


def test_backspace_joins_row_onto_previous_at_seam() -> None:
    buffer = make_buffer("hello", "world", "tail")

    result = buffer.backspace(Position(0, 1))

    assert buffer.lines == ["helloworld", "tail"]
    assert isinstance(result, WrapLines)
    assert result.position == Position(5, 0)


def test_backspace_join_with_empty_previous_row() -> None:
    buffer = make_buffer("", "text")

    result = buffer.backspace(Position(0, 1))

    assert buffer.lines == ["text"]
    assert result == WrapLines(Position(0, 0))


def test_backspace_on_missing_row_is_noop() -> None:
    buffer = make_buffer("abc")

    assert buffer.backspace(Position(0, 4)) == SameLine()
    assert buffer.backspace(Position(2, 4)) == SameLine()
    assert buffer.lines == ["abc"]


def test_enter_splits_row_mid_line() -> None:
    buffer = make_buffer("abc")

    buffer.enter(Position(1, 0))

    assert buffer.lines == ["a", "bc"]


def test_enter_at_row_start_pushes_row_down() -> None:
    buffer = make_buffer("abc", "def")

    buffer.enter(Position(0, 1))

    assert buffer.lines == ["abc", "", "def"]


def test_enter_at_row_end_opens_empty_row() -> None:
    buffer = make_buffer("abc", "def")

    buffer.enter(Position(3, 0))

    assert buffer.lines == ["abc", "", "def"]


def test_enter_past_document_end_pads() -> None:
    buffer = make_buffer("abc")

    buffer.enter(Position(0, 2))

    assert buffer.lines == ["abc", "", ""]


def test_new_line_inserts_before_row() -> None:
    buffer = make_buffer("abc")

    buffer.new_line(Position(1, 0))

    assert buffer.lines == ["", "abc"]


def test_new_line_past_end_grows_to_row() -> None:
    buffer = make_buffer("abc")

    buffer.new_line(Position(0, 4))

    assert buffer.line_count == 5
    assert buffer.lines[1:] == ["", "", "", ""]


def test_line_length_of_missing_row_is_zero() -> None:
    buffer = make_buffer("abc", "")

    assert buffer.line_length(0) == 3
    assert buffer.line_length(1) == 0
    assert buffer.line_length(9) == 0
    assert buffer.line(9) == ""


def test_snapshot_is_detached_copy() -> None:
    buffer = make_buffer("abc")
    snapshot = buffer.snapshot()

    buffer.write(Position(0, 0), "x")

    assert snapshot == ("abc",)
    buffer.restore(snapshot)
    assert buffer.lines == ["abc"]


def test_save_writes_trailing_newline_per_row(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    target.write_text("old content that is longer\n", encoding="utf-8")
    buffer = make_buffer("one", "", "three", file=str(target))

    buffer.save()

    assert target.read_text(encoding="utf-8") == "one\n\nthree\n"


def test_save_then_load_round_trip(tmp_path: Path) -> None:
    target = tmp_path / "doc.txt"
    buffer = make_buffer("alpha", "  beta", "", "gamma", file=str(target))

    buffer.save()
    loaded = TextBuffer.load(str(target))

    assert loaded.lines == ["alpha", "  beta", "", "gamma"]
    assert loaded.file == str(target)


def test_save_failure_raises_buffer_io_error(tmp_path: Path) -> None:
    target = tmp_path / "missing-dir" / "doc.txt"
    buffer = make_buffer("abc", file=str(target))

    with pytest.raises(BufferIOError) as info:
        buffer.save()

    assert info.value.path == str(target)
    assert isinstance(info.value.__cause__, OSError)


def test_load_missing_file_gives_empty_buffer(tmp_path: Path) -> None:
    target = tmp_path / "fresh.txt"

    buffer = TextBuffer.load(str(target))

    assert buffer.lines == [""]
    assert buffer.file == str(target)


def test_load_empty_file_keeps_one_row(tmp_path: Path) -> None:
    target = tmp_path / "empty.txt"
    target.write_text("", encoding="utf-8")

    assert TextBuffer.load(str(target)).lines == [""]


def test_load_directory_raises_buffer_io_error(tmp_path: Path) -> None:
    with pytest.raises(BufferIOError):
        TextBuffer.load(str(tmp_path))
