"""Row-oriented document storage with position-addressed edit primitives."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Tuple, Union

from modal_editor.runtime import telemetry

from .position import Position
from .sync import BufferIOError


@dataclass(frozen=True, slots=True)
class SameLine:
    """Backspace stayed on the caret's row (or did nothing)."""


@dataclass(frozen=True, slots=True)
class WrapLines:
    """Backspace joined or removed a row; the caret belongs at ``position``."""

    position: Position


BackspaceResult = Union[SameLine, WrapLines]


class TextBuffer:
    """Ordered sequence of rows plus the file they persist to.

    Positions are not validated here. Rows past the end are padded on demand
    and impossible deletions are no-ops; clamping is the dispatch layer's job.
    """

    def __init__(self, lines: Iterable[str] = ("",), file: str = "new.txt") -> None:
        self.lines: List[str] = list(lines) or [""]
        self.file = file

    @classmethod
    def load(cls, path: str) -> "TextBuffer":
        """Read ``path`` into a buffer; a missing file yields an empty one."""

        with telemetry.span(
            "buffer::load", component="buffer", metadata={"file": path}
        ) as handle:
            try:
                text = Path(path).read_text(encoding="utf-8")
            except FileNotFoundError:
                handle.add_metadata("new_file", True)
                return cls([""], path)
            except (OSError, UnicodeDecodeError) as exc:
                raise BufferIOError(f"Couldn't read {path}: {exc}", path=path) from exc
            lines = text.splitlines()
            handle.add_metadata("lines", len(lines))
            return cls(lines, path)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line(self, row: int) -> str:
        if 0 <= row < len(self.lines):
            return self.lines[row]
        return ""

    def line_length(self, row: int) -> int:
        return len(self.line(row))

    def write(self, pos: Position, char: str) -> None:
        if pos.y < len(self.lines):
            line = self.lines[pos.y]
            self.lines[pos.y] = line[: pos.x] + char + line[pos.x :]
            return

        # Grow the document down to the addressed row.
        self.lines.extend("" for _ in range(pos.y - len(self.lines)))
        self.lines.append(char)

    def backspace(self, pos: Position) -> BackspaceResult:
        if pos.y < len(self.lines) and pos.x > 0:
            line = self.lines[pos.y]
            self.lines[pos.y] = line[: pos.x - 1] + line[pos.x :]
            return SameLine()

        if pos.x <= 1 and 0 < pos.y < len(self.lines):
            above = pos.y - 1
            current = self.lines.pop(pos.y)
            seam = len(self.lines[above])
            if current:
                self.lines[above] += current
            return WrapLines(Position(seam, above))

        return SameLine()

    def new_line(self, pos: Position) -> None:
        if pos.y < len(self.lines):
            self.lines.insert(pos.y, "")
        else:
            self.lines.extend("" for _ in range(pos.y - len(self.lines) + 1))

    def enter(self, pos: Position) -> None:
        """Split row ``pos.y`` at ``pos.x``.

        A caret at or past the end of the row leaves the row intact and opens
        an empty row below it.
        """

        if pos.y >= len(self.lines):
            self.new_line(pos)
            return
        line = self.lines[pos.y]
        self.lines[pos.y : pos.y + 1] = [line[: pos.x], line[pos.x :]]

    def save(self) -> None:
        with telemetry.span(
            "buffer::save",
            component="buffer",
            metadata={"file": self.file, "lines": len(self.lines)},
        ):
            try:
                with open(self.file, "w", encoding="utf-8", newline="\n") as handle:
                    for line in self.lines:
                        handle.write(f"{line}\n")
            except OSError as exc:
                raise BufferIOError(
                    f"Couldn't write {self.file}: {exc.strerror or exc}", path=self.file
                ) from exc

    def snapshot(self) -> Tuple[str, ...]:
        return tuple(self.lines)

    def restore(self, rows: Iterable[str]) -> None:
        self.lines = list(rows) or [""]


__all__ = ["TextBuffer", "SameLine", "WrapLines", "BackspaceResult"]
