"""Executable Textual app that hosts the editor."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence, Tuple

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.widgets import Static

from modal_editor.buffer import BufferIOError, BufferMirror
from modal_editor.modes import ModeManager
from modal_editor.runtime import telemetry
from modal_editor.runtime.settings import EditorSettings
from modal_editor.session import EditorSession
from modal_editor.view import Viewport

from .controller import TextualEditorAdapter, TextualUIHooks

_NAMED_KEYS = {
    "escape": "ESC",
    "enter": "ENTER",
    "return": "ENTER",
    "backspace": "BACKSPACE",
    "tab": "TAB",
}


def render_mirror(mirror: BufferMirror, viewport: Viewport) -> Text:
    """Paint the visible rows with the caret cell shown in reverse video."""

    viewport.follow(mirror.cursor.y)
    rows = viewport.render(mirror.lines)
    col, row = viewport.screen_cell(mirror.cursor)
    text = Text()
    for index, line in enumerate(rows):
        if index:
            text.append("\n")
        if index != row:
            text.append(line)
            continue
        padded = line.ljust(col + 1)
        start = len(text)
        text.append(padded)
        text.stylize("reverse", start + col, start + col + 1)
    return text


class EditorApp(App[None]):
    """Single-buffer modal editor UI."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
	}
	"""

    BINDINGS = [("ctrl+c", "quit", "Quit")]

    def __init__(self, session: EditorSession) -> None:
        super().__init__()
        self.session = session
        self.viewport = Viewport(width=80, height=24)
        self.manager: ModeManager | None = None
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._mirror: BufferMirror | None = None
        self.status_text = ""
        self._telemetry_logger = telemetry.get_logger("modal_editor.adapters.textual")

    def compose(self) -> ComposeResult:
        self._buffer_widget = Static("", id="buffer-view")
        self._status_widget = Static("", id="status-line")
        yield self._buffer_widget
        yield self._status_widget

    def on_mount(self) -> None:
        self.viewport.resize(self.size.width, self.size.height)
        self.manager = ModeManager.for_session(self.session)
        hooks = TextualUIHooks(
            update_buffer=self._update_buffer,
            update_status=self._update_status,
            request_exit=self.exit,
            log=self._telemetry_logger.debug,
        )
        self.adapter = TextualEditorAdapter(self.manager, hooks)
        buffer = self.session.buffer
        self._update_status(f'"{buffer.file}" {buffer.line_count}L')

    def on_resize(self, event: events.Resize) -> None:
        self.viewport.resize(event.size.width, event.size.height)
        if self._mirror is not None:
            self._update_buffer(self._mirror)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def _update_buffer(self, mirror: BufferMirror) -> None:
        self._mirror = mirror
        if self._buffer_widget:
            self._buffer_widget.update(render_mirror(mirror, self.viewport))

    def _update_status(self, status: str) -> None:
        self.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        if event.key == "ctrl+c":
            return None
        if event.is_printable and event.character:
            return (event.character, event.character, ())
        *modifiers, key = event.key.split("+")
        key = _NAMED_KEYS.get(key, key)
        return (key, None, tuple(mod.upper() for mod in modifiers))


def _parse_args(
    argv: Optional[Sequence[str]], settings: EditorSettings
) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a text file in a modal editor.")
    parser.add_argument(
        "file",
        nargs="?",
        default=None,
        help=f"File to edit (default: {settings.default_file})",
    )
    parser.add_argument(
        "--tab-width",
        type=int,
        default=settings.tab_width,
        help="Spaces inserted by the Tab key (default: %(default)s)",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default=settings.log_preset,
        help="Telemetry preset (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    settings = EditorSettings.from_env()
    args = _parse_args(argv, settings)
    settings.tab_width = max(1, args.tab_width)
    telemetry.configure(preset=args.log_preset)

    try:
        session = EditorSession.open(args.file, settings=settings)
    except BufferIOError as exc:
        raise SystemExit(f"FATAL: {exc}") from exc
    EditorApp(session).run()


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
