"""Textual adapter that wires ModeManager results into UI callbacks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, Optional

from modal_editor.buffer import BufferMirror
from modal_editor.modes import KeyInput, ModeManager, ModeResult
from modal_editor.session import EditorSession


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    request_exit: Callable[[], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges ModeManager + bus events to a Textual-friendly surface."""

    def __init__(self, manager: ModeManager, hooks: TextualUIHooks) -> None:
        self.manager = manager
        self.hooks = hooks
        self._subscribe_events()
        self._refresh_buffer()

    @property
    def session(self) -> EditorSession:
        return self.manager.context.session

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> ModeResult:
        """Translate a Textual key event into a KeyInput and dispatch it."""

        normalized_modifiers = tuple(str(mod).upper() for mod in modifiers)
        self._log_state("key ->", key=key, text=text, mods=normalized_modifiers)
        result = self.manager.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized_modifiers)
        )
        self._after_mode_result(result)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            message=result.message,
            switch_to=result.switch_to,
        )
        return result

    def _after_mode_result(self, result: ModeResult) -> None:
        self.hooks.update_status(self.session.status or self.manager.mode_name.upper())
        self._refresh_buffer()
        if self.session.quit_requested:
            self.hooks.request_exit()

    def _subscribe_events(self) -> None:
        bus = self.manager.context.bus
        for event in (
            "mode.switch",
            "history.undo",
            "history.redo",
            "buffer.save",
            "session.quit",
        ):
            bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log_state("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _refresh_buffer(self) -> None:
        self.hooks.update_buffer(self.session.mirror(self.manager.mode_name))

    def _log_state(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix]
        for key, value in snapshot.items():
            parts.append(f"{key}={value!r}")
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        session = self.session
        return {
            "mode": self.manager.mode_name,
            "cursor": (session.cursor.x, session.cursor.y),
            "lines": session.buffer.line_count,
            "history": f"{session.history.index + 1}/{len(session.history)}",
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks"]
