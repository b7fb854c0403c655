"""Mode manager coordinating Normal/Insert dispatch."""

from __future__ import annotations

from typing import Dict, Optional, Type

from modal_editor.keymaps import KeymapRegistry
from modal_editor.runtime import telemetry
from modal_editor.session import EditorSession

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult


class ModeManager:
    """Owns the active mode, handles transitions, and dispatches key events."""

    def __init__(self, context: ModeContext) -> None:
        self.context = context
        self._modes: Dict[str, Mode] = {}
        self._active: Optional[str] = None
        self.context.extras.setdefault("mode_manager", self)

    @classmethod
    def for_session(
        cls,
        session: EditorSession,
        *,
        keymaps: KeymapRegistry | None = None,
    ) -> "ModeManager":
        """Build a manager with the default keymaps and Normal/Insert modes."""

        # Defaults import the actions, which import this package.
        from modal_editor.keymaps.defaults import load_default_keymaps

        from .insert_mode import InsertMode
        from .normal_mode import NormalMode

        if keymaps is None:
            keymaps = KeymapRegistry(logger_name="modal_editor.keymaps")
            load_default_keymaps(keymaps)
        manager = cls(ModeContext(session=session, keymaps=keymaps, bus=ModeBus()))
        manager.register_mode(NormalMode)
        manager.register_mode(InsertMode)
        return manager

    @property
    def active_mode(self) -> Optional[Mode]:
        if self._active is None:
            return None
        return self._modes.get(self._active)

    @property
    def mode_name(self) -> str:
        return self._active or "?"

    def register_mode(
        self,
        mode_cls: Type[Mode],
        /,
        *mode_args: object,
        **mode_kwargs: object,
    ) -> Mode:
        mode = mode_cls(self.context, *mode_args, **mode_kwargs)
        if mode.name in self._modes:
            raise ValueError(f"Mode '{mode.name}' already registered")
        self._modes[mode.name] = mode
        if self._active is None:
            self._active = mode.name
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        if name not in self._modes:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self.active_mode
        if previous and previous.name == name:
            return
        if previous:
            previous.on_exit(name)
        self._active = name
        self.context.session.status = ""
        self._modes[name].on_enter(previous.name if previous else None)
        self.context.bus.emit("mode.switch", name)
        telemetry.record_event("mode.switch", data={"mode": name})

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self.active_mode
        if mode is None:
            raise RuntimeError("No active mode registered")
        with telemetry.span(
            name=f"mode::{mode.name}",
            component=True,
            metadata={"key": key.token, "mode": mode.name},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result
