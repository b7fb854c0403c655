"""Keymap registry storing actions and resolving key strokes to them."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from modal_editor.runtime.telemetry import span

from .models import GLOBAL_MODE, ActionRef, Binding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int
    modes: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action."""

    binding: Binding
    action: ActionRef


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a stroke another binding owns."""

    def __init__(self, binding: Binding, existing: Binding) -> None:
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on {binding.mode}:{binding.key_signature}"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and the per-mode stroke index."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._mode_index: Dict[str, Dict[str, str]] = {}
        self._logger_name = logger_name

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        if not replace and action.id in self._actions:
            raise ValueError(f"Action '{action.id}' already registered")
        self._actions[action.id] = action
        return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "mode": binding.mode},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            existing = self._find(binding.mode, binding.key_signature)
            if existing is not None and existing.id != binding.id:
                if not replace:
                    raise KeymapConflictError(binding, existing)
                self.unregister_binding(existing.id)

            if binding.id in self._bindings:
                if not replace:
                    raise ValueError(f"Binding id '{binding.id}' already registered")
                self.unregister_binding(binding.id)

            self._bindings[binding.id] = binding
            self._mode_index.setdefault(binding.mode, {})[
                binding.key_signature
            ] = binding.id
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        binding = self._bindings.pop(binding_id, None)
        if binding is None:
            return None
        strokes = self._mode_index.get(binding.mode, {})
        strokes.pop(binding.key_signature, None)
        if not strokes:
            self._mode_index.pop(binding.mode, None)
        return binding

    def lookup(self, mode: str, token: str) -> Optional[ResolutionMatch]:
        """Resolve ``token`` in ``mode``, falling back to global bindings."""

        binding = self._find(mode, token) or self._find(GLOBAL_MODE, token)
        if binding is None:
            return None
        return ResolutionMatch(binding=binding, action=self.get_action(binding.action_id))

    def iter_bindings(self, mode: Optional[str] = None) -> Iterator[Binding]:
        if mode is None:
            yield from self._bindings.values()
            return
        for binding_id in self._mode_index.get(mode, {}).values():
            yield self._bindings[binding_id]

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            modes=tuple(sorted(self._mode_index)),
        )

    def _find(self, mode: str, token: str) -> Optional[Binding]:
        binding_id = self._mode_index.get(mode, {}).get(token)
        if binding_id is None:
            return None
        return self._bindings[binding_id]


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "ResolutionMatch",
]
