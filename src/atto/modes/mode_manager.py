"""Mode manager coordinating Normal/Insert/Command handlers."""

from __future__ import annotations

from typing import Dict, Optional, Type

from atto.keymaps.registry import KeymapRegistry
from atto.keymaps.resolver import KeymapResolver
from atto.runtime import telemetry

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Finite state machine over the registered modes.

    The first registered mode starts active. ``handle_key`` hands the key to
    the active mode and, if the result names ``switch_to``, performs that
    transition once the mode is done with the key. The registry and resolver
    are published in ``context.extras`` so modes can look bindings up.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
    ) -> None:
        registry = keymap_registry or KeymapRegistry(logger_name="atto.keymaps")
        self.context = context
        self.keymap_registry = registry
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            registry, logger_name="atto.keymaps"
        )
        context.extras.setdefault("keymap_registry", self.keymap_registry)
        context.extras.setdefault("keymap_resolver", self.keymap_resolver)
        self._modes: Dict[str, Mode] = {}
        self._current: Optional[Mode] = None

    @property
    def active_mode(self) -> Optional[Mode]:
        return self._current

    @property
    def active_name(self) -> Optional[str]:
        return self._current.name if self._current else None

    def has_mode(self, name: str) -> bool:
        return name in self._modes

    def register_mode(self, mode_cls: Type[Mode], /, **mode_kwargs: object) -> Mode:
        if mode_cls.name in self._modes:
            raise ValueError(f"Mode '{mode_cls.name}' already registered")
        mode = mode_cls(self.context, **mode_kwargs)
        self._modes[mode.name] = mode
        if self._current is None:
            self._current = mode
            mode.on_enter(None)
        return mode

    def switch_mode(self, name: str) -> None:
        target = self._modes.get(name)
        if target is None:
            raise KeyError(f"Unknown mode '{name}'")
        previous = self._current
        if previous is target:
            return
        previous_name = previous.name if previous else None
        if previous is not None:
            previous.on_exit(name)
        self._current = target
        target.on_enter(previous_name)
        self.context.bus.emit("mode.switch", name)
        telemetry.record_event(
            "mode.switch", data={"from": previous_name, "mode": name}
        )

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self._current
        if mode is None:
            raise RuntimeError("No mode registered")
        with telemetry.span(
            f"mode::{mode.name}",
            component="modes",
            metadata={"key": key.key, "modifiers": "+".join(key.modifiers)},
        ):
            result = mode.handle_key(key)
        if result.switch_to:
            self.switch_mode(result.switch_to)
        return result
