"""Command-line mode with inline editing and keymap integration."""

from __future__ import annotations

from typing import List

from atto.keymaps.models import BACKSPACE

from .base_mode import (
    KeyInput,
    Mode,
    ModeContext,
    ModeName,
    ModeResult,
    command_state,
)
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class CommandMode(Mode):
    name = ModeName.COMMAND.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)
        self._typed: List[str] = []

    def on_enter(self, previous: str | None) -> None:
        del previous
        self._typed.clear()
        self.context.bus.emit("command.start", None)
        self._sync_command_state()

    def on_exit(self, next_mode: str | None) -> None:
        del next_mode
        self.context.bus.emit("command.end", self.current_command)
        self._typed.clear()
        self._sync_command_state()

    @property
    def current_command(self) -> str:
        return "".join(self._typed)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, key_to_token(key))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)
        return self._handle_text_input(key)

    def _handle_text_input(self, key: KeyInput) -> ModeResult:
        if key.key == BACKSPACE and not key.modifiers:
            if self._typed:
                self._typed.pop()
                self._sync_command_state()
            return ModeResult(consumed=True, status="editing")

        ch = key.printable
        if ch is not None:
            self._typed.append(ch)
            self._sync_command_state()
            return ModeResult(consumed=True, status="editing")

        return ModeResult(consumed=False, status="ignored")

    def _sync_command_state(self) -> None:
        command_state(self.context)["text"] = self.current_command
