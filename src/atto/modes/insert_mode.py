"""Insert mode: bound keys first, then printable text goes into the buffer."""

from __future__ import annotations

from .base_mode import KeyInput, Mode, ModeContext, ModeName, ModeResult
from .keymap_helpers import execute_match, key_to_token, require_keymap_resolver


class InsertMode(Mode):
    """Also serves as the single editing mode of non-modal configurations,
    where the keymap carries the preset's save/quit/move bindings."""

    name = ModeName.INSERT.value

    def __init__(self, context: ModeContext) -> None:
        super().__init__(context)
        self._resolver = require_keymap_resolver(context)

    def handle_key(self, key: KeyInput) -> ModeResult:
        result = self._resolver.resolve(self.name, key_to_token(key))
        if result.status == "match" and result.match:
            return execute_match(self.context, result.match)

        ch = key.printable
        if ch is not None:
            self.context.buffer.insert_char(ch)
            return ModeResult(consumed=True, status="insert")

        return ModeResult(consumed=False, status="ignored")
