"""Adapter that wires Textual key and resize events into an EditorSession."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from atto.buffer import BufferMirror
from atto.keymaps import BACKSPACE, DOWN, ENTER, ESC, LEFT, RIGHT, UP
from atto.modes import KeyInput, ModeResult
from atto.session import EditorSession

from .render import text_area_size


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


_NAMED_KEYS: Dict[str, str] = {
    "escape": ESC,
    "enter": ENTER,
    "backspace": BACKSPACE,
    "ctrl+h": BACKSPACE,
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def normalize_key(key: str, character: Optional[str] = None) -> Optional[KeyInput]:
    """Translate Textual's ``(key, character)`` pair into a ``KeyInput``.

    Returns ``None`` for keys the editor has no use for (function keys,
    tab, alt chords).
    """

    named = _NAMED_KEYS.get(key)
    if named is not None:
        return KeyInput(key=named)
    if key.startswith("ctrl+"):
        rest = key[len("ctrl+") :]
        if len(rest) == 1:
            return KeyInput(key=rest.lower(), modifiers=("ctrl",))
        return None
    if character and len(character) == 1 and character.isprintable():
        return KeyInput(key=character, text=character)
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks invoked by the adapter to update Textual widgets."""

    update_frame: Callable[[BufferMirror], None]
    request_exit: Callable[[], None] = _noop
    # Optional realtime log callback a host may use to surface debug lines
    log: Callable[[str], None] = _noop


class TextualEditorAdapter:
    """Bridges a session to a Textual-friendly surface."""

    def __init__(self, session: EditorSession, hooks: TextualUIHooks) -> None:
        self.session = session
        self.hooks = hooks
        self._refresh()

    def handle_textual_key(
        self, key: str, character: Optional[str] = None
    ) -> Optional[ModeResult]:
        """Normalize and dispatch one key; ``None`` when the key is unusable."""

        event = normalize_key(key, character)
        if event is None:
            self._log_state("key dropped", key=key)
            return None
        self._log_state("key ->", key=event.key, mods=event.modifiers)
        result = self.session.handle_input(event)
        self._log_state(
            "result <-",
            consumed=result.consumed,
            status=result.status,
            switch_to=result.switch_to,
        )
        self._refresh()
        if not self.session.is_running():
            self.hooks.request_exit()
        return result

    def resize(self, terminal_width: int, terminal_height: int) -> None:
        height, width = text_area_size(terminal_width, terminal_height)
        self.session.resize(height, width)
        self._refresh()

    def _refresh(self) -> None:
        self.hooks.update_frame(self.session.mirror())

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
            "mode": session.mode_label,
            "cursor": session.buffer.cursor.position,
            "command": session.command_line,
            "buffer_version": session.buffer.document.version,
        }


__all__ = ["TextualEditorAdapter", "TextualUIHooks", "normalize_key"]
