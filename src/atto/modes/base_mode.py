"""Base classes and shared utilities for editor modes."""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, MutableMapping, Optional, Tuple, cast

from atto.buffer import Buffer
from atto.commands import CommandInterpreter


class ModeName(str, Enum):
    NORMAL = "normal"
    INSERT = "insert"
    COMMAND = "command"

    @property
    def label(self) -> str:
        return self.value.upper()


@dataclass(slots=True)
class KeyInput:
    """Normalized key event passed to modes."""

    key: str
    modifiers: Tuple[str, ...] = ()
    text: Optional[str] = None

    @property
    def printable(self) -> Optional[str]:
        """The single printable character this key types, if any."""

        if self.modifiers or not self.text or len(self.text) != 1:
            return None
        return self.text if self.text.isprintable() else None


@dataclass(slots=True)
class ModeResult:
    """Result returned from ``Mode.handle_key``."""

    consumed: bool
    switch_to: Optional[str] = None
    status: str = "ok"
    message: Optional[str] = None


@dataclass(slots=True)
class ModeContext:
    """Shared services every mode can access."""

    buffer: Buffer
    bus: "ModeBus"
    commands: CommandInterpreter = field(default_factory=CommandInterpreter)
    extras: Dict[str, object] = field(default_factory=dict)


def command_state(context: ModeContext) -> MutableMapping[str, object]:
    """Shared command-line state: ``text`` holds what has been typed."""

    state = cast(
        MutableMapping[str, object], context.extras.setdefault("command_state", {})
    )
    state.setdefault("text", "")
    return state


class ModeBus:
    """Synchronous publish/subscribe channel shared by modes and the session.

    Events used by the editor: ``mode.switch``, ``command.start``,
    ``command.end``, ``command.submit``, ``command.write``, ``command.quit``
    and ``command.error``. Subscribers run in subscription order.
    """

    def __init__(self) -> None:
        self._handlers: Dict[str, List[Callable[[object], None]]] = defaultdict(list)

    def subscribe(self, event: str, handler: Callable[[object], None]) -> None:
        self._handlers[event].append(handler)

    def emit(self, event: str, payload: object | None = None) -> None:
        for handler in tuple(self._handlers.get(event, ())):
            handler(payload)


class Mode:
    """One state of the editor; subclasses set ``name`` and ``handle_key``."""

    name: str = "mode"

    def __init__(self, context: ModeContext) -> None:
        self.context = context

    def on_enter(self, previous: Optional[str]) -> None:
        """Called after the manager makes this mode active."""

    def on_exit(self, next_mode: Optional[str]) -> None:
        """Called before the manager leaves this mode."""

    def handle_key(self, key: KeyInput) -> ModeResult:  # pragma: no cover - abstract
        raise NotImplementedError(f"{type(self).__name__} does not handle keys")
