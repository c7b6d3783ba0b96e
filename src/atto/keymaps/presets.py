"""Single-mode key binding presets for non-modal configurations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, Tuple

from .models import DOWN, LEFT, RIGHT, UP, KeyStroke

ARROW_UP = KeyStroke(UP)
ARROW_DOWN = KeyStroke(DOWN)
ARROW_LEFT = KeyStroke(LEFT)
ARROW_RIGHT = KeyStroke(RIGHT)


class KeyPreset(str, Enum):
    """Named presets accepted by ``key_binding_preset``."""

    ATTO = "atto"
    NANO = "nano"
    MICRO = "micro"
    EMACS = "emacs"


@dataclass(frozen=True, slots=True)
class KeyBindingSet:
    """The six named actions a non-modal preset assigns to keys."""

    save: KeyStroke
    quit: KeyStroke
    move_up: KeyStroke = ARROW_UP
    move_down: KeyStroke = ARROW_DOWN
    move_left: KeyStroke = ARROW_LEFT
    move_right: KeyStroke = ARROW_RIGHT

    def items(self) -> Iterator[Tuple[str, KeyStroke]]:
        """Yield ``(action_name, stroke)`` pairs."""

        yield "quit", self.quit
        yield "save", self.save
        yield "move_up", self.move_up
        yield "move_down", self.move_down
        yield "move_left", self.move_left
        yield "move_right", self.move_right


PRESETS: Dict[KeyPreset, KeyBindingSet] = {
    KeyPreset.ATTO: KeyBindingSet(
        save=KeyStroke.ctrl("s"),
        quit=KeyStroke.ctrl("q"),
    ),
    KeyPreset.NANO: KeyBindingSet(
        save=KeyStroke.ctrl("o"),
        quit=KeyStroke.ctrl("x"),
    ),
    KeyPreset.MICRO: KeyBindingSet(
        save=KeyStroke.ctrl("s"),
        quit=KeyStroke.ctrl("q"),
    ),
    # emacs chords are reduced to single keys: C-x saves, C-c quits.
    KeyPreset.EMACS: KeyBindingSet(
        save=KeyStroke.ctrl("x"),
        quit=KeyStroke.ctrl("c"),
        move_up=KeyStroke.ctrl("p"),
        move_down=KeyStroke.ctrl("n"),
        move_left=KeyStroke.ctrl("b"),
        move_right=KeyStroke.ctrl("f"),
    ),
}


def resolve_preset(name: str | KeyPreset) -> KeyPreset:
    """Map a configured name onto a preset, defaulting to ``atto``."""

    try:
        return KeyPreset(str(getattr(name, "value", name)).strip().lower())
    except ValueError:
        return KeyPreset.ATTO


def preset_for(name: str | KeyPreset) -> KeyBindingSet:
    return PRESETS[resolve_preset(name)]


__all__ = [
    "KeyPreset",
    "KeyBindingSet",
    "PRESETS",
    "resolve_preset",
    "preset_for",
]
