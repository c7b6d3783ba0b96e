"""Declarative keymap registry, resolver, and key binding presets.

Default bindings live in ``atto.keymaps.defaults``; they pull in the action
implementations, which in turn depend on the modes package, so they are not
re-exported here.
"""

from .models import (
    BACKSPACE,
    DOWN,
    ENTER,
    ESC,
    LEFT,
    RIGHT,
    UP,
    ActionRef,
    Binding,
    KeyStroke,
)
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats
from .resolver import KeymapResolver, KeymapTable, ResolutionMatch, ResolutionResult
from .presets import PRESETS, KeyBindingSet, KeyPreset, preset_for, resolve_preset

__all__ = [
    "ESC",
    "ENTER",
    "BACKSPACE",
    "UP",
    "DOWN",
    "LEFT",
    "RIGHT",
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
    "KeymapResolver",
    "KeymapTable",
    "ResolutionResult",
    "ResolutionMatch",
    "PRESETS",
    "KeyBindingSet",
    "KeyPreset",
    "preset_for",
    "resolve_preset",
]
