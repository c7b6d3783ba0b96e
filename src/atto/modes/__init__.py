"""Mode manager and the per-mode key handlers."""

from .base_mode import (
    KeyInput,
    Mode,
    ModeBus,
    ModeContext,
    ModeName,
    ModeResult,
    command_state,
)
from .normal_mode import NormalMode
from .insert_mode import InsertMode
from .command_mode import CommandMode
from .mode_manager import ModeManager

__all__ = [
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeName",
    "ModeResult",
    "command_state",
    "NormalMode",
    "InsertMode",
    "CommandMode",
    "ModeManager",
]
