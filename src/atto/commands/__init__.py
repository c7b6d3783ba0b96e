"""Command-line interpretation for Command mode."""

from .interpreter import (
    COMMAND_STYLES,
    DEFAULT_COMMAND_STYLE,
    CommandInterpreter,
    CommandOutcome,
    CommandStyle,
    get_style,
)

__all__ = [
    "COMMAND_STYLES",
    "DEFAULT_COMMAND_STYLE",
    "CommandInterpreter",
    "CommandOutcome",
    "CommandStyle",
    "get_style",
]
