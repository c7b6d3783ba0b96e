"""Minimal modal terminal text editor."""

__all__ = [
    "actions",
    "adapters",
    "buffer",
    "commands",
    "config",
    "keymaps",
    "modes",
    "runtime",
    "session",
]

__version__ = "0.1.0"
