"""Boundary types exchanged between the editing core and render surfaces."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Position = Tuple[int, int]  # (row, column)


@dataclass(frozen=True, slots=True)
class BufferMirror:
    """Read-only frame describing everything a surface needs to draw.

    ``lines`` holds ``(line_number, text)`` pairs for the visible rows, with
    1-based numbers and text already cut to the horizontal window.
    ``cursor_screen`` is relative to the text area, not the terminal.
    """

    lines: Tuple[Tuple[int, str], ...]
    cursor_screen: Position
    mode: str
    modal: bool
    filename: str
    line: int
    column: int
    status: str
    command_active: bool = False


class BufferValidationError(RuntimeError):
    """Raised when a caller hands the buffer out-of-bounds coordinates."""

    def __init__(self, message: str, *, position: Position | None = None) -> None:
        super().__init__(message)
        self.position = position
