"""Validation and clamping helpers shared across buffer services."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .sync import BufferValidationError, Position

if TYPE_CHECKING:
    from .document import BufferDocument


def ensure_row(document: "BufferDocument", row: int) -> int:
    if row < 0 or row >= document.line_count():
        raise BufferValidationError("Row out of range", position=(row, 0))
    return row


def ensure_position(document: "BufferDocument", row: int, col: int) -> Position:
    ensure_row(document, row)
    if col < 0 or col > document.line_length(row):
        raise BufferValidationError("Column out of range", position=(row, col))
    return (row, col)


def clamp_position(document: "BufferDocument", row: int, col: int) -> Position:
    """Pull ``(row, col)`` back inside the document's current shape."""

    row = max(0, min(document.line_count() - 1, row))
    col = max(0, min(document.line_length(row), col))
    return (row, col)
