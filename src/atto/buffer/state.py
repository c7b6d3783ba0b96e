"""Cursor state and line-based navigation."""

from __future__ import annotations

from dataclasses import dataclass

from .document import BufferDocument
from .sync import Position
from .validation import clamp_position


@dataclass(slots=True)
class Cursor:
    """Mutable (row, column) position inside a ``BufferDocument``.

    ``column`` may equal the line length, meaning "after the last character".
    Movements never remember a desired column: moving onto a shorter line
    pulls the column in for good.
    """

    row: int = 0
    column: int = 0

    @property
    def position(self) -> Position:
        return (self.row, self.column)

    def set(self, row: int, column: int) -> None:
        self.row = row
        self.column = column

    def clamp(self, document: BufferDocument) -> None:
        self.row, self.column = clamp_position(document, self.row, self.column)

    def move_up(self, document: BufferDocument) -> None:
        if self.row > 0:
            self.row -= 1
        self.clamp(document)

    def move_down(self, document: BufferDocument) -> None:
        if self.row < document.line_count() - 1:
            self.row += 1
        self.clamp(document)

    def move_left(self, document: BufferDocument) -> None:
        if self.column > 0:
            self.column -= 1
        elif self.row > 0:
            self.row -= 1
            self.column = document.line_length(self.row)
        self.clamp(document)

    def move_right(self, document: BufferDocument) -> None:
        if self.column < document.line_length(self.row):
            self.column += 1
        elif self.row < document.line_count() - 1:
            self.row += 1
            self.column = 0
        self.clamp(document)
