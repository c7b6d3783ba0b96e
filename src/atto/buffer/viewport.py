"""Scroll offsets keeping the cursor inside the visible window."""

from __future__ import annotations

from dataclasses import dataclass

from .state import Cursor
from .sync import Position


@dataclass(slots=True)
class Viewport:
    """Scroll offsets plus the text area size supplied by the surface."""

    scroll_row: int = 0
    scroll_col: int = 0
    height: int = 0
    width: int = 0

    def resize(self, height: int, width: int) -> None:
        self.height = max(0, height)
        self.width = max(0, width)

    def resync(self, cursor: Cursor) -> None:
        """Scroll just far enough for ``cursor`` to be visible.

        An axis with no size is left alone.
        """

        if self.height > 0:
            if cursor.row < self.scroll_row:
                self.scroll_row = cursor.row
            elif cursor.row >= self.scroll_row + self.height:
                self.scroll_row = cursor.row - self.height + 1
        if self.width > 0:
            if cursor.column < self.scroll_col:
                self.scroll_col = cursor.column
            elif cursor.column >= self.scroll_col + self.width:
                self.scroll_col = cursor.column - self.width + 1

    def visible_rows(self, line_count: int) -> range:
        return range(self.scroll_row, min(line_count, self.scroll_row + self.height))

    def screen_position(self, cursor: Cursor) -> Position:
        return (cursor.row - self.scroll_row, cursor.column - self.scroll_col)

    def clip(self, text: str) -> str:
        return text[self.scroll_col : self.scroll_col + self.width]
