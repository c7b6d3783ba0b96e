"""High-level buffer façade combining document, cursor, and viewport."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Callable, ContextManager, Iterable, Optional

from atto.runtime import telemetry

from .document import BufferDocument
from .state import Cursor
from .sync import Position
from .viewport import Viewport


@dataclass(slots=True)
class BufferDelta:
    version: int
    cursor: Position
    label: str
    changed: bool


class Buffer:
    """Every verb mutates, re-clamps the cursor, then resyncs the viewport."""

    def __init__(
        self,
        *,
        name: str = "default",
        document: Optional[BufferDocument] = None,
        cursor: Optional[Cursor] = None,
        viewport: Optional[Viewport] = None,
    ) -> None:
        self.name = name
        self.document = document or BufferDocument()
        self.cursor = cursor or Cursor()
        self.viewport = viewport or Viewport()
        self._sync()

    @classmethod
    def from_lines(cls, lines: Iterable[str], *, name: str = "default") -> "Buffer":
        return cls(name=name, document=BufferDocument.from_lines(lines))

    def replace_document(self, document: BufferDocument) -> None:
        self.document = document
        self.cursor.set(0, 0)
        self.viewport.scroll_row = 0
        self.viewport.scroll_col = 0
        self._sync()

    def move_cursor(self, row: int, column: int) -> Position:
        with Transaction(self, "move_cursor"):
            self.cursor.set(row, column)
        return self.cursor.position

    def resize(self, height: int, width: int) -> None:
        self.viewport.resize(height, width)
        self._sync()

    def insert_char(self, ch: str) -> BufferDelta:
        with Transaction(self, "insert_char") as tx:
            row, col = self.cursor.position
            self.document.insert_char(row, col, ch)
            self.cursor.set(row, col + 1)
            tx.changed = True
        return tx.delta()

    def new_line(self) -> BufferDelta:
        with Transaction(self, "new_line") as tx:
            row, col = self.cursor.position
            self.document.split_line(row, col)
            self.cursor.set(row + 1, 0)
            tx.changed = True
        return tx.delta()

    def backspace(self) -> BufferDelta:
        with Transaction(self, "backspace") as tx:
            row, col = self.cursor.position
            if col > 0:
                tx.changed = self.document.delete_char_before(row, col)
                self.cursor.set(row, col - 1)
            elif row > 0:
                joint = self.document.line_length(row - 1)
                tx.changed = self.document.merge_with_previous(row)
                self.cursor.set(row - 1, joint)
        return tx.delta()

    def move_up(self) -> BufferDelta:
        return self._move("move_up", self.cursor.move_up)

    def move_down(self) -> BufferDelta:
        return self._move("move_down", self.cursor.move_down)

    def move_left(self) -> BufferDelta:
        return self._move("move_left", self.cursor.move_left)

    def move_right(self) -> BufferDelta:
        return self._move("move_right", self.cursor.move_right)

    def _move(
        self, label: str, motion: Callable[[BufferDocument], None]
    ) -> BufferDelta:
        with Transaction(self, label) as tx:
            motion(self.document)
        return tx.delta()

    def _sync(self) -> None:
        self.cursor.clamp(self.document)
        self.viewport.resync(self.cursor)


class Transaction(AbstractContextManager["Transaction"]):
    """Instrumented edit scope; the cursor is clamped and resynced on exit."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self.changed = False
        self._span_cm: Optional[ContextManager[object]] = None

    def __enter__(self) -> "Transaction":
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={
                "buffer": self.buffer.name,
                "cursor": self.buffer.cursor.position,
            },
        )
        self._span_cm.__enter__()
        return self

    def delta(self) -> BufferDelta:
        return BufferDelta(
            version=self.buffer.document.version,
            cursor=self.buffer.cursor.position,
            label=self.label,
            changed=self.changed,
        )

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self.buffer._sync()
        finally:
            if self._span_cm is not None:
                self._span_cm.__exit__(exc_type, exc, tb)
        return False
