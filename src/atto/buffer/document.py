"""Line-oriented text storage for atto buffers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .validation import ensure_position, ensure_row


@dataclass(slots=True)
class BufferDocument:
    """Mutable list-of-lines text store.

    Lines never contain ``"\\n"`` and the document never holds fewer than one
    line: an empty file is ``[""]``. Every successful mutation bumps
    ``version`` and marks the document dirty. Mutations are O(line length),
    which is plenty for interactive editing.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    dirty: bool = False

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "BufferDocument":
        collected = list(lines)
        if not collected:
            collected = [""]
        return cls(_lines=collected, version=0, dirty=False)

    def snapshot(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def line_count(self) -> int:
        return len(self._lines)

    def line_length(self, row: int) -> int:
        return len(self._lines[ensure_row(self, row)])

    def line_text(self, row: int) -> str:
        return self._lines[ensure_row(self, row)]

    def insert_char(self, row: int, col: int, ch: str) -> None:
        """Insert ``ch`` before column ``col``; the caller advances the cursor."""

        if len(ch) != 1 or ch == "\n":
            raise ValueError(f"insert_char expects one non-newline character, got {ch!r}")
        ensure_position(self, row, col)
        line = self._lines[row]
        self._lines[row] = line[:col] + ch + line[col:]
        self._touch()

    def split_line(self, row: int, col: int) -> None:
        ensure_position(self, row, col)
        line = self._lines[row]
        self._lines[row : row + 1] = [line[:col], line[col:]]
        self._touch()

    def merge_with_previous(self, row: int) -> bool:
        """Append line ``row`` to line ``row - 1``; rejected at row 0."""

        ensure_row(self, row)
        if row == 0:
            return False
        self._lines[row - 1] += self._lines.pop(row)
        self._touch()
        return True

    def delete_char_before(self, row: int, col: int) -> bool:
        """Remove the character at ``col - 1``; rejected at column 0."""

        ensure_position(self, row, col)
        if col == 0:
            return False
        line = self._lines[row]
        self._lines[row] = line[: col - 1] + line[col:]
        self._touch()
        return True

    def mark_clean(self) -> None:
        self.dirty = False

    def _touch(self) -> None:
        self.version += 1
        self.dirty = True
