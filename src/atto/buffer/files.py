"""Reading and writing buffers as plain text files."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence

ENCODING = "utf-8"


def read_lines(path: Path) -> Optional[List[str]]:
    """Return the file's lines, or ``None`` when it does not exist.

    Lines are split on ``"\\n"`` only and lose one trailing ``"\\r"`` each, so
    CRLF files load cleanly. A final newline does not produce an extra empty
    line. Other ``OSError``/``UnicodeDecodeError`` failures propagate.
    """

    try:
        with path.open("r", encoding=ENCODING, newline="") as handle:
            data = handle.read()
    except FileNotFoundError:
        return None

    lines = data.split("\n")
    if data.endswith("\n"):
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def write_lines(path: Path, lines: Sequence[str]) -> None:
    """Write ``lines`` joined by ``"\\n"`` with no terminator after the last."""

    with path.open("w", encoding=ENCODING, newline="") as handle:
        handle.write("\n".join(lines))
