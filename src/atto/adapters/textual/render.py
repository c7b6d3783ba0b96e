"""Pure functions turning a ``BufferMirror`` into Rich text for the app."""

from __future__ import annotations

from typing import Tuple

from rich.text import Text

from atto.buffer import BufferMirror

GUTTER_WIDTH = 5
# title row + status row
CHROME_ROWS = 2

GUTTER_STYLE = "grey50"
CURSOR_STYLE = "reverse"
STATUS_STYLE = "black on white"


def text_area_size(terminal_width: int, terminal_height: int) -> Tuple[int, int]:
    """Return ``(height, width)`` left for buffer text."""

    return (
        max(0, terminal_height - CHROME_ROWS),
        max(0, terminal_width - GUTTER_WIDTH),
    )


def render_text_area(mirror: BufferMirror) -> Text:
    cursor_row, cursor_col = mirror.cursor_screen
    output = Text(no_wrap=True, overflow="crop")
    for index, (number, line) in enumerate(mirror.lines):
        if index:
            output.append("\n")
        output.append(f"{number:<{GUTTER_WIDTH}}", style=GUTTER_STYLE)
        if mirror.modal and index == cursor_row and 0 <= cursor_col <= len(line):
            output.append(line[:cursor_col])
            output.append(line[cursor_col : cursor_col + 1] or " ", style=CURSOR_STYLE)
            output.append(line[cursor_col + 1 :])
        else:
            output.append(line)
    return output


def render_status(mirror: BufferMirror, width: int) -> Text:
    """Command prompt, else status message, else mode/file/position."""

    if mirror.command_active or mirror.status:
        return Text(mirror.status, style=STATUS_STYLE, no_wrap=True, overflow="crop")

    left = Text(style=STATUS_STYLE)
    if mirror.modal:
        left.append(f"{mirror.mode:<8}", style="bold")
        left.append("│")
    left.append(mirror.filename)
    right = Text(f"│ Ln {mirror.line}, Col {mirror.column} ", style=STATUS_STYLE)

    gap = max(1, width - left.cell_len - right.cell_len)
    line = Text(style=STATUS_STYLE, no_wrap=True, overflow="crop")
    line.append_text(left)
    line.append(" " * gap)
    line.append_text(right)
    return line


__all__ = [
    "GUTTER_WIDTH",
    "CHROME_ROWS",
    "text_area_size",
    "render_text_area",
    "render_status",
]
