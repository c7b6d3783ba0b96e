"""Buffer abstractions: line storage, cursor, viewport, and file I/O."""

from .buffer import Buffer, BufferDelta, Transaction
from .document import BufferDocument
from .files import read_lines, write_lines
from .state import Cursor
from .sync import BufferMirror, BufferValidationError, Position
from .validation import clamp_position, ensure_position
from .viewport import Viewport

__all__ = [
    "BufferDocument",
    "Cursor",
    "Viewport",
    "Buffer",
    "BufferDelta",
    "Transaction",
    "BufferMirror",
    "BufferValidationError",
    "Position",
    "clamp_position",
    "ensure_position",
    "read_lines",
    "write_lines",
]
