"""Text buffer and cursor primitives."""

from .cursor import Cursor, CursorAddress
from .document import TextBuffer
from .validation import OutOfRangeError, ensure_column, ensure_line

__all__ = [
    "Cursor",
    "CursorAddress",
    "TextBuffer",
    "OutOfRangeError",
    "ensure_column",
    "ensure_line",
]
