"""Cursor addressing and movement against a :class:`TextBuffer`."""

from __future__ import annotations

from typing import NamedTuple

from .document import TextBuffer


class CursorAddress(NamedTuple):
    """Zero-based ``(column, line)`` pair; column may equal the line length."""

    column: int
    line: int


class Cursor:
    """Single insertion point that keeps itself valid for a given buffer.

    Every operation is total: instead of rejecting a bad address the cursor
    clamps it, and every buffer-aware operation clamps on entry so a cursor
    left stale by an external document replacement repairs itself.
    """

    __slots__ = ("_column", "_line")

    def __init__(self, column: int = 0, line: int = 0) -> None:
        self._column = column
        self._line = line

    def __repr__(self) -> str:
        return f"Cursor(column={self._column}, line={self._line})"

    @property
    def column(self) -> int:
        return self._column

    @property
    def line(self) -> int:
        return self._line

    @property
    def address(self) -> CursorAddress:
        return CursorAddress(self._column, self._line)

    def clamp(self, buffer: TextBuffer) -> CursorAddress:
        last_line = buffer.line_count - 1
        self._line = min(max(self._line, 0), last_line)
        length = buffer.line_length(self._line)
        self._column = min(max(self._column, 0), length)
        return self.address

    def set_position(self, column: int, line: int, buffer: TextBuffer) -> CursorAddress:
        self._column = column
        self._line = line
        return self.clamp(buffer)

    def move_left(self, buffer: TextBuffer) -> CursorAddress:
        self.clamp(buffer)
        if self._column > 0:
            self._column -= 1
        elif self._line > 0:
            self._line -= 1
            self._column = buffer.line_length(self._line)
        return self.address

    def move_right(self, buffer: TextBuffer) -> CursorAddress:
        self.clamp(buffer)
        if self._column < buffer.line_length(self._line):
            self._column += 1
        elif self._line < buffer.line_count - 1:
            self._line += 1
            self._column = 0
        return self.address

    def move_up(self, buffer: TextBuffer) -> CursorAddress:
        self.clamp(buffer)
        if self._line > 0:
            self._line -= 1
            self._column = min(self._column, buffer.line_length(self._line))
        return self.address

    def move_down(self, buffer: TextBuffer) -> CursorAddress:
        self.clamp(buffer)
        if self._line < buffer.line_count - 1:
            self._line += 1
            self._column = min(self._column, buffer.line_length(self._line))
        return self.address

    def move_to_line_start(self, buffer: TextBuffer) -> CursorAddress:
        self.clamp(buffer)
        self._column = 0
        return self.address

    def move_to_line_end(self, buffer: TextBuffer) -> CursorAddress:
        self.clamp(buffer)
        self._column = buffer.line_length(self._line)
        return self.address
