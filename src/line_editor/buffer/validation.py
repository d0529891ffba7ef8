"""Address validation shared by the text buffer primitives."""

from __future__ import annotations

from typing import Sequence

LINE_TERMINATORS = frozenset("\n\r")


class OutOfRangeError(IndexError):
    """Raised when a buffer primitive receives an address outside the document.

    Callers are expected to clamp through :class:`~line_editor.buffer.Cursor`
    first, so seeing this error means the clamp step was skipped.
    """

    def __init__(
        self, message: str, *, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(message)
        self.line = line
        self.column = column


def ensure_line(lines: Sequence[str], line: int) -> int:
    if line < 0 or line >= len(lines):
        raise OutOfRangeError(
            f"Line {line} out of range [0, {len(lines)})", line=line
        )
    return line


def ensure_column(lines: Sequence[str], line: int, column: int) -> int:
    ensure_line(lines, line)
    length = len(lines[line])
    if column < 0 or column > length:
        raise OutOfRangeError(
            f"Column {column} out of range [0, {length}] on line {line}",
            line=line,
            column=column,
        )
    return column


def ensure_line_text(text: str) -> str:
    """Reject text that would smuggle a line boundary into a single line."""

    if any(ch in LINE_TERMINATORS for ch in text):
        raise ValueError(f"Line text may not contain line terminators: {text!r}")
    return text
