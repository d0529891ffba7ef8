"""Line-oriented text storage for line_editor buffers."""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import Iterable, List, Sequence

from .validation import ensure_column, ensure_line, ensure_line_text

_TAGS = itertools.count()


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


@dataclass(slots=True)
class TextBuffer:
    """Mutable list-of-lines document with a version tag.

    ``version`` is bumped by every mutation that actually changes content.
    ``tag`` is process-unique and replaced on the same mutations, so a
    renderer can tell two buffers apart even when their versions agree.
    Addresses are validated, never clamped; clamping belongs to the cursor.
    """

    _lines: List[str] = field(default_factory=lambda: [""])
    version: int = 0
    tag: int = field(init=False, default_factory=lambda: next(_TAGS))

    def __post_init__(self) -> None:
        if not self._lines:
            self._lines = [""]
        for line in self._lines:
            ensure_line_text(line)

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        return cls(_lines=normalize_newlines(text).split("\n"))

    @property
    def line_count(self) -> int:
        return len(self._lines)

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    def lines(self) -> Sequence[str]:
        """Return the current lines without exposing internal mutability."""

        return tuple(self._lines)

    def get_line(self, line_index: int) -> str:
        return self._lines[ensure_line(self._lines, line_index)]

    def line_length(self, line_index: int) -> int:
        return len(self.get_line(line_index))

    def insert_character(self, line_index: int, column: int, ch: str) -> None:
        """Insert ``ch`` before ``column``, shifting the rest of the line right."""

        ensure_column(self._lines, line_index, column)
        if len(ch) != 1:
            raise ValueError(f"Expected a single character, got {ch!r}")
        ensure_line_text(ch)
        line = self._lines[line_index]
        self._lines[line_index] = line[:column] + ch + line[column:]
        self._touch()

    def delete_character_before(self, line_index: int, column: int) -> int:
        """Backspace at ``(column, line_index)`` and return the new column.

        At column zero the line is joined onto the previous one and the
        returned column is the junction point, i.e. the previous line's
        length before the join. At the very start of the document nothing
        changes and ``0`` is returned.
        """

        ensure_column(self._lines, line_index, column)
        if column > 0:
            line = self._lines[line_index]
            self._lines[line_index] = line[: column - 1] + line[column:]
            self._touch()
            return column - 1

        if line_index == 0:
            return 0

        previous = self._lines[line_index - 1]
        self._lines[line_index - 1] = previous + self._lines[line_index]
        del self._lines[line_index]
        self._touch()
        return len(previous)

    def insert_line_break(self, line_index: int, column: int) -> None:
        """Split the addressed line; the tail moves to ``line_index + 1``."""

        ensure_column(self._lines, line_index, column)
        line = self._lines[line_index]
        self._lines[line_index] = line[:column]
        self._lines.insert(line_index + 1, line[column:])
        self._touch()

    def replace_lines(self, lines: Iterable[str]) -> None:
        """Swap out the whole document, e.g. after loading a file."""

        replacement = [ensure_line_text(line) for line in lines]
        self._lines = replacement or [""]
        self._touch()

    def _touch(self) -> None:
        self.version += 1
        self.tag = next(_TAGS)
