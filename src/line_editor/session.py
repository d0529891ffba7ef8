"""Editor session façade combining buffer, cursor, and renderer."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, Optional

from line_editor.buffer import Cursor, CursorAddress, TextBuffer
from line_editor.buffer.document import normalize_newlines
from line_editor.render import IncrementalRenderer, RenderResult
from line_editor.runtime import telemetry


class EditorSession:
    """Owns one buffer, one cursor and one renderer for a single document.

    Mutations take the cursor address implicitly, then clamp and reposition
    the cursor before returning, so the address invariant holds between any
    two calls.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        buffer: Optional[TextBuffer] = None,
        cursor: Optional[Cursor] = None,
        renderer: Optional[IncrementalRenderer] = None,
    ) -> None:
        self.name = name
        self.buffer = buffer or TextBuffer()
        self.cursor = cursor or Cursor()
        self.renderer = renderer or IncrementalRenderer()
        self.modified = False
        self.cursor.clamp(self.buffer)

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        name: str = "default",
        renderer: Optional[IncrementalRenderer] = None,
    ) -> "EditorSession":
        return cls(name=name, buffer=TextBuffer.from_text(text), renderer=renderer)

    # -- queries ---------------------------------------------------------

    @property
    def address(self) -> CursorAddress:
        return self.cursor.address

    @property
    def line_count(self) -> int:
        return self.buffer.line_count

    @property
    def text(self) -> str:
        return self.buffer.text

    def get_line(self, line_index: int) -> str:
        return self.buffer.get_line(line_index)

    def render(self) -> RenderResult:
        return self.renderer.render(self.buffer, self.cursor)

    # -- mutations -------------------------------------------------------

    def insert_character(self, ch: str) -> CursorAddress:
        with Edit(self, "insert_character"):
            column, line = self.cursor.clamp(self.buffer)
            self.buffer.insert_character(line, column, ch)
            return self.cursor.set_position(column + 1, line, self.buffer)

    def insert_line_break(self) -> CursorAddress:
        with Edit(self, "insert_line_break"):
            column, line = self.cursor.clamp(self.buffer)
            self.buffer.insert_line_break(line, column)
            return self.cursor.set_position(0, line + 1, self.buffer)

    def delete_character_before(self) -> CursorAddress:
        with Edit(self, "delete_character_before"):
            column, line = self.cursor.clamp(self.buffer)
            before = self.buffer.version
            new_column = self.buffer.delete_character_before(line, column)
            if self.buffer.version == before:
                return self.cursor.address
            target_line = line if column > 0 else line - 1
            return self.cursor.set_position(new_column, target_line, self.buffer)

    def insert_text(self, text: str) -> CursorAddress:
        """Type ``text`` as if each character arrived as its own key."""

        for index, segment in enumerate(normalize_newlines(text).split("\n")):
            if index:
                self.insert_line_break()
            for ch in segment:
                self.insert_character(ch)
        return self.cursor.address

    def load_text(self, text: str) -> CursorAddress:
        """Replace the whole document and reset the cursor to the start."""

        with Edit(self, "load_text"):
            self.buffer.replace_lines(TextBuffer.from_text(text).lines())
            address = self.cursor.set_position(0, 0, self.buffer)
        self.modified = False
        return address

    def mark_saved(self) -> None:
        self.modified = False

    # -- navigation ------------------------------------------------------

    def move_left(self) -> CursorAddress:
        return self.cursor.move_left(self.buffer)

    def move_right(self) -> CursorAddress:
        return self.cursor.move_right(self.buffer)

    def move_up(self) -> CursorAddress:
        return self.cursor.move_up(self.buffer)

    def move_down(self) -> CursorAddress:
        return self.cursor.move_down(self.buffer)

    def move_home(self) -> CursorAddress:
        return self.cursor.move_to_line_start(self.buffer)

    def move_end(self) -> CursorAddress:
        return self.cursor.move_to_line_end(self.buffer)

    def set_position(self, column: int, line: int) -> CursorAddress:
        return self.cursor.set_position(column, line, self.buffer)


class Edit(AbstractContextManager["Edit"]):
    """Wraps one buffer mutation in a telemetry span and tracks ``modified``."""

    def __init__(self, session: EditorSession, label: str) -> None:
        self.session = session
        self.label = label
        self._span_cm: Optional[ContextManager[object]] = None
        self._version_before = 0

    def __enter__(self) -> "Edit":
        self._version_before = self.session.buffer.version
        self._span_cm = telemetry.span(
            name=f"buffer::{self.label}",
            component=True,
            metadata={
                "session": self.session.name,
                "cursor": tuple(self.session.cursor.address),
            },
        )
        self._span_cm.__enter__()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        if exc_type is None and self.session.buffer.version != self._version_before:
            self.session.modified = True
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        return False


__all__ = ["EditorSession", "Edit"]
