"""Incremental frame rendering with a two-level cache and frame diff.

The renderer keeps a cursor-free *base frame* keyed by the buffer tag and
a *last frame* keyed by the cursor address as well. Rebuilding the base
frame walks the whole document, so it only happens when the tag moves: a
different buffer or a content mutation. Cursor movement only re-splices
the glyph. The final string comparison catches operations that reached
the renderer without changing anything (e.g. ``move_left`` at the start
of the document).
"""

from __future__ import annotations

from dataclasses import dataclass

from line_editor.buffer import Cursor, CursorAddress, TextBuffer
from line_editor.runtime import telemetry

DEFAULT_CURSOR_GLYPH = "│"
DEFAULT_SEPARATOR = "\n"


@dataclass(slots=True, frozen=True)
class RenderResult:
    frame: str
    changed: bool


@dataclass(slots=True)
class RenderCache:
    buffer_tag: int | None = None
    last_cursor: CursorAddress | None = None
    base_frame: str = ""
    last_frame: str | None = None


@dataclass(slots=True)
class RenderStats:
    renders: int = 0
    base_rebuilds: int = 0
    overlays: int = 0
    suppressed: int = 0


class IncrementalRenderer:
    """Derives display frames from a buffer + cursor pair."""

    def __init__(
        self,
        *,
        cursor_glyph: str = DEFAULT_CURSOR_GLYPH,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        if not cursor_glyph:
            raise ValueError("cursor_glyph cannot be empty")
        self.cursor_glyph = cursor_glyph
        self.separator = separator
        self.cache = RenderCache()
        self.stats = RenderStats()

    def render(self, buffer: TextBuffer, cursor: Cursor) -> RenderResult:
        self.stats.renders += 1
        cache = self.cache
        address = cursor.address

        rebuilt = cache.buffer_tag != buffer.tag
        if rebuilt:
            cache.base_frame = self.separator.join(buffer.lines())
            cache.buffer_tag = buffer.tag
            self.stats.base_rebuilds += 1
            telemetry.record_event(
                "render.rebuild",
                level="debug",
                data={"version": buffer.version, "lines": buffer.line_count},
            )

        if not rebuilt and cache.last_frame is not None and cache.last_cursor == address:
            frame = cache.last_frame
        else:
            frame = self._overlay(cache.base_frame, self._offset(buffer, address))
            self.stats.overlays += 1

        changed = frame != cache.last_frame
        if changed:
            cache.last_frame = frame
        else:
            self.stats.suppressed += 1
        cache.last_cursor = address
        return RenderResult(frame=frame, changed=changed)

    def invalidate(self) -> None:
        """Forget every cached level; the next render reports a change."""

        self.cache = RenderCache()

    def cursor_offset(self, buffer: TextBuffer, cursor: Cursor) -> int:
        return self._offset(buffer, cursor.address)

    def _offset(self, buffer: TextBuffer, address: CursorAddress) -> int:
        lines = buffer.lines()
        preceding = sum(len(lines[i]) for i in range(address.line))
        return preceding + address.line * len(self.separator) + address.column

    def _overlay(self, base: str, offset: int) -> str:
        if offset >= len(base):
            return base + self.cursor_glyph
        return base[:offset] + self.cursor_glyph + base[offset:]
