from __future__ import annotations

import pytest

from line_editor.buffer import Cursor, TextBuffer
from line_editor.render import IncrementalRenderer


def make_buffer(*lines: str) -> TextBuffer:
    return TextBuffer(_lines=list(lines))


def test_first_render_builds_base_and_reports_change() -> None:
    renderer = IncrementalRenderer()
    buffer = make_buffer("ab", "cd")

    result = renderer.render(buffer, Cursor(1, 0))

    assert result.frame == "a│b\ncd"
    assert result.changed is True
    assert renderer.stats.base_rebuilds == 1
    assert renderer.cache.base_frame == "ab\ncd"


def test_repeated_render_is_unchanged_and_identical() -> None:
    renderer = IncrementalRenderer()
    buffer = make_buffer("ab", "cd")
    cursor = Cursor(0, 1)

    first = renderer.render(buffer, cursor)
    second = renderer.render(buffer, cursor)

    assert second.changed is False
    assert second.frame == first.frame
    assert renderer.stats.base_rebuilds == 1
    assert renderer.stats.overlays == 1
    assert renderer.stats.suppressed == 1


def test_cursor_move_reuses_base_frame() -> None:
    renderer = IncrementalRenderer()
    buffer = make_buffer("ab", "cd")
    cursor = Cursor(0, 0)
    renderer.render(buffer, cursor)

    cursor.move_down(buffer)
    result = renderer.render(buffer, cursor)

    assert result.frame == "ab\n│cd"
    assert result.changed is True
    assert renderer.stats.base_rebuilds == 1
    assert renderer.stats.overlays == 2
    assert renderer.cache.last_cursor == (0, 1)


@pytest.mark.parametrize(
    "address, expected",
    [
        ((0, 0), "│ab\ncd"),
        ((2, 0), "ab│\ncd"),
        ((1, 1), "ab\nc│d"),
        ((2, 1), "ab\ncd│"),
    ],
)
def test_glyph_lands_at_flat_offset(address, expected) -> None:
    renderer = IncrementalRenderer()

    result = renderer.render(make_buffer("ab", "cd"), Cursor(*address))

    assert result.frame == expected


def test_empty_document_renders_glyph_only() -> None:
    result = IncrementalRenderer().render(TextBuffer(), Cursor())

    assert result.frame == "│"


def test_buffer_mutation_rebuilds_base_frame() -> None:
    renderer = IncrementalRenderer()
    buffer = make_buffer("ab")
    cursor = Cursor(2, 0)
    renderer.render(buffer, cursor)

    buffer.insert_character(0, 2, "c")
    cursor.move_right(buffer)
    result = renderer.render(buffer, cursor)

    assert result.frame == "abc│"
    assert result.changed is True
    assert renderer.stats.base_rebuilds == 2
    assert renderer.cache.buffer_tag == buffer.tag


def test_noop_move_is_suppressed() -> None:
    renderer = IncrementalRenderer()
    buffer = make_buffer("ab")
    cursor = Cursor(0, 0)
    renderer.render(buffer, cursor)

    cursor.move_left(buffer)
    result = renderer.render(buffer, cursor)

    assert result.changed is False


def test_content_restoring_edit_is_suppressed_after_rebuild() -> None:
    renderer = IncrementalRenderer()
    buffer = make_buffer("ab")
    cursor = Cursor(0, 0)
    first = renderer.render(buffer, cursor)

    buffer.insert_character(0, 0, "x")
    buffer.delete_character_before(0, 1)
    result = renderer.render(buffer, cursor)

    assert result.frame == first.frame
    assert result.changed is False
    assert renderer.stats.base_rebuilds == 2


def test_invalidate_forces_rebuild_and_change() -> None:
    renderer = IncrementalRenderer()
    buffer = make_buffer("ab")
    cursor = Cursor(1, 0)
    renderer.render(buffer, cursor)

    renderer.invalidate()
    result = renderer.render(buffer, cursor)

    assert result.changed is True
    assert result.frame == "a│b"
    assert renderer.stats.base_rebuilds == 2


def test_custom_glyph_and_separator() -> None:
    renderer = IncrementalRenderer(cursor_glyph="_", separator="\r\n")
    buffer = make_buffer("ab", "cd")
    cursor = Cursor(1, 1)

    result = renderer.render(buffer, cursor)

    assert result.frame == "ab\r\nc_d"
    assert renderer.cursor_offset(buffer, cursor) == 5


def test_empty_glyph_is_rejected() -> None:
    with pytest.raises(ValueError):
        IncrementalRenderer(cursor_glyph="")


def test_distinct_buffers_at_same_version_are_not_confused() -> None:
    renderer = IncrementalRenderer()
    first = TextBuffer.from_text("alpha")
    second = TextBuffer.from_text("beta")
    assert first.version == second.version

    renderer.render(first, Cursor())
    result = renderer.render(second, Cursor())

    assert result.frame == "│beta"
    assert result.changed is True
    assert renderer.stats.base_rebuilds == 2
