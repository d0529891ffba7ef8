from __future__ import annotations

from typing import List, Tuple

import pytest

from line_editor.input import KeyDispatcher, KeyInput
from line_editor.session import EditorSession


def make_dispatcher(
    text: str = "",
) -> Tuple[KeyDispatcher, List[Tuple[str, KeyInput]]]:
    seen: List[Tuple[str, KeyInput]] = []
    session = EditorSession.from_text(text)
    dispatcher = KeyDispatcher(
        session, diagnostics=lambda reason, key: seen.append((reason, key))
    )
    return dispatcher, seen


def type_keys(dispatcher: KeyDispatcher, *keys: str) -> None:
    for key in keys:
        if len(key) == 1:
            dispatcher.handle_key(KeyInput(key=key, text=key))
        else:
            dispatcher.handle_key(KeyInput(key=key))


def test_printable_keys_insert_characters() -> None:
    dispatcher, seen = make_dispatcher()

    result = dispatcher.handle_key(KeyInput(key="h", text="h"))

    assert result.handled is True
    assert result.action == "insert_character"
    assert result.render.frame == "h│"
    assert result.render.changed is True
    assert not seen


def test_named_keys_map_to_session_actions() -> None:
    dispatcher, _ = make_dispatcher()

    type_keys(dispatcher, "a", "b", "ENTER", "c", "LEFT", "BACKSPACE")

    assert dispatcher.session.buffer.lines() == ("abc",)
    assert dispatcher.session.address == (2, 0)


@pytest.mark.parametrize(
    "key, start, expected",
    [
        ("UP", (1, 1), (1, 0)),
        ("DOWN", (1, 0), (1, 1)),
        ("HOME", (1, 0), (0, 0)),
        ("END", (1, 0), (3, 0)),
        ("RIGHT", (1, 0), (2, 0)),
    ],
)
def test_navigation_keys(key: str, start: tuple, expected: tuple) -> None:
    dispatcher, _ = make_dispatcher("abc\nde")
    dispatcher.session.set_position(*start)

    result = dispatcher.handle_key(KeyInput(key=key))

    assert result.handled is True
    assert dispatcher.session.address == expected


def test_tab_inserts_literal_tab() -> None:
    dispatcher, _ = make_dispatcher()

    dispatcher.handle_key(KeyInput(key="TAB"))

    assert dispatcher.session.text == "\t"


def test_modified_keys_go_to_diagnostics() -> None:
    dispatcher, seen = make_dispatcher("ab")

    result = dispatcher.handle_key(KeyInput(key="x", text="x", modifiers=("CTRL",)))

    assert result.handled is False
    assert result.action is None
    assert dispatcher.session.text == "ab"
    assert seen[0][0] == "modifier"


def test_unknown_key_still_renders() -> None:
    dispatcher, seen = make_dispatcher("ab")
    first = dispatcher.handle_key(KeyInput(key="F5"))
    second = dispatcher.handle_key(KeyInput(key="F6"))

    assert [reason for reason, _ in seen] == ["unknown_key", "unknown_key"]
    assert first.render.frame == "│ab"
    assert second.render.changed is False


def test_noop_move_reports_unchanged_frame() -> None:
    dispatcher, _ = make_dispatcher("ab")
    dispatcher.session.render()

    result = dispatcher.handle_key(KeyInput(key="LEFT"))

    assert result.handled is True
    assert result.render.changed is False
