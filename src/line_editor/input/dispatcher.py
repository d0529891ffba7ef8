"""Translate normalized key events into session edits and cursor moves."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from line_editor.render import RenderResult
from line_editor.runtime import telemetry
from line_editor.session import EditorSession

DiagnosticSink = Callable[[str, "KeyInput"], None]


@dataclass(slots=True, frozen=True)
class KeyInput:
    """Normalized key event handed to the dispatcher."""

    key: str
    text: Optional[str] = None
    modifiers: Tuple[str, ...] = ()


@dataclass(slots=True, frozen=True)
class DispatchResult:
    handled: bool
    action: Optional[str]
    render: RenderResult


def telemetry_sink(reason: str, key: KeyInput) -> None:
    telemetry.record_event(
        "dispatch.unhandled",
        level="warning",
        data={"reason": reason, "key": key.key, "modifiers": key.modifiers},
    )


NAMED_KEYS: Dict[str, str] = {
    "ENTER": "insert_line_break",
    "BACKSPACE": "delete_character_before",
    "LEFT": "move_left",
    "RIGHT": "move_right",
    "UP": "move_up",
    "DOWN": "move_down",
    "HOME": "move_home",
    "END": "move_end",
}

_BLOCKING_MODIFIERS = frozenset({"CTRL", "ALT", "META"})


class KeyDispatcher:
    """Runs exactly one session action per key, then one render pass."""

    def __init__(
        self,
        session: EditorSession,
        *,
        diagnostics: DiagnosticSink = telemetry_sink,
    ) -> None:
        self.session = session
        self.diagnostics = diagnostics

    def handle_key(self, key: KeyInput) -> DispatchResult:
        action, reason = self._resolve(key)
        if action is None:
            self.diagnostics(reason, key)
        elif action == "insert_character":
            char = "\t" if key.key.upper() == "TAB" else key.text
            self.session.insert_character(char or "")
        else:
            getattr(self.session, action)()
        return DispatchResult(
            handled=action is not None,
            action=action,
            render=self.session.render(),
        )

    def _resolve(self, key: KeyInput) -> Tuple[Optional[str], str]:
        modifiers = {mod.upper() for mod in key.modifiers}
        if modifiers & _BLOCKING_MODIFIERS:
            return None, "modifier"
        name = key.key.upper()
        if name in NAMED_KEYS:
            return NAMED_KEYS[name], ""
        if name == "TAB":
            return "insert_character", ""
        if key.text is not None and len(key.text) == 1 and key.text.isprintable():
            return "insert_character", ""
        return None, "unknown_key"


__all__ = [
    "DiagnosticSink",
    "DispatchResult",
    "KeyDispatcher",
    "KeyInput",
    "NAMED_KEYS",
    "telemetry_sink",
]
