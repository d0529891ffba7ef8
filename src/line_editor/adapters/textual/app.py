"""Executable Textual app that hosts the line editor."""

from __future__ import annotations

import argparse
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple

try:  # pragma: no cover - imported only when the app is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use line_editor.adapters.textual.app"
    ) from exc

from line_editor.render import DEFAULT_CURSOR_GLYPH, IncrementalRenderer
from line_editor.runtime import telemetry
from line_editor.session import EditorSession

from .controller import EditorUIHooks, TextualEditorAdapter

_HOST_KEYS = {"ctrl+c", "ctrl+q", "ctrl+s"}


@dataclass
class UIState:
    frame: str = ""
    status_text: str = ""


class LineEditorApp(App[None]):
    """Full-screen editor: header, buffer view, status line, footer."""

    TITLE = "edit"

    CSS = """
	Screen {
		layout: vertical;
	}

	#buffer-view {
		height: 1fr;
		padding: 0 1;
		content-align: left top;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+s", "save", "Save"),
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        *,
        path: Optional[Path] = None,
        cursor_glyph: str = DEFAULT_CURSOR_GLYPH,
    ) -> None:
        super().__init__()
        self._state = UIState()
        self._path = path
        self._cursor_glyph = cursor_glyph
        self.adapter: TextualEditorAdapter | None = None
        self._buffer_widget: Static | None = None
        self._status_widget: Static | None = None
        self._log = telemetry.get_logger("line_editor.app")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="buffer-area"):
            self._buffer_widget = Static("", id="buffer-view", markup=False)
            yield self._buffer_widget
        self._status_widget = Static("", id="status-line", markup=False)
        yield self._status_widget
        yield Footer()

    def on_mount(self) -> None:
        session = EditorSession(
            renderer=IncrementalRenderer(cursor_glyph=self._cursor_glyph)
        )
        hooks = EditorUIHooks(
            update_frame=self._update_frame,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualEditorAdapter(session, hooks)
        if self._path is not None:
            self.adapter.open(self._path)

    def on_resize(self, event: events.Resize) -> None:
        del event
        if self.adapter:
            self.adapter.refresh(force=True)

    def on_key(self, event: events.Key) -> None:
        if not self.adapter:
            return
        normalized = self._normalize_key(event)
        if normalized is None:
            return
        key, text, modifiers = normalized
        self.adapter.handle_textual_key(key, text=text, modifiers=modifiers)
        event.stop()

    def action_save(self) -> None:
        if self.adapter:
            self.adapter.save()

    def _update_frame(self, frame: str) -> None:
        self._state.frame = frame
        if self._buffer_widget:
            self._buffer_widget.update(frame)

    def _update_status(self, status: str) -> None:
        self._state.status_text = status
        if self._status_widget:
            self._status_widget.update(status)

    def _log_line(self, line: str) -> None:
        self._log.debug(line)

    @staticmethod
    def _normalize_key(
        event: events.Key,
    ) -> Optional[Tuple[str, Optional[str], Tuple[str, ...]]]:
        if event.key in _HOST_KEYS:
            return None
        *mods, base = event.key.split("+")
        modifiers = tuple(mod.upper() for mod in mods if mod != "shift")
        if event.is_printable and event.character:
            return (event.character, event.character, modifiers)
        return (base.upper(), event.character, modifiers)


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Edit a plain-text file.")
    parser.add_argument("path", nargs="?", help="File to open (created on save)")
    parser.add_argument(
        "--cursor-glyph",
        default=os.environ.get("LINE_EDITOR_CURSOR_GLYPH", DEFAULT_CURSOR_GLYPH),
        help="Glyph drawn at the cursor position (default: %(default)s)",
    )
    parser.add_argument(
        "--log-preset",
        default=os.environ.get("LINE_EDITOR_LOG_PRESET", "production"),
        choices=("development", "production", "performance"),
        help="Telemetry preset; production logs to a file (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    path = Path(args.path) if args.path else None
    app = LineEditorApp(path=path, cursor_glyph=args.cursor_glyph)
    app.run()


if __name__ == "__main__":  # pragma: no cover - manual run
    main()
