"""Host-agnostic adapter that feeds key events to the dispatcher and repaints."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable, Optional

from line_editor.input import DispatchResult, KeyDispatcher, KeyInput
from line_editor.session import EditorSession
from line_editor.storage import StorageError, load_document, save_document


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class EditorUIHooks:
    """Callbacks invoked by the adapter to update host widgets."""

    update_frame: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


def format_status(session: EditorSession, path: Optional[Path]) -> str:
    name = str(path) if path else "[No Name]"
    flag = " *" if session.modified else ""
    column, line = session.address
    return (
        f"{name}{flag} | Ln {line + 1}, Col {column + 1} | "
        f"lines: {session.line_count}"
    )


class TextualEditorAdapter:
    """Bridges host key events to a session and repaints only on change."""

    def __init__(
        self,
        session: EditorSession,
        hooks: EditorUIHooks,
        *,
        path: Optional[Path | str] = None,
    ) -> None:
        self.session = session
        self.hooks = hooks
        self.path = Path(path) if path else None
        self.dispatcher = KeyDispatcher(session, diagnostics=self._unhandled)
        self.repaints = 0
        self.refresh(force=True)

    def handle_textual_key(
        self,
        key: str,
        *,
        text: Optional[str] = None,
        modifiers: Iterable[str] = (),
    ) -> DispatchResult:
        normalized = tuple(str(mod).upper() for mod in modifiers)
        result = self.dispatcher.handle_key(
            KeyInput(key=key, text=text, modifiers=normalized)
        )
        if result.render.changed:
            self._paint(result.render.frame)
        self.hooks.update_status(format_status(self.session, self.path))
        return result

    def refresh(self, *, force: bool = False) -> None:
        """Push the current frame; ``force`` drops the render cache first."""

        if force:
            self.session.renderer.invalidate()
        result = self.session.render()
        if result.changed:
            self._paint(result.frame)
        self.hooks.update_status(format_status(self.session, self.path))

    def open(self, path: Path | str) -> bool:
        """Load ``path`` into the session; on failure the current document stays."""

        target = Path(path)
        try:
            text = load_document(target)
        except StorageError as exc:
            self.hooks.update_status(f"Open failed: {exc.reason}")
            self.hooks.log(f"open failed {exc}")
            return False
        self.path = target
        self.session.load_text(text)
        self.hooks.log(f"opened {self.path}")
        self.refresh()
        return True

    def save(self) -> bool:
        if self.path is None:
            self.hooks.update_status("No file name; start with a path to save")
            return False
        try:
            save_document(self.path, self.session.text)
        except StorageError as exc:
            self.hooks.update_status(f"Save failed: {exc.reason}")
            self.hooks.log(f"save failed {exc}")
            return False
        self.session.mark_saved()
        self.hooks.log(f"saved {self.path}")
        self.hooks.update_status(format_status(self.session, self.path))
        return True

    def _paint(self, frame: str) -> None:
        self.repaints += 1
        self.hooks.update_frame(frame)

    def _unhandled(self, reason: str, key: KeyInput) -> None:
        self.hooks.log(f"unhandled key={key.key!r} mods={key.modifiers} ({reason})")


__all__ = ["EditorUIHooks", "TextualEditorAdapter", "format_status"]
