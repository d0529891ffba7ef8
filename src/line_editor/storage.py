"""Reading and writing documents on disk."""

from __future__ import annotations

from pathlib import Path

from line_editor.runtime import telemetry


class StorageError(RuntimeError):
    """Raised when a document cannot be read from or written to ``path``."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = Path(path)
        self.reason = reason


def load_document(path: Path | str, *, encoding: str = "utf-8") -> str:
    """Return the text stored at ``path``; a missing file is a new, empty document."""

    target = Path(path)
    if not target.exists():
        telemetry.record_event("storage.new_file", data={"path": str(target)})
        return ""
    try:
        text = target.read_text(encoding=encoding)
    except (OSError, UnicodeDecodeError) as exc:
        raise StorageError(target, str(exc)) from exc
    telemetry.record_event(
        "storage.load", data={"path": str(target), "chars": len(text)}
    )
    return text


def save_document(path: Path | str, text: str, *, encoding: str = "utf-8") -> None:
    target = Path(path)
    try:
        target.write_text(text, encoding=encoding)
    except OSError as exc:
        raise StorageError(target, str(exc)) from exc
    telemetry.record_event(
        "storage.save", data={"path": str(target), "chars": len(text)}
    )


__all__ = ["StorageError", "load_document", "save_document"]
