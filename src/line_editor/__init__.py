"""Terminal plain-text editor core: line buffer, cursor, incremental renderer."""

__all__ = [
    "adapters",
    "buffer",
    "input",
    "render",
    "runtime",
    "session",
    "storage",
]

__version__ = "0.1.0"
