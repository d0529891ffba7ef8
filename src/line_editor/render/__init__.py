"""Frame rendering for buffer + cursor state."""

from .renderer import (
    DEFAULT_CURSOR_GLYPH,
    DEFAULT_SEPARATOR,
    IncrementalRenderer,
    RenderCache,
    RenderResult,
    RenderStats,
)

__all__ = [
    "DEFAULT_CURSOR_GLYPH",
    "DEFAULT_SEPARATOR",
    "IncrementalRenderer",
    "RenderCache",
    "RenderResult",
    "RenderStats",
]
