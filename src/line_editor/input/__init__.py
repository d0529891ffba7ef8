"""Key event dispatch into an editor session."""

from .dispatcher import (
    DiagnosticSink,
    DispatchResult,
    KeyDispatcher,
    KeyInput,
    NAMED_KEYS,
    telemetry_sink,
)

__all__ = [
    "DiagnosticSink",
    "DispatchResult",
    "KeyDispatcher",
    "KeyInput",
    "NAMED_KEYS",
    "telemetry_sink",
]
