"""Runtime services (telemetry) shared across the editor."""
