"""Runtime services (telemetry) shared by every editor layer."""
