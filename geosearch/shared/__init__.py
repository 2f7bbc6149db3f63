"""Shared: telemetry (logging, tracing) and text utilities."""
