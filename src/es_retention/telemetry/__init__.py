"""Telemetry module: structured logging via structlog and semantic event names."""

from es_retention.telemetry.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
]
