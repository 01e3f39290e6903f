"""Bootstrap configuration helpers (pre-settings).

These helpers exist for "chicken-and-egg" situations where we need a small amount
of configuration before the full Pydantic settings object can be loaded.

Constraints:
- Keep this module dependency-light (no telemetry imports) to avoid circular imports.
- Prefer validating values using existing config validators.
"""

from __future__ import annotations

import os
from pathlib import Path

from es_retention.config.validators import validate_log_level


def get_bootstrap_log_level(default: str = "INFO") -> str:
    """Get logging level from environment without importing settings.

    ``ES_RETENTION_LOG_LEVEL`` wins over the generic ``APP_LOG_LEVEL``.

    Args:
        default: Default log level if not set or invalid.

    Returns:
        Uppercased, validated log level string.
    """
    value = os.getenv("ES_RETENTION_LOG_LEVEL") or os.getenv("APP_LOG_LEVEL") or default
    try:
        return validate_log_level(value)
    except ValueError:
        return validate_log_level(default)


def get_bootstrap_log_dir() -> Path | None:
    """Return the JSON log directory from the environment, if one is set."""
    value = os.getenv("ES_RETENTION_LOG_DIR", "").strip()
    return Path(value) if value else None
