"""Structured logging configuration using structlog.

This module configures structlog with:
- Pretty-printed console output on stderr
- Optional JSON file output with rotation
- UTC timestamps
- Component and event tracking
"""

from __future__ import annotations

import logging
import logging.handlers
import pathlib
import sys
from datetime import datetime, timezone
from typing import Any

import structlog


def _get_log_level() -> str:
    """Get log level from configuration.

    Returns:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    """
    # Bootstrap from environment to avoid circular imports during startup.
    from es_retention.config.bootstrap import get_bootstrap_log_level  # noqa: PLC0415

    return get_bootstrap_log_level()


def _get_log_dir() -> pathlib.Path | None:
    """Get the JSON log directory, or None when file logging is disabled."""
    from es_retention.config.bootstrap import get_bootstrap_log_dir  # noqa: PLC0415

    return get_bootstrap_log_dir()


def _add_timestamp(
    logger: logging.Logger, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add UTC timestamp to log event.

    Args:
        logger: The logger instance.
        method_name: The log method name (info, error, etc.).
        event_dict: The event dictionary.

    Returns:
        Event dictionary with timestamp added.
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_component(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add component name (last part of the dotted logger name) to log event.

    Works both for stdlib records (``logger.name``) and structlog events,
    where ``add_logger_name`` has already put the name in the event dict.
    """
    logger_name = event_dict.get("logger") or getattr(logger, "name", "") or ""
    component = logger_name.rsplit(".", 1)[-1] if logger_name else "unknown"
    event_dict["component"] = component
    return event_dict


def _foreign_pre_chain() -> list[Any]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_timestamp,
        _add_component,
    ]


def _configure_file_handler(log_dir: pathlib.Path) -> logging.handlers.RotatingFileHandler:
    """Configure rotating file handler for JSON logs.

    Args:
        log_dir: Directory for log files.

    Returns:
        Configured RotatingFileHandler.
    """
    log_dir.mkdir(parents=True, exist_ok=True)

    handler = logging.handlers.RotatingFileHandler(
        filename=str(log_dir / "es-retention.jsonl"),
        maxBytes=10 * 1024 * 1024,  # 10 MB
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.processors.JSONRenderer(),
            foreign_pre_chain=_foreign_pre_chain(),
        )
    )
    return handler


def _configure_console_handler() -> logging.StreamHandler[Any]:
    """Configure console handler for pretty-printed logs on stderr.

    Returns:
        Configured StreamHandler.
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
            foreign_pre_chain=_foreign_pre_chain(),
        )
    )
    return handler


# Handlers installed by configure_logging; other root handlers are left alone
_installed_handlers: list[logging.Handler] = []


def configure_logging(
    level: str | None = None,
    log_dir: pathlib.Path | None = None,
    file_logging: bool = True,
) -> None:
    """Configure structlog for structured logging.

    Safe to call more than once; the CLI calls it again after parsing
    ``--log-level``. Handlers from a previous call are replaced.

    Args:
        level: Console log level. Defaults to the bootstrap environment value.
        log_dir: Directory for JSON log files. Defaults to ``ES_RETENTION_LOG_DIR``;
            no file is written when neither is set.
        file_logging: False to skip the JSON file handler entirely.

    Raises:
        OSError: If the log directory or file cannot be created. The previous
            configuration is kept in that case.
    """
    log_level = (level or _get_log_level()).upper()
    if log_dir is None and file_logging:
        log_dir = _get_log_dir()

    new_handlers: list[logging.Handler] = []
    if file_logging and log_dir is not None:
        # File handler keeps INFO+ regardless of console level
        file_handler = _configure_file_handler(log_dir)
        file_handler.setLevel(logging.INFO)
        new_handlers.append(file_handler)

    console_handler = _configure_console_handler()
    console_handler.setLevel(getattr(logging, log_level, logging.INFO))
    new_handlers.insert(0, console_handler)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers[:] = new_handlers
    for handler in new_handlers:
        root_logger.addHandler(handler)

    # Silence noisy third-party loggers.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            _add_component,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> Any:  # Returns structlog.stdlib.BoundLogger
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__ of the calling module).

    Returns:
        Configured structlog logger instance.

    Example:
        >>> from es_retention.telemetry import get_logger
        >>> log = get_logger(__name__)
        >>> log.info("index_deleted", index="zis-audit-2020-01")
    """
    # Ensure logging is configured (idempotent)
    if not structlog.is_configured():
        try:
            configure_logging()
        except OSError:
            # Unusable ES_RETENTION_LOG_DIR: console only, the CLI reports the error
            configure_logging(file_logging=False)

    return structlog.get_logger(name)
