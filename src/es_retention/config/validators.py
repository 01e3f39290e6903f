"""Custom Pydantic validators for configuration.

This module provides validators for cross-field validation and
custom type conversions.
"""

import re

import httpx

_MONTHS_RE = re.compile(r"^\s*(\d+)\s*(?:m(?:onths?)?)?\s*$", re.IGNORECASE)


def validate_log_level(value: str) -> str:
    """Validate log level is one of the standard levels.

    Args:
        value: Log level string.

    Returns:
        Validated log level.

    Raises:
        ValueError: If log level is not valid.
    """
    valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
    if value.upper() not in valid_levels:
        raise ValueError(f"log_level must be one of {valid_levels}, got {value}")
    return value.upper()


def parse_months(value: str | int) -> int:
    """Parse a month count such as ``25``, ``25m`` or ``25 months``.

    Args:
        value: Month count as an int or a string with an optional ``m``/``month(s)`` unit.

    Returns:
        Non-negative number of months.

    Raises:
        ValueError: If the value is not a non-negative month count.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid months value: {value!r}. Try '25m'.")
    if isinstance(value, int):
        if value < 0:
            raise ValueError("Months must be non-negative")
        return value

    match = _MONTHS_RE.match(value)
    if match is None:
        raise ValueError(f"Invalid months value: {value!r}. Try '25m'.")
    return int(match.group(1))


def validate_url(value: str) -> str:
    """Validate that the value is an absolute http(s) URL usable as a base URL.

    A path prefix (reverse proxy) is allowed; credentials, query strings and
    fragments are not.

    Args:
        value: URL string.

    Returns:
        The URL without a trailing slash.

    Raises:
        ValueError: If the URL cannot be used as a base URL.
    """
    value = value.strip()
    try:
        url = httpx.URL(value)
    except (httpx.InvalidURL, TypeError) as e:
        raise ValueError(f"Invalid URL {value!r}: {e}") from None
    if url.scheme not in ("http", "https") or not url.host:
        raise ValueError(f"URL must be an absolute http(s) URL, got {value!r}")
    if url.userinfo:
        # Value not echoed: it carries a password
        raise ValueError("URL must not contain credentials; use --username and --password")
    if url.query or url.fragment:
        raise ValueError(f"URL must not have a query string or fragment, got {value!r}")
    return value.rstrip("/")
