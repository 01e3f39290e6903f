"""Validated configuration for a single retention run.

Command-line values are merged over :class:`AppConfig` defaults and validated
here, before any network call is made.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from es_retention.config.settings import AppConfig
from es_retention.config.validators import parse_months, validate_url
from es_retention.retention.types import DatePattern


class ConfigError(Exception):
    """Raised when the run configuration is missing or invalid."""

    pass


class RetentionConfig(BaseModel):
    """Everything a retention run needs, validated.

    Attributes:
        url: Base URL of the store, without trailing slash.
        username: Basic auth username (set together with password).
        password: Basic auth password (set together with username).
        index_prefix: Literal prefix every candidate index starts with.
        older_than_months: Indices strictly older than this are deleted.
        date_pattern: Whether index names carry a month or an ISO week.
        dry_run: When True nothing is deleted.
        timeout_seconds: Per-request HTTP timeout.
    """

    model_config = {"frozen": True}

    url: str
    username: str | None = None
    password: str | None = Field(default=None, repr=False)
    index_prefix: str
    older_than_months: int = Field(ge=0)
    date_pattern: DatePattern = DatePattern.MONTH
    dry_run: bool = True
    timeout_seconds: float = Field(default=30.0, gt=0)

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Validate base URL."""
        return validate_url(v)

    @field_validator("older_than_months", mode="before")
    @classmethod
    def parse_older_than(cls, v: Any) -> int:
        """Accept 25, '25', '25m' and '25 months'."""
        return parse_months(v)

    @model_validator(mode="after")
    def check_credentials_pair(self) -> "RetentionConfig":
        """Require username and password together."""
        if (self.username is None) != (self.password is None):
            raise ValueError("Both --username and --password must be provided for basic auth.")
        return self

    @property
    def auth(self) -> tuple[str, str] | None:
        """Basic auth pair, or None when no credentials are configured."""
        if self.username is None or self.password is None:
            return None
        return (self.username, self.password)


def _format_validation_error(error: ValidationError) -> str:
    """Turn a pydantic ValidationError into a one-line, user-facing message."""
    messages = []
    for item in error.errors():
        msg = str(item.get("msg", "")).removeprefix("Value error, ")
        loc = ".".join(str(part) for part in item.get("loc", ()))
        messages.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(messages)


def build_retention_config(
    settings: AppConfig,
    *,
    url: str | None = None,
    username: str | None = None,
    password: str | None = None,
    index_prefix: str | None = None,
    older_than: str | None = None,
    date_pattern: DatePattern | None = None,
    no_dryrun: bool = False,
    timeout_seconds: float | None = None,
) -> RetentionConfig:
    """Merge command-line values over settings and validate the result.

    Dry-run can only be disabled through ``no_dryrun``; no setting turns it off.

    Args:
        settings: Defaults loaded from the environment.
        url: Base URL override.
        username: Username override.
        password: Password override.
        index_prefix: Index prefix override.
        older_than: Month threshold override (``25``, ``25m``, ``25 months``).
        date_pattern: Date pattern override.
        no_dryrun: True to actually delete indices.
        timeout_seconds: HTTP timeout override.

    Returns:
        Validated RetentionConfig.

    Raises:
        ConfigError: If a value is missing or invalid.
    """
    resolved_url = url if url is not None else settings.url
    if not resolved_url:
        raise ConfigError("Missing --url (or ES_RETENTION_URL).")

    try:
        return RetentionConfig(
            url=resolved_url,
            username=username if username is not None else settings.username,
            password=password if password is not None else settings.password,
            index_prefix=index_prefix if index_prefix is not None else settings.index_prefix,
            older_than_months=older_than if older_than is not None else settings.older_than,
            date_pattern=date_pattern if date_pattern is not None else settings.date_pattern,
            dry_run=not no_dryrun,
            timeout_seconds=(
                timeout_seconds if timeout_seconds is not None else settings.timeout_seconds
            ),
        )
    except ValidationError as e:
        raise ConfigError(_format_validation_error(e)) from None
