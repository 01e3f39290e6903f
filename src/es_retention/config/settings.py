"""Application configuration settings.

Every command-line flag has a setting counterpart read from ``ES_RETENTION_*``
environment variables (and ``.env`` files), so scheduled runs can be
configured without putting credentials on the command line.
"""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from es_retention.config.env_loader import Environment, get_environment, load_env_files
from es_retention.config.validators import validate_log_level
from es_retention.retention.types import DatePattern
from es_retention.telemetry import get_logger

log = get_logger(__name__)

DEFAULT_INDEX_PREFIX = "zis-audit-"
DEFAULT_OLDER_THAN = "25"
DEFAULT_TIMEOUT_SECONDS = 30.0


class AppConfig(BaseSettings):
    """Defaults for a retention run, loaded from the environment.

    Values set on the command line take precedence over these.
    """

    model_config = SettingsConfigDict(
        env_prefix="ES_RETENTION_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Environment = Field(
        default_factory=get_environment, description="Current environment"
    )

    # Target store
    url: str | None = Field(default=None, description="Base URL of the Elasticsearch endpoint")
    username: str | None = Field(default=None, description="Basic auth username")
    password: str | None = Field(default=None, description="Basic auth password")
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Per-request HTTP timeout"
    )

    # Retention policy
    index_prefix: str = Field(
        default=DEFAULT_INDEX_PREFIX, description="Only indices with this prefix are considered"
    )
    older_than: str = Field(
        default=DEFAULT_OLDER_THAN,
        description="Delete indices older than this many months (e.g. 25, 25m, 25 months)",
    )
    date_pattern: DatePattern = Field(
        default=DatePattern.MONTH, description="Date layout encoded in index names"
    )

    # Telemetry
    log_level: str = Field(default="INFO", description="Console logging level")
    log_dir: Path | None = Field(default=None, description="Directory for JSON log files")

    @field_validator("date_pattern", mode="before")
    @classmethod
    def normalize_date_pattern(cls, v: Any) -> Any:
        """Accept MONTH/Week like the case-insensitive --date-pattern flag."""
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        return validate_log_level(v)


def load_app_config() -> AppConfig:
    """Load and validate application configuration.

    This function:
    1. Loads .env files in priority order (via env_loader)
    2. Creates AppConfig instance (reads from environment variables)
    3. Validates all values using Pydantic

    Returns:
        Validated AppConfig instance.

    Raises:
        ValidationError: If configuration validation fails.
    """
    load_env_files()

    try:
        config = AppConfig()
    except Exception as e:
        log.error("app_config_load_failed", error=str(e), error_type=type(e).__name__)
        raise

    log.debug(
        "app_config_loaded",
        environment=config.environment.value,
        url_configured=config.url is not None,
        index_prefix=config.index_prefix,
        date_pattern=config.date_pattern.value,
        credentials=config.username is not None,
    )
    return config

