"""Environment variable file loader with priority-based loading.

Credentials and endpoints are commonly kept in ``.env`` files next to the
place the tool is run from; this module loads them before settings are read.
"""

import os
from enum import Enum
from pathlib import Path

from dotenv import load_dotenv

from es_retention.telemetry import get_logger

log = get_logger(__name__)


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TEST = "test"


def get_environment() -> Environment:
    """Detect current environment from APP_ENV environment variable.

    Returns:
        Environment enum value.

    Environment variable mapping:
    - "production" or "prod" → Environment.PRODUCTION
    - "staging" or "stage" → Environment.STAGING
    - "test" → Environment.TEST
    - Default → Environment.DEVELOPMENT
    """
    app_env = os.getenv("APP_ENV", "").lower()

    if app_env in ("production", "prod"):
        return Environment.PRODUCTION
    elif app_env in ("staging", "stage"):
        return Environment.STAGING
    elif app_env == "test":
        return Environment.TEST
    else:
        return Environment.DEVELOPMENT


def load_env_files(base_dir: Path | None = None) -> list[Path]:
    """Load .env files in priority order.

    Priority order (highest to lowest):
    1. `.env.{environment}.local`
    2. `.env.{environment}`
    3. `.env.local`
    4. `.env`

    Variables already present in the process environment are never overridden.

    Args:
        base_dir: Directory to look in. Defaults to the current working directory.

    Returns:
        The files that were found and loaded.
    """
    if base_dir is None:
        base_dir = Path.cwd()

    env_name = get_environment().value

    # Highest priority first: with override=False the first file to set a key wins
    env_files = [
        base_dir / f".env.{env_name}.local",
        base_dir / f".env.{env_name}",
        base_dir / ".env.local",
        base_dir / ".env",
    ]

    loaded: list[Path] = []
    for env_file in env_files:
        if env_file.is_file():
            load_dotenv(env_file, override=False)
            loaded.append(env_file)

    if loaded:
        log.debug(
            "env_files_loaded",
            environment=env_name,
            files=[p.name for p in loaded],
            base_dir=str(base_dir),
        )
    return loaded
