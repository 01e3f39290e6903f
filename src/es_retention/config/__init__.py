"""Configuration management for es-retention.

Environment settings, ``.env`` loading and validation of the per-run
configuration all live in this package.
"""

from es_retention.config.env_loader import Environment, get_environment, load_env_files
from es_retention.config.run_config import ConfigError, RetentionConfig, build_retention_config
from es_retention.config.settings import AppConfig, load_app_config

__all__ = [
    "AppConfig",
    "load_app_config",
    "Environment",
    "get_environment",
    "load_env_files",
    "RetentionConfig",
    "build_retention_config",
    "ConfigError",
]
