"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .extraction import ExtractionConfig, get_extraction_config
from .http_resilience import RateLimit, ResilienceConfig
from .logging import configure_logging
from .storage import DatabaseConfig, data_dir, get_database_config

__all__ = [
    "ConfigurationError",
    "DatabaseConfig",
    "ExtractionConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "configure_logging",
    "data_dir",
    "get_database_config",
    "get_extraction_config",
    "optional_env_var",
    "require_env_var",
    "require_env_vars",
]
