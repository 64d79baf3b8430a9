"""Document-extraction service configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig

ANTHROPIC_BASE_URL = "https://api.anthropic.com"
ANTHROPIC_API_VERSION = "2023-06-01"
DEFAULT_EXTRACTION_MODEL = "claude-sonnet-4-5"
DEFAULT_MAX_TOKENS = 5000


@dataclass(frozen=True)
class ExtractionConfig:
    """Holds the extraction API configuration values."""

    api_key: str
    model: str
    resilience: ResilienceConfig
    max_tokens: int = DEFAULT_MAX_TOKENS
    api_version: str = ANTHROPIC_API_VERSION


def default_resilience_config(*, base_url: str = ANTHROPIC_BASE_URL) -> ResilienceConfig:
    return ResilienceConfig(
        name="anthropic",
        base_url=base_url,
        timeout_seconds=None,
        ratelimit=RateLimit(max_calls=50, per_seconds=60.0),
    )


def get_extraction_config(*, resilience: ResilienceConfig | None = None) -> ExtractionConfig:
    values = require_env_vars(("ANTHROPIC_API_KEY",))
    base_url = optional_env_var("ANTHROPIC_BASE_URL", ANTHROPIC_BASE_URL)
    return ExtractionConfig(
        api_key=values["ANTHROPIC_API_KEY"],
        model=optional_env_var("RESUMEVAULT_EXTRACTION_MODEL", DEFAULT_EXTRACTION_MODEL),
        resilience=resilience or default_resilience_config(base_url=base_url),
    )
