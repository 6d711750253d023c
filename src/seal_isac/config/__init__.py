"""Application configuration helpers."""

from __future__ import annotations

from .env import optional_env_var, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy
from .logging import configure_logging
from .opencti import DEFAULT_SEAL_ISAC_HOST, SealIsacConfig, get_seal_isac_config

__all__ = [
    "DEFAULT_SEAL_ISAC_HOST",
    "ConfigurationError",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "SealIsacConfig",
    "configure_logging",
    "get_seal_isac_config",
    "optional_env_var",
    "require_env_vars",
]
