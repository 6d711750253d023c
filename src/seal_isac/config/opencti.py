"""SEAL-ISAC / OpenCTI configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, require_env_vars
from .http_resilience import RateLimit, ResilienceConfig, RetryPolicy

DEFAULT_SEAL_ISAC_HOST = "https://sealisac.org"
OPENCTI_TIMEOUT_SECONDS = 20.0

API_KEY_VAR = "SEAL_ISAC_API_KEY"
IDENTITY_VAR = "SEAL_ISAC_IDENTITY"
HOST_VAR = "SEAL_ISAC_HOST"


@dataclass(frozen=True, slots=True)
class SealIsacConfig:
    """Holds the credentials and transport settings for the SEAL-ISAC OpenCTI instance."""

    api_key: str
    identity: str
    host: str
    resilience: ResilienceConfig


def build_opencti_resilience(host: str, api_key: str) -> ResilienceConfig:
    return ResilienceConfig(
        name="opencti",
        base_url=host.rstrip("/"),
        timeout_seconds=OPENCTI_TIMEOUT_SECONDS,
        retry=RetryPolicy(),
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        default_headers={
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        },
    )


def get_seal_isac_config(*, resilience: ResilienceConfig | None = None) -> SealIsacConfig:
    values = require_env_vars((API_KEY_VAR, IDENTITY_VAR))
    host = optional_env_var(HOST_VAR, DEFAULT_SEAL_ISAC_HOST)
    api_key = values[API_KEY_VAR]
    return SealIsacConfig(
        api_key=api_key,
        identity=values[IDENTITY_VAR],
        host=host,
        resilience=resilience or build_opencti_resilience(host, api_key),
    )
