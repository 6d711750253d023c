from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from seal_isac.config import RateLimit, ResilienceConfig, SealIsacConfig
from seal_isac.domain.reputation import WebContentReputation
from tests.support.runtime import FIXED_NOW, SEAL_IDENTITY
from tests.support.store import InMemoryThreatIntelStore

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime


@pytest.fixture
def store() -> InMemoryThreatIntelStore:
    return InMemoryThreatIntelStore()


@pytest.fixture
def clock() -> Callable[[], datetime]:
    return lambda: FIXED_NOW


@pytest.fixture
def reputation(
    store: InMemoryThreatIntelStore, clock: Callable[[], datetime]
) -> WebContentReputation:
    return WebContentReputation(store, clock=clock)


@pytest.fixture
def seal_config() -> SealIsacConfig:
    return SealIsacConfig(
        api_key="test-key",
        identity=SEAL_IDENTITY,
        host="http://opencti.test",
        resilience=ResilienceConfig(
            name="opencti",
            base_url="http://opencti.test",
            retry=None,
            ratelimit=RateLimit(max_calls=100, per_seconds=1.0),
            default_headers={"Authorization": "Bearer test-key"},
        ),
    )
