from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from seal_isac.app import (
    ChangeOutcome,
    block_web_content,
    get_web_content_status,
    hostname_content,
    trust_web_content,
    unblock_web_content,
)
from seal_isac.domain.model import WebContent, WebContentStatus
from seal_isac.domain.stix import content_indicator_id
from tests.support.store import InMemoryThreatIntelStore

if TYPE_CHECKING:
    from collections.abc import Callable

    from seal_isac.config import SealIsacConfig

CONTENT = WebContent.domain("phish.example.com")


def _factory(
    store: InMemoryThreatIntelStore,
) -> Callable[[SealIsacConfig], InMemoryThreatIntelStore]:
    def factory(_config: SealIsacConfig) -> InMemoryThreatIntelStore:
        return store

    return factory


def test_block_then_status(store: InMemoryThreatIntelStore, seal_config: SealIsacConfig) -> None:
    factory = _factory(store)

    change = block_web_content(CONTENT, config=seal_config, store_factory=factory)

    assert change.previous is WebContentStatus.UNKNOWN
    assert change.outcome is ChangeOutcome.APPLIED
    created = store.indicators[content_indicator_id(CONTENT)]
    assert created.created_by == seal_config.identity
    assert store.entered is False
    status = get_web_content_status(CONTENT, config=seal_config, store_factory=factory)
    assert status is WebContentStatus.BLOCKED


def test_block_already_blocked_is_unchanged(
    store: InMemoryThreatIntelStore, seal_config: SealIsacConfig
) -> None:
    factory = _factory(store)
    block_web_content(CONTENT, config=seal_config, store_factory=factory)
    store.calls.clear()

    change = block_web_content(CONTENT, config=seal_config, store_factory=factory)

    assert change.outcome is ChangeOutcome.UNCHANGED
    assert store.writes() == []


def test_block_refuses_trusted_without_force(
    store: InMemoryThreatIntelStore, seal_config: SealIsacConfig
) -> None:
    factory = _factory(store)
    trust_web_content(CONTENT, config=seal_config, store_factory=factory)

    refused = block_web_content(CONTENT, config=seal_config, store_factory=factory)
    forced = block_web_content(CONTENT, force=True, config=seal_config, store_factory=factory)

    assert refused.outcome is ChangeOutcome.REFUSED
    assert forced.previous is WebContentStatus.TRUSTED
    assert forced.outcome is ChangeOutcome.APPLIED
    status = get_web_content_status(CONTENT, config=seal_config, store_factory=factory)
    assert status is WebContentStatus.BLOCKED


def test_unblock_requires_blocked(
    store: InMemoryThreatIntelStore, seal_config: SealIsacConfig
) -> None:
    factory = _factory(store)

    assert unblock_web_content(
        CONTENT, config=seal_config, store_factory=factory
    ).outcome is ChangeOutcome.UNCHANGED

    block_web_content(CONTENT, config=seal_config, store_factory=factory)
    change = unblock_web_content(CONTENT, config=seal_config, store_factory=factory)

    assert change.outcome is ChangeOutcome.APPLIED
    assert store.indicator(content_indicator_id(CONTENT)).revoked is True


def test_trust_reports_previous_block(
    store: InMemoryThreatIntelStore, seal_config: SealIsacConfig
) -> None:
    factory = _factory(store)
    block_web_content(CONTENT, config=seal_config, store_factory=factory)

    change = trust_web_content(CONTENT, config=seal_config, store_factory=factory)

    assert change.previous is WebContentStatus.BLOCKED
    status = get_web_content_status(CONTENT, config=seal_config, store_factory=factory)
    assert status is WebContentStatus.TRUSTED


def test_hostname_content_extracts_hostname() -> None:
    assert hostname_content("https://Phish.Example.com:8443/login?x=1") == WebContent.domain(
        "phish.example.com"
    )


@pytest.mark.parametrize("url", ["example.com", "not a url", "mailto:a@example.com", "http://["])
def test_hostname_content_rejects_urls_without_host(url: str) -> None:
    with pytest.raises(ValueError, match="Invalid URL"):
        hostname_content(url)
