from __future__ import annotations

import pytest

from seal_isac.domain.legacy import LEGACY_OBSERVABLE_SCORE, LegacyDomainLists
from seal_isac.domain.model import (
    LegacyDomainStatus,
    LegacyLabel,
    WebContent,
    WebContentStatus,
)
from seal_isac.domain.reputation import WebContentReputation
from seal_isac.domain.stix import observable_id
from tests.support.runtime import SEAL_IDENTITY, run
from tests.support.store import InMemoryThreatIntelStore

DOMAIN = "legacy-0c5e.example.com"


@pytest.fixture
def lists(store: InMemoryThreatIntelStore) -> LegacyDomainLists:
    return LegacyDomainLists(store)


def test_blocklist_cycle(lists: LegacyDomainLists) -> None:
    assert run(lists.get_domain_status(DOMAIN)) is LegacyDomainStatus.UNKNOWN

    run(lists.add_to_blocklist(DOMAIN, SEAL_IDENTITY))
    assert run(lists.get_domain_status(DOMAIN)) is LegacyDomainStatus.BLOCKLISTED

    run(lists.remove_from_blocklist(DOMAIN))
    assert run(lists.get_domain_status(DOMAIN)) is LegacyDomainStatus.UNKNOWN


def test_allowlist_cycle(lists: LegacyDomainLists) -> None:
    run(lists.add_to_allowlist(DOMAIN, SEAL_IDENTITY))
    assert run(lists.get_domain_status(DOMAIN)) is LegacyDomainStatus.ALLOWLISTED

    run(lists.remove_from_allowlist(DOMAIN))
    assert run(lists.get_domain_status(DOMAIN)) is LegacyDomainStatus.UNKNOWN


def test_allowlisting_removes_blocklist_label(
    lists: LegacyDomainLists, store: InMemoryThreatIntelStore
) -> None:
    run(lists.add_to_blocklist(DOMAIN, SEAL_IDENTITY))

    observable = run(lists.add_to_allowlist(DOMAIN, SEAL_IDENTITY))

    assert observable.label_values == {LegacyLabel.ALLOWLISTED}
    assert run(lists.get_domain_status(DOMAIN)) is LegacyDomainStatus.ALLOWLISTED

    run(lists.remove_from_allowlist(DOMAIN))
    assert run(lists.get_domain_status(DOMAIN)) is LegacyDomainStatus.UNKNOWN
    assert store.indicators == {}


def test_new_domain_created_with_label_and_score(
    lists: LegacyDomainLists, store: InMemoryThreatIntelStore
) -> None:
    run(lists.add_to_blocklist(DOMAIN, SEAL_IDENTITY))

    created = store.observables[observable_id(WebContent.domain(DOMAIN))]
    assert created.score == LEGACY_OBSERVABLE_SCORE
    assert created.created_by == SEAL_IDENTITY
    assert store.writes() == ["create_observable"]


def test_remove_from_unknown_domain_returns_none(lists: LegacyDomainLists) -> None:
    assert run(lists.remove_from_blocklist(DOMAIN)) is None
    assert run(lists.remove_from_allowlist(DOMAIN)) is None


def test_legacy_lists_feed_reputation_status(
    lists: LegacyDomainLists, reputation: WebContentReputation
) -> None:
    content = WebContent.domain(DOMAIN)

    run(lists.add_to_blocklist(DOMAIN, SEAL_IDENTITY))
    assert run(reputation.status(content)) is WebContentStatus.BLOCKED

    run(lists.add_to_allowlist(DOMAIN, SEAL_IDENTITY))
    assert run(reputation.status(content)) is WebContentStatus.TRUSTED
