"""Deprecated two-list (blocklist/allowlist) surface for domain names.

Kept for callers of the original domain-list API. It reads and writes only the
legacy observable labels and never touches indicators; IPs and URLs are not
reachable through it. The reputation status still honours these labels.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

from seal_isac.domain.model import (
    LegacyDomainStatus,
    LegacyLabel,
    ObservableCreate,
    WebContent,
)
from seal_isac.domain.stix import MARKING_TLP_CLEAR, label_id, observable_id

if TYPE_CHECKING:
    from seal_isac.domain.model import Observable
    from seal_isac.domain.ports import ThreatIntelStore

log = getLogger(__name__)

LEGACY_OBSERVABLE_SCORE: Final = 100


@dataclass(slots=True)
class LegacyDomainLists:
    store: ThreatIntelStore

    async def get_domain_status(self, domain: str) -> LegacyDomainStatus:
        observable = await self._get(domain)
        if observable is None:
            return LegacyDomainStatus.UNKNOWN
        if observable.has_label(LegacyLabel.ALLOWLISTED):
            return LegacyDomainStatus.ALLOWLISTED
        if observable.has_label(LegacyLabel.BLOCKLISTED):
            return LegacyDomainStatus.BLOCKLISTED
        return LegacyDomainStatus.UNKNOWN

    async def add_to_blocklist(self, domain: str, creator: str) -> Observable:
        log.warning("Legacy blocklist is deprecated; prefer blocking web content")
        return await self._move(
            domain, creator=creator, add=LegacyLabel.BLOCKLISTED, drop=LegacyLabel.ALLOWLISTED
        )

    async def remove_from_blocklist(self, domain: str) -> Observable | None:
        return await self._remove(domain, LegacyLabel.BLOCKLISTED)

    async def add_to_allowlist(self, domain: str, creator: str) -> Observable:
        log.warning("Legacy allowlist is deprecated; prefer trusting web content")
        return await self._move(
            domain, creator=creator, add=LegacyLabel.ALLOWLISTED, drop=LegacyLabel.BLOCKLISTED
        )

    async def remove_from_allowlist(self, domain: str) -> Observable | None:
        return await self._remove(domain, LegacyLabel.ALLOWLISTED)

    async def _get(self, domain: str) -> Observable | None:
        return await self.store.get_observable(observable_id(WebContent.domain(domain)))

    async def _move(
        self, domain: str, *, creator: str, add: LegacyLabel, drop: LegacyLabel
    ) -> Observable:
        observable = await self._get(domain)
        if observable is None:
            observable = await self.store.create_observable(
                ObservableCreate(
                    content=WebContent.domain(domain),
                    labels=(add,),
                    created_by=creator,
                    markings=(MARKING_TLP_CLEAR,),
                    score=LEGACY_OBSERVABLE_SCORE,
                )
            )
        if observable.has_label(drop):
            observable.labels = await self.store.delete_label(observable.id, label_id(drop))
        if not observable.has_label(add):
            observable.labels = await self.store.add_label(observable.id, label_id(add))
        return observable

    async def _remove(self, domain: str, label: LegacyLabel) -> Observable | None:
        observable = await self._get(domain)
        if observable is None:
            return None
        if observable.has_label(label):
            observable.labels = await self.store.delete_label(observable.id, label_id(label))
        return observable
