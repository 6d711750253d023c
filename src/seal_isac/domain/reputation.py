"""Public reputation operations for web content.

``WebContentReputation`` composes the observable and indicator reconcilers into
the ``block``/``unblock``/``trust``/``untrust`` transitions and the three-state
``status`` read model. Writes inside one operation are sequential; nothing is
rolled back if a later step fails, and re-running the operation converges.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from logging import getLogger
from typing import TYPE_CHECKING

from seal_isac.domain.model import (
    LegacyLabel,
    ReputationLabel,
    WebContentStatus,
    indicator_state,
    label_marker,
)
from seal_isac.domain.reconciliation import (
    IndicatorReconciler,
    ObservableReconciler,
    resolve_status,
)
from seal_isac.domain.stix import observable_id

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import datetime

    from seal_isac.domain.model import Indicator, Observable, WebContent
    from seal_isac.domain.ports import ThreatIntelStore

log = getLogger(__name__)

LEGACY_LABELS: tuple[str, ...] = (LegacyLabel.ALLOWLISTED, LegacyLabel.BLOCKLISTED)
ALL_REPUTATION_LABELS: tuple[str, ...] = (*LEGACY_LABELS, ReputationLabel.TRUSTED)


@dataclass(slots=True)
class WebContentReputation:
    store: ThreatIntelStore
    clock: Callable[[], datetime] | None = None
    observables: ObservableReconciler = field(init=False)
    indicators: IndicatorReconciler = field(init=False)

    def __post_init__(self) -> None:
        self.observables = ObservableReconciler(self.store)
        self.indicators = (
            IndicatorReconciler(self.store)
            if self.clock is None
            else IndicatorReconciler(self.store, clock=self.clock)
        )

    async def status(self, content: WebContent) -> WebContentStatus:
        observable, indicator = await asyncio.gather(
            self.store.get_observable(observable_id(content)),
            self.indicators.get(content),
        )
        return resolve_status(label_marker(observable), indicator_state(indicator))

    async def block(self, content: WebContent, creator: str) -> Indicator:
        log.info("Blocking %s", content)
        observable = await self.observables.reconcile(
            content,
            creator=creator,
            remove_labels=ALL_REPUTATION_LABELS,
        )
        return await self.indicators.reconcile(content, observable, creator=creator)

    async def unblock(self, content: WebContent) -> Indicator | None:
        """Revoke an active indicator; observable labels are left alone."""

        log.info("Unblocking %s", content)
        return await self.indicators.revoke(content)

    async def trust(self, content: WebContent, creator: str) -> Observable:
        log.info("Trusting %s", content)
        await self.unblock(content)
        return await self.observables.reconcile(
            content,
            creator=creator,
            add_labels=(ReputationLabel.TRUSTED,),
            remove_labels=LEGACY_LABELS,
        )

    async def untrust(self, content: WebContent) -> Observable | None:
        """Strip trust and legacy labels from an existing observable.

        The indicator is not touched, so content that was blocked before being
        trusted without an unblock in between reports ``blocked`` again.
        """

        log.info("Untrusting %s", content)
        observable = await self.store.get_observable(observable_id(content))
        if observable is None:
            return None
        return await self.observables.update(observable, remove_labels=ALL_REPUTATION_LABELS)
