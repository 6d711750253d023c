"""Create, refresh and revoke detection indicators for web content."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from logging import getLogger
from typing import TYPE_CHECKING, Final

from seal_isac.domain.model import IndicatorCreate, IndicatorPatch, RelationshipType
from seal_isac.domain.stix import generate_pattern, indicator_id

if TYPE_CHECKING:
    from collections.abc import Callable

    from seal_isac.domain.model import Indicator, Observable, WebContent
    from seal_isac.domain.ports import ThreatIntelStore

log = getLogger(__name__)

INDICATOR_VALIDITY: Final = timedelta(days=365)
ACTIVE_SCORE: Final = 100
REVOKED_SCORE: Final = 0


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class IndicatorReconciler:
    store: ThreatIntelStore
    clock: Callable[[], datetime] = field(default=_utcnow)

    async def get(self, content: WebContent) -> Indicator | None:
        return await self.store.get_indicator(indicator_id(generate_pattern(content)))

    async def reconcile(
        self,
        content: WebContent,
        observable: Observable,
        *,
        creator: str | None = None,
    ) -> Indicator:
        """Ensure an active, full-score indicator valid for a year from now.

        An existing indicator (revoked or not) is refreshed in place; the ``based-on``
        relationship to ``observable`` is only created alongside a new indicator.
        """

        now = self.clock()
        valid_until = now + INDICATOR_VALIDITY
        pattern = generate_pattern(content)

        existing = await self.store.get_indicator(indicator_id(pattern))
        if existing is not None:
            log.info("Refreshing indicator %s for %s", existing.id, content)
            return await self.store.edit_indicator(
                existing.id,
                [
                    IndicatorPatch("valid_from", now),
                    IndicatorPatch("valid_until", valid_until),
                    IndicatorPatch("x_opencti_score", ACTIVE_SCORE),
                    IndicatorPatch("revoked", False),  # noqa: FBT003
                ],
            )

        indicator = await self.store.create_indicator(
            IndicatorCreate(
                name=content.value,
                pattern=pattern,
                main_observable_type=content.type.opencti_entity_type,
                score=ACTIVE_SCORE,
                valid_from=now,
                valid_until=valid_until,
                created_by=creator,
            )
        )
        await self.store.create_relationship(
            indicator.id, observable.id, RelationshipType.BASED_ON
        )
        log.info("Created indicator %s for %s", indicator.id, content)
        return indicator

    async def revoke(self, content: WebContent) -> Indicator | None:
        """Drop an active indicator's score to zero; validity and relationships stay."""

        indicator = await self.get(content)
        if indicator is None:
            return None
        if indicator.revoked:
            return indicator
        log.info("Revoking indicator %s for %s", indicator.id, content)
        return await self.store.edit_indicator(
            indicator.id, [IndicatorPatch("x_opencti_score", REVOKED_SCORE)]
        )
