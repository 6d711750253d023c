"""Port for the graph-based threat-intel store."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence

    from seal_isac.domain.model import (
        Indicator,
        IndicatorCreate,
        IndicatorPatch,
        Label,
        Observable,
        ObservableCreate,
        RelationshipType,
    )


@runtime_checkable
class ThreatIntelStore(Protocol):
    """Node, label and relationship operations the reconcilers rely on.

    Lookups return ``None`` for unknown ids. Any other failure is raised by the
    implementation and is not handled by callers.
    """

    async def get_observable(self, observable_id: str) -> Observable | None: ...

    async def create_observable(self, observable: ObservableCreate) -> Observable: ...

    async def add_label(self, observable_id: str, label_id: str) -> list[Label]:
        """Attach a label and return the observable's resulting label set."""
        ...

    async def delete_label(self, observable_id: str, label_id: str) -> list[Label]:
        """Detach a label and return the observable's resulting label set."""
        ...

    async def get_indicator(self, indicator_id: str) -> Indicator | None: ...

    async def create_indicator(self, indicator: IndicatorCreate) -> Indicator: ...

    async def edit_indicator(
        self, indicator_id: str, patches: Sequence[IndicatorPatch]
    ) -> Indicator: ...

    async def create_relationship(
        self, from_id: str, to_id: str, relationship_type: RelationshipType
    ) -> None: ...
