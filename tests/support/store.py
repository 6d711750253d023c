"""In-memory threat-intel store used by domain and app tests."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from seal_isac.domain.model import (
    Indicator,
    Label,
    LegacyLabel,
    Observable,
    RelationshipType,
    ReputationLabel,
)
from seal_isac.domain.stix import indicator_id, label_id, observable_id

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import TracebackType

    from seal_isac.domain.model import IndicatorCreate, IndicatorPatch, ObservableCreate

KNOWN_LABELS: tuple[str, ...] = (
    ReputationLabel.TRUSTED,
    LegacyLabel.ALLOWLISTED,
    LegacyLabel.BLOCKLISTED,
)


class StoreFailure(RuntimeError):
    """Raised by the fake when a call was configured to fail."""


@dataclass(slots=True)
class CreatedObservable:
    observable: Observable
    created_by: str | None
    markings: tuple[str, ...]
    score: int | None


@dataclass(slots=True)
class CreatedIndicator:
    indicator: Indicator
    created_by: str | None
    main_observable_type: str


@dataclass(slots=True)
class InMemoryThreatIntelStore:
    """Store fake keyed by deterministic ids; every call is recorded in ``calls``.

    Like OpenCTI, setting an indicator's score to zero revokes it and creating an
    object whose id already exists returns the existing one.
    """

    labels: dict[str, str] = field(
        default_factory=lambda: {label_id(value): value for value in KNOWN_LABELS}
    )
    observables: dict[str, CreatedObservable] = field(default_factory=dict)
    indicators: dict[str, CreatedIndicator] = field(default_factory=dict)
    relationships: list[tuple[str, str, RelationshipType]] = field(default_factory=list)
    calls: list[str] = field(default_factory=list)
    fail_on: set[str] = field(default_factory=set)
    entered: bool = False

    async def __aenter__(self) -> InMemoryThreatIntelStore:
        self.entered = True
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.entered = False

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise StoreFailure(f"{name} failed")

    def writes(self) -> list[str]:
        return [call for call in self.calls if not call.startswith("get_")]

    async def get_observable(self, observable_id: str) -> Observable | None:
        self._record("get_observable")
        stored = self.observables.get(observable_id)
        return _copy_observable(stored.observable) if stored is not None else None

    async def create_observable(self, observable: ObservableCreate) -> Observable:
        self._record("create_observable")
        node_id = observable_id(observable.content)
        if node_id not in self.observables:
            self.observables[node_id] = CreatedObservable(
                observable=Observable(
                    id=node_id,
                    standard_id=node_id,
                    entity_type=observable.content.type.opencti_entity_type,
                    observable_value=observable.content.value,
                    labels=[self._label(label_id(value)) for value in observable.labels],
                ),
                created_by=observable.created_by,
                markings=observable.markings,
                score=observable.score,
            )
        return _copy_observable(self.observables[node_id].observable)

    async def add_label(self, observable_id: str, label_id: str) -> list[Label]:
        self._record("add_label")
        stored = self.observables[observable_id].observable
        if all(label.id != label_id for label in stored.labels):
            stored.labels.append(self._label(label_id))
        return list(stored.labels)

    async def delete_label(self, observable_id: str, label_id: str) -> list[Label]:
        self._record("delete_label")
        stored = self.observables[observable_id].observable
        stored.labels = [label for label in stored.labels if label.id != label_id]
        return list(stored.labels)

    async def get_indicator(self, indicator_id: str) -> Indicator | None:
        self._record("get_indicator")
        stored = self.indicators.get(indicator_id)
        return replace(stored.indicator) if stored is not None else None

    async def create_indicator(self, indicator: IndicatorCreate) -> Indicator:
        self._record("create_indicator")
        node_id = indicator_id(indicator.pattern)
        if node_id not in self.indicators:
            self.indicators[node_id] = CreatedIndicator(
                indicator=Indicator(
                    id=node_id,
                    standard_id=node_id,
                    name=indicator.name,
                    pattern=indicator.pattern,
                    score=indicator.score,
                    revoked=False,
                    valid_from=indicator.valid_from,
                    valid_until=indicator.valid_until,
                ),
                created_by=indicator.created_by,
                main_observable_type=indicator.main_observable_type,
            )
        return replace(self.indicators[node_id].indicator)

    async def edit_indicator(
        self, indicator_id: str, patches: Sequence[IndicatorPatch]
    ) -> Indicator:
        self._record("edit_indicator")
        stored = self.indicators[indicator_id].indicator
        for patch in patches:
            if patch.key == "valid_from":
                stored.valid_from = patch.value  # type: ignore[assignment]
            elif patch.key == "valid_until":
                stored.valid_until = patch.value  # type: ignore[assignment]
            elif patch.key == "revoked":
                stored.revoked = bool(patch.value)
            elif patch.key == "x_opencti_score":
                stored.score = int(patch.value)
                if stored.score == 0:
                    stored.revoked = True
        return replace(stored)

    async def create_relationship(
        self, from_id: str, to_id: str, relationship_type: RelationshipType
    ) -> None:
        self._record("create_relationship")
        self.relationships.append((from_id, to_id, relationship_type))

    def _label(self, label_id: str) -> Label:
        return Label(id=label_id, value=self.labels[label_id])

    def labels_of(self, node_id: str) -> set[str]:
        return {label.value for label in self.observables[node_id].observable.labels}

    def indicator(self, node_id: str) -> Indicator:
        return self.indicators[node_id].indicator


def _copy_observable(observable: Observable) -> Observable:
    return replace(observable, labels=list(observable.labels))
