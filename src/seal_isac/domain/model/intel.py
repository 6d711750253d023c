"""Threat-intel store entities as seen by the reconcilers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime  # noqa: TC003
from typing import TYPE_CHECKING, Literal

from .enums import IndicatorState, LabelMarker, LegacyLabel, ReputationLabel

if TYPE_CHECKING:
    from .content import WebContent

# label -> marker, in resolution order
_MARKER_PRECEDENCE: tuple[tuple[str, LabelMarker], ...] = (
    (ReputationLabel.TRUSTED, LabelMarker.TRUSTED),
    (LegacyLabel.ALLOWLISTED, LabelMarker.LEGACY_ALLOWLISTED),
    (LegacyLabel.BLOCKLISTED, LabelMarker.LEGACY_BLOCKLISTED),
)


@dataclass(slots=True, frozen=True)
class Label:
    id: str
    value: str


@dataclass(slots=True)
class Observable:
    """A cyber observable node; its labels are the observable-side reputation signal."""

    id: str
    entity_type: str
    observable_value: str
    standard_id: str | None = None
    labels: list[Label] = field(default_factory=list["Label"])

    @property
    def label_values(self) -> frozenset[str]:
        return frozenset(label.value for label in self.labels)

    def has_label(self, value: str) -> bool:
        return value in self.label_values

    @property
    def marker(self) -> LabelMarker:
        values = self.label_values
        for label, marker in _MARKER_PRECEDENCE:
            if label in values:
                return marker
        return LabelMarker.NONE


@dataclass(slots=True)
class Indicator:
    id: str
    pattern: str
    score: int
    revoked: bool
    name: str | None = None
    standard_id: str | None = None
    valid_from: datetime | None = None
    valid_until: datetime | None = None


def indicator_state(indicator: Indicator | None) -> IndicatorState:
    if indicator is None:
        return IndicatorState.ABSENT
    if indicator.revoked:
        return IndicatorState.REVOKED
    return IndicatorState.ACTIVE


def label_marker(observable: Observable | None) -> LabelMarker:
    return LabelMarker.NONE if observable is None else observable.marker


@dataclass(slots=True, frozen=True, kw_only=True)
class ObservableCreate:
    content: WebContent
    labels: tuple[str, ...] = ()
    created_by: str | None = None
    markings: tuple[str, ...] = ()
    score: int | None = None


@dataclass(slots=True, frozen=True, kw_only=True)
class IndicatorCreate:
    name: str
    pattern: str
    main_observable_type: str
    score: int
    valid_from: datetime
    valid_until: datetime
    created_by: str | None = None
    pattern_type: Literal["stix"] = "stix"


type IndicatorField = Literal["valid_from", "valid_until", "x_opencti_score", "revoked"]


@dataclass(slots=True, frozen=True)
class IndicatorPatch:
    """One field edit; OpenCTI takes edit values as lists."""

    key: IndicatorField
    value: datetime | int | bool
