"""Domain model for web content reputation."""

from __future__ import annotations

from .content import WebContent, parse_web_content
from .enums import (
    IndicatorState,
    LabelMarker,
    LegacyDomainStatus,
    LegacyLabel,
    RelationshipType,
    ReputationLabel,
    WebContentStatus,
    WebContentType,
)
from .intel import (
    Indicator,
    IndicatorCreate,
    IndicatorPatch,
    Label,
    Observable,
    ObservableCreate,
    indicator_state,
    label_marker,
)

__all__ = [
    "Indicator",
    "IndicatorCreate",
    "IndicatorPatch",
    "IndicatorState",
    "Label",
    "LabelMarker",
    "LegacyDomainStatus",
    "LegacyLabel",
    "Observable",
    "ObservableCreate",
    "RelationshipType",
    "ReputationLabel",
    "WebContent",
    "WebContentStatus",
    "WebContentType",
    "indicator_state",
    "label_marker",
    "parse_web_content",
]
