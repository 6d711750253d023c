"""Translate between OpenCTI payloads and domain entities."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from seal_isac.domain.model import Indicator, Label, Observable
from seal_isac.domain.stix import label_id

if TYPE_CHECKING:
    from collections.abc import Sequence

    from seal_isac.domain.model import IndicatorCreate, IndicatorPatch, ObservableCreate

    from .schema import IndicatorPayload, LabelPayload, ObservablePayload

LABEL_RELATIONSHIP = "object-label"

# GraphQL input-type argument name per observable entity type
_OBSERVABLE_INPUT_ARGUMENTS: dict[str, str] = {
    "Domain-Name": "DomainName",
    "IPv4-Addr": "IPv4Addr",
    "IPv6-Addr": "IPv6Addr",
    "Url": "Url",
}


def to_labels(payloads: Sequence[LabelPayload] | None) -> list[Label]:
    return [Label(id=payload.id, value=payload.value) for payload in payloads or ()]


def to_observable(payload: ObservablePayload) -> Observable:
    return Observable(
        id=payload.id,
        standard_id=payload.standard_id,
        entity_type=payload.entity_type,
        observable_value=payload.observable_value,
        labels=to_labels(payload.object_label),
    )


def to_indicator(payload: IndicatorPayload) -> Indicator:
    return Indicator(
        id=payload.id,
        standard_id=payload.standard_id,
        name=payload.name,
        pattern=payload.pattern,
        valid_from=payload.valid_from,
        valid_until=payload.valid_until,
        score=payload.score if payload.score is not None else 0,
        revoked=payload.revoked,
    )


def observable_create_variables(request: ObservableCreate) -> dict[str, object]:
    entity_type = request.content.type.opencti_entity_type
    variables: dict[str, object] = {
        "type": entity_type,
        _OBSERVABLE_INPUT_ARGUMENTS[entity_type]: {"value": request.content.value},
        "objectMarking": list(request.markings),
        "objectLabel": [label_id(label) for label in request.labels],
    }
    if request.created_by is not None:
        variables["createdBy"] = request.created_by
    if request.score is not None:
        variables["x_opencti_score"] = request.score
    return variables


def _format_edit_value(value: datetime | int | bool) -> object:
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def indicator_create_input(request: IndicatorCreate) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": request.name,
        "pattern_type": request.pattern_type,
        "pattern": request.pattern,
        "x_opencti_main_observable_type": request.main_observable_type,
        "x_opencti_score": request.score,
        "valid_from": request.valid_from.isoformat(),
        "valid_until": request.valid_until.isoformat(),
    }
    if request.created_by is not None:
        payload["createdBy"] = request.created_by
    return payload


def indicator_edit_input(patches: Sequence[IndicatorPatch]) -> list[dict[str, object]]:
    return [{"key": patch.key, "value": [_format_edit_value(patch.value)]} for patch in patches]
