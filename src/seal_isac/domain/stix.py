"""Deterministic STIX/OpenCTI identifiers and detection patterns.

Identifiers are content addressed: a UUIDv5 over the canonical JSON of the
properties that define the object. Computing them locally lets the reconcilers
look an object up before deciding whether to create it.
"""

from __future__ import annotations

import json
from typing import Final
from uuid import UUID, uuid5

from .model.content import WebContent

# namespace defined by STIX 2.1 for cyber observables
STIX_SCO_NAMESPACE: Final = UUID("00abedb4-aa42-466c-9c01-fed23315a9b7")
# namespace OpenCTI uses for the domain objects it identifies itself
OPENCTI_NAMESPACE: Final = UUID("b639ff3b-00eb-42ed-aa36-a8dd6f8fb4cf")

MARKING_TLP_CLEAR: Final = "marking-definition--94868c89-83c2-464b-929b-a1a8aa3c8487"


def _canonical_json(properties: dict[str, str]) -> str:
    return json.dumps(properties, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _normalize_name(value: str) -> str:
    return value.lower().strip()


def _stix_id(object_type: str, namespace: UUID, properties: dict[str, str]) -> str:
    return f"{object_type}--{uuid5(namespace, _canonical_json(properties))}"


def observable_id(content: WebContent) -> str:
    return _stix_id(str(content.type), STIX_SCO_NAMESPACE, {"value": content.value})


def indicator_id(pattern: str) -> str:
    return _stix_id("indicator", OPENCTI_NAMESPACE, {"pattern": pattern})


def label_id(value: str) -> str:
    return _stix_id("label", OPENCTI_NAMESPACE, {"value": _normalize_name(value)})


def identity_id(name: str, identity_class: str) -> str:
    return _stix_id(
        "identity",
        OPENCTI_NAMESPACE,
        {"name": _normalize_name(name), "identity_class": identity_class},
    )


def escape_single_quotes(value: str) -> str:
    return value.replace("'", "\\'")


def generate_pattern(content: WebContent) -> str:
    """STIX comparison pattern matching ``content`` exactly.

    Only single quotes are escaped; a backslash inside the value is passed through.
    """

    return f"[{content.type}:value = '{escape_single_quotes(content.value)}']"


def content_indicator_id(content: WebContent) -> str:
    return indicator_id(generate_pattern(content))


__all__ = [
    "MARKING_TLP_CLEAR",
    "content_indicator_id",
    "escape_single_quotes",
    "generate_pattern",
    "identity_id",
    "indicator_id",
    "label_id",
    "observable_id",
]
