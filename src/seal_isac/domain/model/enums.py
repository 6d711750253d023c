"""Domain enums (pure, dependency-light)."""

from __future__ import annotations

from enum import StrEnum


class WebContentType(StrEnum):
    DOMAIN_NAME = "domain-name"
    IPV4_ADDR = "ipv4-addr"
    IPV6_ADDR = "ipv6-addr"
    URL = "url"

    @property
    def opencti_entity_type(self) -> str:
        """Entity type name OpenCTI uses for observables of this kind."""
        return _OPENCTI_ENTITY_TYPES[self]


_OPENCTI_ENTITY_TYPES: dict[WebContentType, str] = {
    WebContentType.DOMAIN_NAME: "Domain-Name",
    WebContentType.IPV4_ADDR: "IPv4-Addr",
    WebContentType.IPV6_ADDR: "IPv6-Addr",
    WebContentType.URL: "Url",
}


class WebContentStatus(StrEnum):
    UNKNOWN = "unknown"
    BLOCKED = "blocked"
    TRUSTED = "trusted"


class LegacyDomainStatus(StrEnum):
    UNKNOWN = "unknown"
    BLOCKLISTED = "blocklisted"
    ALLOWLISTED = "allowlisted"


class ReputationLabel(StrEnum):
    """Labels written by the web content reputation workflow."""

    TRUSTED = "trusted web content"


class LegacyLabel(StrEnum):
    """Deprecated domain list labels; only the legacy adapter writes them."""

    BLOCKLISTED = "blocklisted domain"
    ALLOWLISTED = "allowlisted domain"


class LabelMarker(StrEnum):
    """Reputation carried by an observable's labels, highest precedence first."""

    TRUSTED = "trusted"
    LEGACY_ALLOWLISTED = "legacy_allowlisted"
    LEGACY_BLOCKLISTED = "legacy_blocklisted"
    NONE = "none"


class IndicatorState(StrEnum):
    ABSENT = "absent"
    ACTIVE = "active"
    REVOKED = "revoked"


class RelationshipType(StrEnum):
    BASED_ON = "based-on"
    RELATED_TO = "related-to"
