"""Web content values and classification of free-form input."""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from functools import cache
from urllib.parse import urlsplit

import tldextract
from rfc3986 import iri_reference
from rfc3986.exceptions import RFC3986Exception
from rfc3986.validators import Validator

from .enums import WebContentType

HOST_BEARING_SCHEMES = frozenset({"http", "https"})
# characters that only occur in a URL, never in a bare hostname
URL_ONLY_CHARACTERS = frozenset(":/?#[]@\\")


@dataclass(frozen=True, slots=True)
class WebContent:
    """A reputation subject: a domain name, an IP address or a URL."""

    type: WebContentType
    value: str

    @classmethod
    def domain(cls, value: str) -> WebContent:
        return cls(WebContentType.DOMAIN_NAME, value)

    @classmethod
    def ipv4(cls, value: str) -> WebContent:
        return cls(WebContentType.IPV4_ADDR, value)

    @classmethod
    def ipv6(cls, value: str) -> WebContent:
        return cls(WebContentType.IPV6_ADDR, value)

    @classmethod
    def url(cls, value: str) -> WebContent:
        return cls(WebContentType.URL, value)

    def host_domain(self) -> WebContent | None:
        """Return the hostname of an http(s) URL as domain content, else ``None``.

        IP literal hosts are not domains and yield ``None`` as well.
        """

        if self.type is not WebContentType.URL:
            return None
        parts = urlsplit(self.value)
        if parts.scheme.lower() not in HOST_BEARING_SCHEMES or not parts.hostname:
            return None
        if _is_ipv4(parts.hostname) or _is_ipv6(parts.hostname):
            return None
        return WebContent.domain(parts.hostname)

    def __str__(self) -> str:
        return f"{self.type}:{self.value}"


@cache
def _suffix_extractor() -> tldextract.TLDExtract:
    # bundled public suffix snapshot; classification must not hit the network
    return tldextract.TLDExtract(suffix_list_urls=(), include_psl_private_domains=False)


def _is_ipv4(value: str) -> bool:
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


def _is_ipv6(value: str) -> bool:
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


def _is_url(value: str) -> bool:
    if any(char.isspace() for char in value):
        return False
    try:
        # IDNA-encodes unicode hosts; path, query and fragment get percent-encoded
        reference = iri_reference(value).encode()
        Validator().require_presence_of("scheme").check_validity_of(
            "scheme", "userinfo", "host", "port"
        ).validate(reference)
    except RFC3986Exception:
        return False
    if reference.scheme.lower() in HOST_BEARING_SCHEMES:
        return bool(reference.host)
    return True


def _is_icann_domain(value: str) -> bool:
    if not value or any(char.isspace() or char in URL_ONLY_CHARACTERS for char in value):
        return False
    extracted = _suffix_extractor()(value)
    return bool(extracted.suffix)


def parse_web_content(raw: str) -> WebContent | None:
    """Classify ``raw`` as IPv4, IPv6, URL or ICANN domain, in that order.

    IP literals are tested first because they are not URLs; URLs are tested before
    domains so that anything carrying a scheme is kept whole. Returns ``None`` when
    nothing matches.
    """

    if _is_ipv4(raw):
        return WebContent.ipv4(raw)
    if _is_ipv6(raw):
        return WebContent.ipv6(raw)
    if _is_url(raw):
        return WebContent.url(raw)
    if _is_icann_domain(raw):
        return WebContent.domain(raw)
    return None
