"""Pure status resolution over the observable and indicator read models."""

from __future__ import annotations

from seal_isac.domain.model import IndicatorState, LabelMarker, WebContentStatus


def resolve_status(marker: LabelMarker, indicator: IndicatorState) -> WebContentStatus:
    """Merge the label and indicator signals into one status.

    Trust (current or legacy allowlist) beats everything, a legacy blocklist label
    comes next, and only then does an active indicator report the content blocked.
    """

    if marker in (LabelMarker.TRUSTED, LabelMarker.LEGACY_ALLOWLISTED):
        return WebContentStatus.TRUSTED
    if marker is LabelMarker.LEGACY_BLOCKLISTED:
        return WebContentStatus.BLOCKED
    if indicator is IndicatorState.ACTIVE:
        return WebContentStatus.BLOCKED
    return WebContentStatus.UNKNOWN
