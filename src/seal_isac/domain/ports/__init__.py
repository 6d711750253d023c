"""Domain port definitions for adapters."""

from __future__ import annotations

from .store import ThreatIntelStore

__all__ = ["ThreatIntelStore"]
