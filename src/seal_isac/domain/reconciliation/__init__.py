"""Reconciliation of web content onto observables and indicators.

The observable and indicator reconcilers each follow a look-before-create
pattern keyed by deterministic ids, so every step can be re-run safely even
though a composite operation is not transactional.
"""

from __future__ import annotations

from .indicators import INDICATOR_VALIDITY, IndicatorReconciler
from .observables import ObservableReconciler
from .status import resolve_status

__all__ = [
    "INDICATOR_VALIDITY",
    "IndicatorReconciler",
    "ObservableReconciler",
    "resolve_status",
]
