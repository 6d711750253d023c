"""OpenCTI store adapter."""

from __future__ import annotations

from .client import OpenCTIAPIError, OpenCTIClient

__all__ = ["OpenCTIAPIError", "OpenCTIClient"]
