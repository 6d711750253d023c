"""Environment lookups used by the configuration loaders."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .errors import MissingConfigurationError

if TYPE_CHECKING:
    from collections.abc import Sequence


def _read(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def require_env_vars(names: Sequence[str]) -> dict[str, str]:
    """Return stripped values for ``names``, raising once for every missing/blank variable."""

    values = {name: _read(name) for name in names}
    missing = sorted(name for name, value in values.items() if value is None)
    if missing:
        raise MissingConfigurationError(missing)
    return {name: value for name, value in values.items() if value is not None}


def optional_env_var(name: str, default: str) -> str:
    """Return ``name`` from the environment, falling back to ``default`` when unset or blank."""

    value = _read(name)
    return default if value is None else value
