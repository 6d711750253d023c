"""Shared logging helpers for the SEAL-ISAC tooling."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger once with CLI friendly defaults.

    Pass ``force=True`` to reconfigure from tests or alternative entry points.
    Chatty transport loggers are capped at WARNING so reconciliation steps stay readable.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))
