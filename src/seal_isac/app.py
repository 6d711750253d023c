"""Application orchestration entry points."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from seal_isac.adapters.opencti import OpenCTIClient
from seal_isac.config import SealIsacConfig, get_seal_isac_config
from seal_isac.domain.model import WebContent, WebContentStatus
from seal_isac.domain.reputation import WebContentReputation

if TYPE_CHECKING:
    from seal_isac.domain.ports import ThreatIntelStore

StoreFactory = Callable[[SealIsacConfig], AbstractAsyncContextManager["ThreatIntelStore"]]

log = getLogger(__name__)


class ChangeOutcome(StrEnum):
    APPLIED = "applied"
    UNCHANGED = "unchanged"
    REFUSED = "refused"


@dataclass(slots=True, frozen=True)
class ReputationChange:
    """What a reputation command did, and the status it found beforehand."""

    content: WebContent
    previous: WebContentStatus
    outcome: ChangeOutcome


def _default_store_factory(config: SealIsacConfig) -> OpenCTIClient:
    return OpenCTIClient(config=config)


def hostname_content(url: str) -> WebContent:
    """Return the hostname of ``url`` as domain content; the URL commands act on it."""

    try:
        hostname = urlsplit(url).hostname
    except ValueError as exc:
        raise ValueError(f"Invalid URL: {url}") from exc
    if not hostname:
        raise ValueError(f"Invalid URL: {url}")
    return WebContent.domain(hostname)


def _run[T](
    action: Callable[[WebContentReputation], Awaitable[T]],
    *,
    config: SealIsacConfig | None,
    store_factory: StoreFactory | None,
) -> T:
    effective_config = config or get_seal_isac_config()
    effective_factory = store_factory or _default_store_factory

    async def run() -> T:
        async with effective_factory(effective_config) as store:
            return await action(WebContentReputation(store))

    return asyncio.run(run())


def get_web_content_status(
    content: WebContent,
    *,
    config: SealIsacConfig | None = None,
    store_factory: StoreFactory | None = None,
) -> WebContentStatus:
    async def action(reputation: WebContentReputation) -> WebContentStatus:
        return await reputation.status(content)

    return _run(action, config=config, store_factory=store_factory)


def block_web_content(
    content: WebContent,
    *,
    force: bool = False,
    config: SealIsacConfig | None = None,
    store_factory: StoreFactory | None = None,
) -> ReputationChange:
    """Block ``content`` unless it is trusted (without ``force``) or already blocked."""

    effective_config = config or get_seal_isac_config()

    async def action(reputation: WebContentReputation) -> ReputationChange:
        previous = await reputation.status(content)
        if previous is WebContentStatus.TRUSTED and not force:
            log.warning("%s is trusted; refusing to block without force", content.value)
            return ReputationChange(content, previous, ChangeOutcome.REFUSED)
        if previous is WebContentStatus.BLOCKED:
            return ReputationChange(content, previous, ChangeOutcome.UNCHANGED)
        await reputation.block(content, effective_config.identity)
        return ReputationChange(content, previous, ChangeOutcome.APPLIED)

    return _run(action, config=effective_config, store_factory=store_factory)


def unblock_web_content(
    content: WebContent,
    *,
    config: SealIsacConfig | None = None,
    store_factory: StoreFactory | None = None,
) -> ReputationChange:
    async def action(reputation: WebContentReputation) -> ReputationChange:
        previous = await reputation.status(content)
        if previous is not WebContentStatus.BLOCKED:
            return ReputationChange(content, previous, ChangeOutcome.UNCHANGED)
        await reputation.unblock(content)
        return ReputationChange(content, previous, ChangeOutcome.APPLIED)

    return _run(action, config=config, store_factory=store_factory)


def trust_web_content(
    content: WebContent,
    *,
    config: SealIsacConfig | None = None,
    store_factory: StoreFactory | None = None,
) -> ReputationChange:
    effective_config = config or get_seal_isac_config()

    async def action(reputation: WebContentReputation) -> ReputationChange:
        previous = await reputation.status(content)
        await reputation.trust(content, effective_config.identity)
        return ReputationChange(content, previous, ChangeOutcome.APPLIED)

    return _run(action, config=effective_config, store_factory=store_factory)
