"""Shared fixtures for OpenCTI adapter tests."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import httpx
import pytest

from seal_isac.adapters.http_resilience import ResilientClient
from seal_isac.adapters.opencti import OpenCTIClient

if TYPE_CHECKING:
    from collections.abc import Callable

    from seal_isac.config import ResilienceConfig, SealIsacConfig



class GraphQLRecorder:
    """Answers every request with queued payloads and keeps the decoded bodies."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.responses: list[httpx.Response] = []

    def reply(self, data: dict[str, object] | None = None, **extra: object) -> None:
        self.responses.append(httpx.Response(200, json={"data": data, **extra}))

    def reply_status(self, status_code: int) -> None:
        self.responses.append(httpx.Response(status_code, json={"message": "unavailable"}))

    def bodies(self) -> list[dict[str, object]]:
        return [json.loads(request.content) for request in self.requests]

    def variables(self, index: int = -1) -> dict[str, object]:
        variables = self.bodies()[index]["variables"]
        assert isinstance(variables, dict)
        return variables

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses.pop(0)


@pytest.fixture
def graphql() -> GraphQLRecorder:
    return GraphQLRecorder()


@pytest.fixture
def client_factory(graphql: GraphQLRecorder) -> Callable[[ResilienceConfig], ResilientClient]:
    def factory(resilience: ResilienceConfig) -> ResilientClient:
        client = ResilientClient(resilience)
        client._client = httpx.AsyncClient(  # noqa: SLF001  # type: ignore[reportPrivateUsage]
            transport=httpx.MockTransport(graphql.handle),
            base_url=resilience.base_url or "",
            headers=dict(resilience.default_headers or {}),
        )
        return client

    return factory


@pytest.fixture
def opencti(
    seal_config: SealIsacConfig,
    client_factory: Callable[[ResilienceConfig], ResilientClient],
) -> OpenCTIClient:
    return OpenCTIClient(config=seal_config, client_factory=client_factory)
