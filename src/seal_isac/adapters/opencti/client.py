"""OpenCTI GraphQL client implementing the threat-intel store port."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING, cast

from pydantic import BaseModel

from seal_isac.adapters.http_resilience import ResilientClient
from seal_isac.domain.ports import ThreatIntelStore

from . import queries
from .schema import (
    GraphQLResponse,
    IndicatorPayload,
    LabelledPayload,
    ObservablePayload,
    RelationAddPayload,
    RelationshipPayload,
)
from .translator import (
    LABEL_RELATIONSHIP,
    indicator_create_input,
    indicator_edit_input,
    observable_create_variables,
    to_indicator,
    to_labels,
    to_observable,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence
    from types import TracebackType

    from seal_isac.config.http_resilience import ResilienceConfig
    from seal_isac.config.opencti import SealIsacConfig
    from seal_isac.domain.model import (
        Indicator,
        IndicatorCreate,
        IndicatorPatch,
        Label,
        Observable,
        ObservableCreate,
        RelationshipType,
    )

log = getLogger(__name__)

GRAPHQL_PATH = "/graphql"


class OpenCTIAPIError(RuntimeError):
    """Raised when OpenCTI answers a GraphQL request with errors or an unexpected shape."""

    def __init__(self, message: str, *, operation: str | None = None) -> None:
        super().__init__(message)
        self.operation = operation


def _default_client_factory(config: ResilienceConfig) -> ResilientClient:
    return ResilientClient(config)


class OpenCTIClient:
    """Store adapter speaking OpenCTI's GraphQL API.

    Use as an async context manager; one HTTP client (and rate limiter) is shared by
    every call made inside the block.
    """

    def __init__(
        self,
        *,
        config: SealIsacConfig,
        client_factory: Callable[[ResilienceConfig], ResilientClient] | None = None,
    ) -> None:
        self._config = config
        self._client_factory = client_factory or _default_client_factory
        self._client: ResilientClient | None = None

    async def __aenter__(self) -> OpenCTIClient:
        self._client = self._client_factory(self._config.resilience)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def get_observable(self, observable_id: str) -> Observable | None:
        data = await self._execute(
            "stixCyberObservable", queries.GET_OBSERVABLE, {"id": observable_id}
        )
        payload = _optional(data, "stixCyberObservable", ObservablePayload)
        return to_observable(payload) if payload is not None else None

    async def create_observable(self, observable: ObservableCreate) -> Observable:
        data = await self._execute(
            "stixCyberObservableAdd",
            queries.CREATE_OBSERVABLE,
            observable_create_variables(observable),
        )
        return to_observable(_required(data, "stixCyberObservableAdd", ObservablePayload))

    async def add_label(self, observable_id: str, label_id: str) -> list[Label]:
        data = await self._execute(
            "relationAdd",
            queries.ADD_LABEL,
            {
                "id": observable_id,
                "input": {"toId": label_id, "relationship_type": LABEL_RELATIONSHIP},
            },
        )
        edit = _edit_result(data, "relationAdd")
        added = RelationAddPayload.model_validate(edit)
        return to_labels(added.source.object_label if added.source is not None else None)

    async def delete_label(self, observable_id: str, label_id: str) -> list[Label]:
        data = await self._execute(
            "relationDelete",
            queries.DELETE_LABEL,
            {"id": observable_id, "toId": label_id, "relationship_type": LABEL_RELATIONSHIP},
        )
        remaining = LabelledPayload.model_validate(_edit_result(data, "relationDelete"))
        return to_labels(remaining.object_label)

    async def get_indicator(self, indicator_id: str) -> Indicator | None:
        data = await self._execute("indicator", queries.GET_INDICATOR, {"id": indicator_id})
        payload = _optional(data, "indicator", IndicatorPayload)
        return to_indicator(payload) if payload is not None else None

    async def create_indicator(self, indicator: IndicatorCreate) -> Indicator:
        data = await self._execute(
            "indicatorAdd",
            queries.CREATE_INDICATOR,
            {"input": indicator_create_input(indicator)},
        )
        return to_indicator(_required(data, "indicatorAdd", IndicatorPayload))

    async def edit_indicator(
        self, indicator_id: str, patches: Sequence[IndicatorPatch]
    ) -> Indicator:
        data = await self._execute(
            "indicatorFieldPatch",
            queries.EDIT_INDICATOR,
            {"id": indicator_id, "input": indicator_edit_input(patches)},
        )
        return to_indicator(_required(data, "indicatorFieldPatch", IndicatorPayload))

    async def create_relationship(
        self, from_id: str, to_id: str, relationship_type: RelationshipType
    ) -> None:
        data = await self._execute(
            "stixCoreRelationshipAdd",
            queries.CREATE_RELATIONSHIP,
            {
                "input": {
                    "fromId": from_id,
                    "toId": to_id,
                    "relationship_type": str(relationship_type),
                }
            },
        )
        relationship = _required(data, "stixCoreRelationshipAdd", RelationshipPayload)
        log.debug("Created %s relationship %s", relationship_type, relationship.id)

    async def _execute(
        self,
        operation: str,
        query: str,
        variables: dict[str, object],
    ) -> dict[str, object]:
        if self._client is None:
            raise OpenCTIAPIError("OpenCTI client used outside of 'async with'", operation=operation)
        response = await self._client.post(
            GRAPHQL_PATH, json={"query": query, "variables": variables}
        )
        response.raise_for_status()

        payload = response.json()
        if not isinstance(payload, dict):
            raise OpenCTIAPIError("Unexpected OpenCTI response payload", operation=operation)
        result = GraphQLResponse.model_validate(payload)
        if result.errors:
            messages = "; ".join(error.message for error in result.errors)
            log.error(f"OpenCTI {operation} failed: {messages}")
            raise OpenCTIAPIError(messages, operation=operation)
        if result.data is None:
            raise OpenCTIAPIError("OpenCTI response carried no data", operation=operation)
        return result.data


def _optional[M: BaseModel](data: dict[str, object], key: str, model: type[M]) -> M | None:
    value = data.get(key)
    if value is None:
        return None
    return model.model_validate(value)


def _required[M: BaseModel](data: dict[str, object], key: str, model: type[M]) -> M:
    value = _optional(data, key, model)
    if value is None:
        raise OpenCTIAPIError(f"OpenCTI returned no {key}", operation=key)
    return value


def _edit_result(data: dict[str, object], key: str) -> dict[str, object]:
    edit = data.get("stixCyberObservableEdit")
    if not isinstance(edit, dict):
        raise OpenCTIAPIError("OpenCTI returned no stixCyberObservableEdit", operation=key)
    result = cast("dict[str, object]", edit).get(key)
    if not isinstance(result, dict):
        raise OpenCTIAPIError(f"OpenCTI returned no {key}", operation=key)
    return cast("dict[str, object]", result)


if TYPE_CHECKING:
    _store_check: ThreatIntelStore = OpenCTIClient(config=cast("SealIsacConfig", None))
