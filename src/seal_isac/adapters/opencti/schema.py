"""OpenCTI GraphQL response schemas."""

from __future__ import annotations

import logging
from datetime import datetime  # noqa: TC003
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

log = logging.getLogger(__name__)


class OpenCTIBaseModel(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)
    _logged_extra_keys: ClassVar[set[str]] = set()

    def model_post_init(self, _context: object, /) -> None:
        extras = self.__pydantic_extra__
        if not extras:
            return
        new_keys = set(extras).difference(self._logged_extra_keys)
        if not new_keys:
            return
        self._logged_extra_keys.update(new_keys)
        log.debug(
            "OpenCTI %s: unmodeled keys: %s",
            type(self).__name__,
            ", ".join(sorted(new_keys)),
        )


class LabelPayload(OpenCTIBaseModel):
    id: str
    value: str


class ObservablePayload(OpenCTIBaseModel):
    id: str
    standard_id: str | None = None
    entity_type: str
    observable_value: str
    object_label: list[LabelPayload] | None = Field(default=None, alias="objectLabel")


class IndicatorPayload(OpenCTIBaseModel):
    id: str
    standard_id: str | None = None
    name: str | None = None
    pattern: str
    valid_from: datetime | None = None
    valid_until: datetime | None = None
    score: int | None = Field(default=None, alias="x_opencti_score")
    revoked: bool = False


class LabelledPayload(OpenCTIBaseModel):
    object_label: list[LabelPayload] | None = Field(default=None, alias="objectLabel")


class RelationAddPayload(OpenCTIBaseModel):
    source: LabelledPayload | None = Field(default=None, alias="from")


class RelationshipPayload(OpenCTIBaseModel):
    id: str


class GraphQLErrorLocation(BaseModel):
    line: int
    column: int


class GraphQLError(BaseModel):
    model_config = ConfigDict(extra="allow")

    message: str
    locations: list[GraphQLErrorLocation] | None = None
    path: list[str | int] | None = None


class GraphQLResponse(BaseModel):
    data: dict[str, object] | None = None
    errors: list[GraphQLError] | None = None
