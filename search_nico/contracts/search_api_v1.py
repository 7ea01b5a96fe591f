"""Search API Contract v1.

Defines the canonical types for:
  - Search queries (ContentsQuery, TagsQuery) and their filters
  - NDJSON response chunks (StatsChunk, HitsChunk, TagsChunk, ErrorChunk)
  - Normalized results (ContentsSearchResult, TagsSearchResult)

Queries go over the wire as `model_dump_json(by_alias=True, exclude_none=True)`,
so optional fields that were never set do not appear in the request body.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

DEFAULT_TIMEOUT_MS = 3000

# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SortOrder(StrEnum):
    ASC = "asc"
    DESC = "desc"


class ChunkType(StrEnum):
    STATS = "stats"
    HITS = "hits"
    TAGS = "tags"


# ---------------------------------------------------------------------------
# Filters
# ---------------------------------------------------------------------------

# Strict so that True stays a JSON boolean and "100" stays a string.
FilterValue = Union[StrictBool, StrictInt, StrictFloat, StrictStr]


class EqualFilter(BaseModel):
    """Matches documents whose field equals value."""

    model_config = ConfigDict(frozen=True)

    type: Literal["equal"] = "equal"
    field: str
    value: FilterValue


class RangeFilter(BaseModel):
    """Matches documents whose field lies between from and to."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    type: Literal["range"] = "range"
    field: str
    from_: FilterValue | None = Field(default=None, alias="from")
    to: FilterValue | None = None
    include_upper: bool = True
    include_lower: bool = True


Filter = Annotated[Union[EqualFilter, RangeFilter], Field(discriminator="type")]


# ---------------------------------------------------------------------------
# Queries
# ---------------------------------------------------------------------------


class _Query(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: str = Field(default="keyword", description="Free-text search term")
    service: list[str] = Field(default_factory=lambda: ["video"])
    from_: int = Field(default=0, ge=0, alias="from", description="Pagination offset")
    size: int = Field(default=10, ge=0, description="Page size")
    timeout: int = Field(default=DEFAULT_TIMEOUT_MS, gt=0, description="Client-side timeout in ms")
    issuer: str = Field(description="Service/application name")
    reason: str = Field(description="Contest/event name")

    def to_wire(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ContentsQuery(_Query):
    """Body of a contents search (/api/)."""

    search: list[str] = Field(default_factory=lambda: ["title"], description="Fields searched")
    join: list[str] = Field(default_factory=lambda: ["cmsid"], description="Fields returned")
    filters: list[Filter] = Field(default_factory=list)
    sort_by: str = Field(default="view_counter")
    order: SortOrder | None = Field(
        default=None,
        description="asc | desc. Only sent once sort() has been called.",
    )


class TagsQuery(_Query):
    """Body of a related-tags search (/api/tag/)."""


# ---------------------------------------------------------------------------
# Response chunks
# ---------------------------------------------------------------------------


class StatsValue(BaseModel):
    model_config = ConfigDict(extra="allow")

    total: int


class TagValue(BaseModel):
    model_config = ConfigDict(extra="allow")

    tag: str


class _TypedChunk(BaseModel):
    # A typed chunk may still carry an errid; it is reported like an ErrorChunk.
    errid: int | str | None = None


class StatsChunk(_TypedChunk):
    type: Literal["stats"]
    values: list[StatsValue] | None = None


class HitsChunk(_TypedChunk):
    type: Literal["hits"]
    values: list[dict[str, Any]] | None = None


class TagsChunk(_TypedChunk):
    type: Literal["tags"]
    values: list[TagValue] | None = None


class ErrorChunk(BaseModel):
    errid: int | str


RawChunk = Union[StatsChunk, HitsChunk, TagsChunk, ErrorChunk]


# ---------------------------------------------------------------------------
# Normalized results
# ---------------------------------------------------------------------------


class _SearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: int = Field(description="HTTP-like status translated from the API")
    status_text: str | None = Field(default=None, alias="statusText")
    values: list[Any] = Field(default_factory=list, description="Server-ordered results")

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump(by_alias=True)
        if data["statusText"] is None:
            del data["statusText"]
        return data


class ContentsSearchResult(_SearchResult):
    hits: int = Field(default=0, description="Total matching documents")
    values: list[dict[str, Any]] = Field(default_factory=list)


class TagsSearchResult(_SearchResult):
    values: list[str] = Field(default_factory=list)
