"""Fluent request builders for contents search and related-tags search.

Each builder owns its own query. Mutators overwrite one field and return the
builder, so calls chain:

    cs = create_contents_search(issuer="my-app", reason="html5jc")
    result = await (
        cs.service("video")
        .keyword("hoge")
        .filter([cs.equal_filter("ppv_type", "free")])
        .sort("view_counter", "asc")
        .size(5)
        .fetch()
    )
"""

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from search_nico.api.decoder import decode_contents_response, decode_tags_response
from search_nico.api.status import OK
from search_nico.api.transport import HttpxTransport, Transport
from search_nico.contracts.search_api_v1 import (
    ContentsQuery,
    ContentsSearchResult,
    EqualFilter,
    Filter,
    FilterValue,
    RangeFilter,
    SortOrder,
    TagsQuery,
    TagsSearchResult,
)
from search_nico.core.config import config
from search_nico.core.errors import ApiError, ConfigurationError, RequestError
from search_nico.core.logger import logger

CONTENTS_PATH = "/api/"
TAGS_PATH = "/api/tag/"
TAG_SERVICE_PREFIX = "tag_"

M = TypeVar("M", bound=BaseModel)
R = TypeVar("R", ContentsSearchResult, TagsSearchResult)


def equal_filter(field: str, value: FilterValue) -> EqualFilter:
    """Build an equal filter for field == value."""
    try:
        return EqualFilter(field=field, value=value)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid equal filter on {field!r}: {e}") from e


def range_filter(
    field: str,
    from_: FilterValue | None = None,
    to: FilterValue | None = None,
    include_upper: bool | None = None,
    include_lower: bool | None = None,
) -> RangeFilter:
    """Build a range filter. Omitted boundary flags default to inclusive."""
    try:
        return RangeFilter(
            field=field,
            from_=from_,
            to=to,
            include_upper=True if include_upper is None else include_upper,
            include_lower=True if include_lower is None else include_lower,
        )
    except ValidationError as e:
        raise ConfigurationError(f"Invalid range filter on {field!r}: {e}") from e


def _new_query(model: type[M], issuer: str | None, reason: str | None, timeout: int | None) -> M:
    if issuer is None or reason is None:
        raise ConfigurationError("issuer and reason parameters are required.")
    try:
        return model(issuer=issuer, reason=reason, timeout=timeout or config.default_timeout_ms)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid search options: {e}") from e


def _updated(model: M, /, **fields: Any) -> M:
    """Copy of model with fields overwritten, validated as a whole."""
    try:
        return type(model).model_validate({**model.model_dump(), **fields})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid value for {', '.join(fields)}: {e}") from e


async def _post(
    transport: Transport,
    path: str,
    query: ContentsQuery | TagsQuery,
    decode: Callable[[str], R],
) -> R:
    logger.request(path, query.model_dump(by_alias=True, exclude_none=True, mode="json"))
    try:
        raw = await transport.post(path, query.to_wire(), query.timeout)
        result = decode(raw)
    except RequestError as e:
        logger.error(f"{path} failed: {e.status} {e.error}", exception=e)
        raise
    logger.response(result.status, len(result.values), getattr(result, "hits", None))
    if result.status != OK.status:
        raise ApiError(result.status, result.status_text or "")
    return result


class ContentsSearchRequest:
    """Contents search request (/api/)."""

    def __init__(
        self,
        issuer: str | None = None,
        reason: str | None = None,
        timeout: int | None = None,
        transport: Transport | None = None,
    ):
        self._query = _new_query(ContentsQuery, issuer, reason, timeout)
        self._transport = transport or HttpxTransport()

    @property
    def query(self) -> ContentsQuery:
        return self._query.model_copy(deep=True)

    def _set(self, **fields: Any) -> "ContentsSearchRequest":
        self._query = _updated(self._query, **fields)
        return self

    def equal_filter(self, field: str, value: FilterValue) -> EqualFilter:
        return equal_filter(field, value)

    def range_filter(
        self,
        field: str,
        from_: FilterValue | None = None,
        to: FilterValue | None = None,
        include_upper: bool | None = None,
        include_lower: bool | None = None,
    ) -> RangeFilter:
        return range_filter(field, from_, to, include_upper, include_lower)

    def service(self, name: str) -> "ContentsSearchRequest":
        return self._set(service=[name])

    def keyword(self, keyword: str) -> "ContentsSearchRequest":
        return self._set(query=keyword)

    def target(self, names: list[str]) -> "ContentsSearchRequest":
        return self._set(search=list(names))

    def filter(self, filters: list[Filter | dict[str, Any]]) -> "ContentsSearchRequest":
        return self._set(filters=list(filters))

    def sort(self, name: str, order: SortOrder | str | None = None) -> "ContentsSearchRequest":
        return self._set(sort_by=name, order=order or SortOrder.DESC)

    def select(self, names: list[str]) -> "ContentsSearchRequest":
        return self._set(join=list(names))

    def from_(self, offset: int) -> "ContentsSearchRequest":
        return self._set(from_=offset)

    def size(self, size: int) -> "ContentsSearchRequest":
        return self._set(size=size)

    def fetch(self) -> Awaitable[ContentsSearchResult]:
        """Snapshot the query now and return an awaitable for its result.

        Awaiting resolves to the normalized result or raises RequestError
        (TransportError, ApiError, or DecodeError). Builder state is kept.
        """
        return _post(self._transport, CONTENTS_PATH, self.query, decode_contents_response)


class TagsSearchRequest:
    """Related-tags search request (/api/tag/)."""

    def __init__(
        self,
        issuer: str | None = None,
        reason: str | None = None,
        timeout: int | None = None,
        transport: Transport | None = None,
    ):
        self._query = _new_query(TagsQuery, issuer, reason, timeout)
        self._transport = transport or HttpxTransport()

    @property
    def query(self) -> TagsQuery:
        return self._query.model_copy(deep=True)

    def _set(self, **fields: Any) -> "TagsSearchRequest":
        self._query = _updated(self._query, **fields)
        return self

    def service(self, name: str) -> "TagsSearchRequest":
        return self._set(service=[TAG_SERVICE_PREFIX + name])

    def keyword(self, keyword: str) -> "TagsSearchRequest":
        return self._set(query=keyword)

    def from_(self, offset: int) -> "TagsSearchRequest":
        return self._set(from_=offset)

    def size(self, size: int) -> "TagsSearchRequest":
        return self._set(size=size)

    def fetch(self) -> Awaitable[TagsSearchResult]:
        """Snapshot the query now and return an awaitable for its result."""
        return _post(self._transport, TAGS_PATH, self.query, decode_tags_response)


def create_contents_search(
    issuer: str | None = None,
    reason: str | None = None,
    timeout: int | None = None,
    transport: Transport | None = None,
) -> ContentsSearchRequest:
    return ContentsSearchRequest(issuer=issuer, reason=reason, timeout=timeout, transport=transport)


def create_tags_search(
    issuer: str | None = None,
    reason: str | None = None,
    timeout: int | None = None,
    transport: Transport | None = None,
) -> TagsSearchRequest:
    return TagsSearchRequest(issuer=issuer, reason=reason, timeout=timeout, transport=transport)
