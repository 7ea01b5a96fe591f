"""search-nico: asyncio client for the niconico contents search API."""

from search_nico.api import (
    ContentsSearchRequest,
    HttpStatus,
    HttpxTransport,
    TagsSearchRequest,
    Transport,
    create_contents_search,
    create_tags_search,
    decode_contents_response,
    decode_tags_response,
    equal_filter,
    http_status,
    range_filter,
)
from search_nico.contracts import ContentsSearchResult, EqualFilter, RangeFilter, TagsSearchResult
from search_nico.core.errors import (
    ApiError,
    ConfigurationError,
    DecodeError,
    RequestError,
    SearchNicoError,
    TransportError,
)

# Short entry points: search_nico.contents(...), search_nico.tags(...)
contents = create_contents_search
tags = create_tags_search

__all__ = [
    "ApiError",
    "ConfigurationError",
    "ContentsSearchRequest",
    "ContentsSearchResult",
    "DecodeError",
    "EqualFilter",
    "HttpStatus",
    "HttpxTransport",
    "RangeFilter",
    "RequestError",
    "SearchNicoError",
    "TagsSearchRequest",
    "TagsSearchResult",
    "Transport",
    "TransportError",
    "contents",
    "create_contents_search",
    "create_tags_search",
    "decode_contents_response",
    "decode_tags_response",
    "equal_filter",
    "http_status",
    "range_filter",
    "tags",
]
