"""Search API client: request builders, transport, response decoding, and status translation."""

from search_nico.api.decoder import decode_contents_response, decode_tags_response
from search_nico.api.request import (
    ContentsSearchRequest,
    TagsSearchRequest,
    create_contents_search,
    create_tags_search,
    equal_filter,
    range_filter,
)
from search_nico.api.status import HttpStatus, http_status
from search_nico.api.transport import HttpxTransport, Transport

__all__ = [
    "ContentsSearchRequest",
    "HttpStatus",
    "HttpxTransport",
    "TagsSearchRequest",
    "Transport",
    "create_contents_search",
    "create_tags_search",
    "decode_contents_response",
    "decode_tags_response",
    "equal_filter",
    "http_status",
    "range_filter",
]
