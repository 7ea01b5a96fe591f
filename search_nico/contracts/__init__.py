"""Search API contract v1: shared types for queries, filters, response chunks, and results."""

from search_nico.contracts.search_api_v1 import (
    ContentsQuery,
    ContentsSearchResult,
    EqualFilter,
    Filter,
    RangeFilter,
    SortOrder,
    TagsQuery,
    TagsSearchResult,
)

__all__ = [
    "ContentsQuery",
    "ContentsSearchResult",
    "EqualFilter",
    "Filter",
    "RangeFilter",
    "SortOrder",
    "TagsQuery",
    "TagsSearchResult",
]
