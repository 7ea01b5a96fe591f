"""NDJSON response decoding.

A response body is a sequence of JSON objects, one per line. Each line is a
chunk tagged by `type` (stats, hits, tags), by `errid`, or both. A chunk that
gives the current decoder no usable values but carries an `errid` is reported
as an error. The decoders fold every chunk of one body into a single
normalized result; any line that cannot be decoded fails the whole body.
"""

import json
from collections import Counter
from collections.abc import Iterator
from typing import Any

from pydantic import BaseModel, ValidationError

from search_nico.api.status import OK, http_status
from search_nico.contracts.search_api_v1 import (
    ChunkType,
    ContentsSearchResult,
    ErrorChunk,
    HitsChunk,
    RawChunk,
    StatsChunk,
    TagsChunk,
    TagsSearchResult,
)
from search_nico.core.errors import DecodeError
from search_nico.core.logger import logger

ROW_ID_FIELD = "_rowid"

_CHUNK_TYPES: dict[str, type[BaseModel]] = {
    ChunkType.STATS.value: StatsChunk,
    ChunkType.HITS.value: HitsChunk,
    ChunkType.TAGS.value: TagsChunk,
}


def parse_chunk(line: str) -> RawChunk | None:
    """Decode one NDJSON line. Returns None for chunks of an unknown kind."""
    try:
        data = json.loads(line)
    except json.JSONDecodeError as e:
        raise DecodeError(f"Invalid JSON in response line: {e}") from e
    if not isinstance(data, dict):
        raise DecodeError(f"Expected a JSON object per line, got {type(data).__name__}")

    chunk_type = data.get("type")
    model = _CHUNK_TYPES.get(chunk_type) if isinstance(chunk_type, str) else None
    if model is None and data.get("errid"):
        model = ErrorChunk
    if model is None:
        return None
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Malformed {model.__name__}: {e.error_count()} validation error(s)") from e


def iter_chunks(raw_response: str) -> Iterator[RawChunk]:
    """Yield decoded chunks in line order, skipping blank and unknown lines."""
    for line in raw_response.split("\n"):
        if not line.strip():
            continue
        chunk = parse_chunk(line)
        if chunk is not None:
            yield chunk


def _strip_row_id(content: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in content.items() if k != ROW_ID_FIELD}


def decode_contents_response(raw_response: str) -> ContentsSearchResult:
    """Fold a contents-search body into {status, statusText?, hits, values}."""
    status, status_text = OK.status, None
    hits: int | None = None
    values: list[dict[str, Any]] | None = None
    counts: Counter[str] = Counter()

    for chunk in iter_chunks(raw_response):
        counts[type(chunk).__name__] += 1
        if isinstance(chunk, StatsChunk) and chunk.values:
            hits = chunk.values[0].total
        elif isinstance(chunk, HitsChunk) and chunk.values is not None:
            values = [_strip_row_id(content) for content in chunk.values]
        elif chunk.errid:
            http = http_status(chunk.errid)
            status, status_text = http.status, http.text

    logger.decoded(dict(counts))
    return ContentsSearchResult(
        status=status,
        status_text=status_text,
        hits=hits if hits is not None else 0,
        values=values if values is not None else [],
    )


def decode_tags_response(raw_response: str) -> TagsSearchResult:
    """Fold a tags-search body into {status, statusText?, values}."""
    status, status_text = OK.status, None
    values: list[str] | None = None
    counts: Counter[str] = Counter()

    for chunk in iter_chunks(raw_response):
        counts[type(chunk).__name__] += 1
        if isinstance(chunk, TagsChunk) and chunk.values is not None:
            values = [value.tag for value in chunk.values]
        elif chunk.errid:
            http = http_status(chunk.errid)
            status, status_text = http.status, http.text

    logger.decoded(dict(counts))
    return TagsSearchResult(
        status=status,
        status_text=status_text,
        values=values if values is not None else [],
    )
