"""One-shot interface: run a single search, print the JSON result, exit."""

from __future__ import annotations

import asyncio
import json

from search_nico.api.request import create_contents_search, create_tags_search
from search_nico.core.config import config
from search_nico.core.errors import ConfigurationError, RequestError

CONTENTS_TARGET = ["title", "description", "tags"]
CONTENTS_SELECT = ["cmsid", "title", "description", "view_counter", "mylist_counter"]


def _print_json(data: dict) -> None:
    print(json.dumps(data, ensure_ascii=False, indent=2))


async def run_contents(keyword: str, size: int = 10) -> dict:
    cs = create_contents_search(issuer=config.issuer, reason=config.reason)
    result = await (
        cs.service("video")
        .keyword(keyword)
        .target(CONTENTS_TARGET)
        .sort("view_counter")
        .select(CONTENTS_SELECT)
        .size(size)
        .fetch()
    )
    return result.to_dict()


async def run_tags(keyword: str, size: int = 10) -> dict:
    ts = create_tags_search(issuer=config.issuer, reason=config.reason)
    result = await ts.service("video").keyword(keyword).size(size).fetch()
    return result.to_dict()


async def run_oneshot(mode: str, query: str) -> int:
    text = (query or "").strip()
    if not text:
        print("Error: query must not be empty")
        return 2

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"Error: {error}")
        return 2

    runners = {"contents": run_contents, "tags": run_tags}
    runner = runners.get(mode)
    if runner is None:
        print(f"Error: unknown search mode {mode!r}")
        return 2

    try:
        _print_json(await runner(text))
        return 0
    except ConfigurationError as e:
        print(f"Error: {e}")
        return 2
    except RequestError as e:
        _print_json(e.to_dict())
        return 1


def main(mode: str, query: str) -> int:
    return asyncio.run(run_oneshot(mode=mode, query=query))
