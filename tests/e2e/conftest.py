import os

import pytest


@pytest.fixture
def credentials() -> dict[str, str]:
    """issuer/reason for live calls; falls back to the values in .env.example."""
    return {
        "issuer": os.getenv("SEARCH_NICO_ISSUER") or "search-nico",
        "reason": os.getenv("SEARCH_NICO_REASON") or "html5jc",
    }
