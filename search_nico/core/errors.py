"""Error taxonomy for search requests."""

from typing import Any

DEFAULT_ERROR_DESCRIPTION = "An error has occurred while requesting api"


class SearchNicoError(Exception):
    """Base exception for all search-nico errors."""


class ConfigurationError(SearchNicoError):
    """Builder was constructed or configured with invalid parameters."""


class RequestError(SearchNicoError):
    """A fetch failed. Carries the HTTP-like status surfaced to the caller."""

    def __init__(
        self,
        status: int,
        error: str,
        error_description: str = DEFAULT_ERROR_DESCRIPTION,
    ):
        super().__init__(f"{status} {error}: {error_description}")
        self.status = status
        self.error = error
        self.error_description = error_description

    def to_dict(self) -> dict[str, Any]:
        return {
            "status": self.status,
            "error": self.error,
            "error_description": self.error_description,
        }


class TransportError(RequestError):
    """Network failure or non-200 HTTP status."""


class ApiError(RequestError):
    """The response body carried an `errid` chunk."""


class DecodeError(RequestError):
    """The response body could not be decoded."""

    def __init__(self, error_description: str):
        super().__init__(500, "Internal Server Error", error_description)
