"""Translation of API status/error codes into HTTP-like statuses."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HttpStatus:
    status: int
    text: str


OK = HttpStatus(200, "OK")
INTERNAL_SERVER_ERROR = HttpStatus(500, "Internal Server Error")

_STATUS_MAP: dict[int, HttpStatus] = {
    200: OK,
    300: HttpStatus(400, "Bad Request"),
    101: HttpStatus(503, "Service Unavailable"),
    1001: HttpStatus(504, "Gateway Timeout"),
}


def http_status(api_code: Any) -> HttpStatus:
    """Map an API code (int or numeric string) to its HTTP-like status.

    Unknown or non-numeric codes map to 500 Internal Server Error.
    """
    if isinstance(api_code, bool):
        return INTERNAL_SERVER_ERROR
    try:
        code = int(api_code)
    except (TypeError, ValueError, OverflowError):
        return INTERNAL_SERVER_ERROR
    if isinstance(api_code, float) and api_code != code:
        return INTERNAL_SERVER_ERROR
    return _STATUS_MAP.get(code, INTERNAL_SERVER_ERROR)
