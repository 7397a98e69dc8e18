"""
Request, response and history records shared across the client
"""

from dataclasses import dataclass
from urllib.parse import urlparse

import requests

from .exceptions import TransportError

HTTP_METHODS = ("GET", "POST", "DELETE", "PUT")

# Methods whose body text must be valid JSON
BODY_METHODS = frozenset({"POST", "PUT"})

# urllib3 reports the protocol version as an integer
_PROTOCOL_VERSIONS = {
    9: "HTTP/0.9",
    10: "HTTP/1.0",
    11: "HTTP/1.1",
    20: "HTTP/2",
    30: "HTTP/3",
}


@dataclass(frozen=True)
class RequestContext:
    """A validated request, built fresh for every submit"""

    url: str
    method: str
    body: bytes = b""


@dataclass(frozen=True)
class ResponseRecord:
    """
    One completed HTTP round trip.

    headers is an ordered sequence of (name, value) pairs. Repeated header
    names stay as separate pairs and values under one name keep their order.
    """

    method: str
    url: str
    path: str
    protocol: str
    headers: tuple[tuple[str, str], ...]
    status: str
    body: bytes

    @classmethod
    def from_response(cls, response: requests.Response) -> "ResponseRecord":
        """
        Build a record from a transport response.

        Raises:
            TransportError: If the body cannot be read to completion
        """
        try:
            body = response.content
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Could not read response body: {e}", url=response.url) from e

        status = f"{response.status_code} {response.reason or ''}".strip()
        return cls(
            method=response.request.method,
            url=response.url,
            path=urlparse(response.url).path or "/",
            protocol=_protocol_of(response),
            headers=_header_pairs(response),
            status=status,
            body=body or b"",
        )


@dataclass(frozen=True)
class HistoryEntry:
    """One line of request history"""

    method: str
    url: str
    status: str

    @classmethod
    def from_record(cls, record: ResponseRecord) -> "HistoryEntry":
        return cls(method=record.method, url=record.url, status=record.status)


@dataclass(frozen=True)
class Success:
    """Dispatch completed with a response before the timeout"""

    record: ResponseRecord
    elapsed: float


@dataclass(frozen=True)
class Failure:
    """Dispatch completed with a transport-level error"""

    reason: str
    elapsed: float


@dataclass(frozen=True)
class Timeout:
    """No outcome arrived within the bounded wait"""

    timeout: float
    elapsed: float


Outcome = Success | Failure | Timeout


def _protocol_of(response: requests.Response) -> str:
    version = getattr(response.raw, "version", None)
    return _PROTOCOL_VERSIONS.get(version, "HTTP/1.1")


def _header_pairs(response: requests.Response) -> tuple[tuple[str, str], ...]:
    """
    Flatten response headers into (name, value) pairs without merging duplicates.

    requests folds repeated headers into one comma-joined value, so the raw
    urllib3 header dict is preferred when it is available.
    """
    raw_headers = getattr(response.raw, "headers", None)
    if raw_headers is not None and hasattr(raw_headers, "getlist"):
        return tuple((name, value) for name in raw_headers for value in raw_headers.getlist(name))
    return tuple(response.headers.items())
