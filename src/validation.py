"""
Input validation for user-entered request parameters

Pure checks only: nothing here touches the network, the history or the
interface. Presentation policy on failure (clearing the field, showing a
message) belongs to the caller.
"""

import json
from urllib.parse import urlparse

from .exceptions import InvalidBodyError, InvalidURLError
from .models import BODY_METHODS, HTTP_METHODS, RequestContext


def validate_url(url_text: str) -> str:
    """
    Check that url_text is an absolute request URI.

    Args:
        url_text: Raw text from the URL field

    Returns:
        The URL with surrounding whitespace removed

    Raises:
        InvalidURLError: If scheme or host is missing, or the URL is malformed
    """
    url = (url_text or "").strip()
    if not url:
        raise InvalidURLError(url, "URL is empty")

    if any(ch.isspace() for ch in url):
        raise InvalidURLError(url, "URL contains whitespace")

    try:
        parsed = urlparse(url)
        # Accessing port validates it
        parsed.port
    except ValueError as e:
        raise InvalidURLError(url, str(e)) from e

    if not parsed.scheme:
        raise InvalidURLError(url, "missing scheme")
    if not parsed.hostname:
        raise InvalidURLError(url, "missing host")

    return url


def _reject_constant(name: str):
    # NaN, Infinity and -Infinity are Python extensions, not JSON
    raise ValueError(f"{name} is not valid JSON")


def validate_body(method: str, body_text: str) -> bytes:
    """
    Check the request body for body-bearing methods.

    POST and PUT bodies must be valid JSON (any JSON value). GET and DELETE
    bodies are ignored regardless of content.

    Returns:
        The body as UTF-8 bytes, or b"" when the method carries no body

    Raises:
        InvalidBodyError: If a POST/PUT body is not valid JSON
    """
    if method not in BODY_METHODS:
        return b""

    try:
        json.loads(body_text or "", parse_constant=_reject_constant)
    except ValueError as e:
        raise InvalidBodyError(method, str(e), body_text) from e
    except RecursionError as e:
        raise InvalidBodyError(method, "nesting too deep", body_text) from e

    return body_text.encode("utf-8")


def validate_request(url_text: str, method: str, body_text: str) -> RequestContext:
    """
    Validate all request fields and build a RequestContext.

    Raises:
        InvalidURLError: See validate_url
        InvalidBodyError: See validate_body
        ValueError: If method is not one of the supported verbs
    """
    method = method.upper()
    if method not in HTTP_METHODS:
        raise ValueError(f"Unsupported method: {method}")

    url = validate_url(url_text)
    body = validate_body(method, body_text)
    return RequestContext(url=url, method=method, body=body)
