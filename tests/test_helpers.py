"""
Shared test utilities and mock factories

This module provides reusable mock factories and helpers to reduce code duplication
across test files.
"""

import threading
import time
from unittest.mock import Mock

from urllib3 import HTTPHeaderDict

from src.config import Config


def create_mock_response(
    method="GET",
    url="http://example.com/ok",
    status_code=200,
    reason="OK",
    version=11,
    headers=None,
    body=b"hi",
):
    """
    Factory for requests.Response-like mocks

    Args:
        method: Request method echoed by the transport
        url: Final resolved URL
        status_code: HTTP status code
        reason: Reason phrase
        version: urllib3 protocol version (11 = HTTP/1.1)
        headers: List of (name, value) pairs; repeated names allowed
        body: Response body bytes

    Returns:
        Mock with the attributes ResponseRecord.from_response reads
    """
    raw_headers = HTTPHeaderDict()
    for name, value in headers if headers is not None else [("Content-Type", "text/plain")]:
        raw_headers.add(name, value)

    response = Mock()
    response.request.method = method
    response.url = url
    response.status_code = status_code
    response.reason = reason
    response.raw.version = version
    response.raw.headers = raw_headers
    response.headers = dict(raw_headers.items())
    response.content = body
    return response


def create_mock_http_client(response=None, side_effect=None):
    """
    Factory for creating mock HTTP clients

    Args:
        response: Response returned by request() (defaults to create_mock_response())
        side_effect: Exception or callable used instead of a fixed response

    Returns:
        Mock HTTP client
    """
    mock_client = Mock()
    if side_effect is not None:
        mock_client.request.side_effect = side_effect
    else:
        mock_client.request.return_value = response or create_mock_response()
    return mock_client


class BlockingHttpClient:
    """
    Transport stub that holds the request until released.

    Stands in for a slow server: the dispatcher times out while the stub
    is blocked, then the test releases it and checks nothing leaks through.
    """

    def __init__(self, response=None, delay=None):
        self.response = response or create_mock_response()
        self.delay = delay
        self.release = threading.Event()
        self.finished = threading.Event()
        self.calls = 0

    def request(self, method, url, headers=None, body=None, timeout=None, **kwargs):
        self.calls += 1
        try:
            if self.delay is not None:
                time.sleep(self.delay)
            else:
                self.release.wait(5)
            return self.response
        finally:
            self.finished.set()


def create_test_config(**overrides):
    """
    Factory for creating test configuration

    Args:
        **overrides: Top-level sections to replace (client, ui, paths)

    Returns:
        Config built from a dictionary with sensible test defaults
    """
    config_dict = {
        "client": {
            "timeouts": {"response_wait": 3, "transport": 30},
            "headers": {"Content-Type": "application/json"},
        },
        "ui": {"clear_invalid_input": True, "pretty_json": False, "initial_focus": "url"},
        "paths": {"log_file": "logs/test.log"},
    }
    config_dict.update(overrides)
    return Config(config_dict)
