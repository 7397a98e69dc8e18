"""HTTP client abstraction for dependency injection and testability."""

from typing import Any

import requests


class HttpClient:
    """
    HTTP client wrapper for making requests.

    This abstraction enables:
    - Dependency injection for testing
    - Easy mocking in unit tests
    - Centralized HTTP configuration
    """

    def request(
        self,
        method: str,
        url: str,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        timeout: float | None = None,
        **kwargs: Any,
    ) -> requests.Response:
        """
        Send a request with any HTTP method.

        Args:
            method: HTTP verb (GET, POST, DELETE, PUT)
            url: URL to request
            headers: Optional HTTP headers
            body: Optional raw request body; empty bodies are not sent
            timeout: Optional request timeout in seconds
            **kwargs: Additional arguments to pass to requests.request()

        Returns:
            requests.Response object with the body read to completion
        """
        return requests.request(
            method, url, headers=headers, data=body or None, timeout=timeout, **kwargs
        )


# Default instance used when no client is injected
default_http_client = HttpClient()
