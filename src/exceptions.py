"""
Custom exceptions for HttpTerm-Py
"""


class HttpTermError(Exception):
    """Base exception for all HttpTerm errors"""

    pass


class RequestValidationError(HttpTermError):
    """
    Raised when user-entered request parameters are rejected before dispatch.

    The caller must abort the submit without side effects: no network call
    is made and no history entry is written.
    """

    def __init__(self, message: str, field: str, value: str | None = None):
        self.field = field
        self.value = value
        super().__init__(message)


class InvalidURLError(RequestValidationError):
    """URL text is not an absolute request URI (scheme + host)"""

    def __init__(self, url_text: str, reason: str | None = None):
        self.reason = reason
        message = f"Invalid URL '{url_text}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, field="url", value=url_text)


class InvalidBodyError(RequestValidationError):
    """Request body is not valid JSON for a body-bearing method"""

    def __init__(self, method: str, reason: str, body_text: str | None = None):
        self.method = method
        self.reason = reason
        super().__init__(f"Invalid JSON body for {method}: {reason}", field="body", value=body_text)


class TransportError(HttpTermError):
    """
    Raised when the HTTP round trip cannot produce a complete response.

    This covers:
    - Connection refused, DNS and TLS failures
    - Errors raised by the HTTP client itself
    - Response bodies that cannot be read to completion

    All of these collapse into one kind carrying a human-readable reason.
    """

    def __init__(self, reason: str, url: str | None = None):
        self.reason = reason
        self.url = url
        super().__init__(reason)


class ConfigurationError(HttpTermError):
    """
    Raised when required configuration values are missing or invalid.

    Missing required values are caught early rather than silently falling
    back to hardcoded defaults.
    """

    def __init__(self, message: str, config_key: str | None = None):
        self.config_key = config_key
        if config_key:
            super().__init__(f"Configuration error for '{config_key}': {message}")
        else:
            super().__init__(f"Configuration error: {message}")
