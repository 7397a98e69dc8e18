"""
Request dispatch with a bounded wait

The network call runs on a short-lived daemon thread. The caller blocks on a
single-slot queue for at most `timeout` seconds. When the wait expires the
call is not cancelled: the worker keeps running until the transport timeout
and its result lands in a queue nobody reads again.
"""

import queue
import threading
import time

import requests

from .config import Config, ConfigurationError, config
from .exceptions import TransportError
from .http_client import HttpClient, default_http_client
from .logging_config import get_module_logger
from .models import Failure, Outcome, RequestContext, ResponseRecord, Success, Timeout

logger = get_module_logger("dispatcher")

DEFAULT_RESPONSE_WAIT = 3.0
DEFAULT_TRANSPORT_TIMEOUT = 30.0
DEFAULT_HEADERS = {"Content-Type": "application/json"}


class RequestDispatcher:
    """
    Runs one HTTP request off the interactive thread and races it against a timeout.

    Every call to dispatch() returns exactly one of Success, Failure or Timeout,
    and logs the elapsed wall-clock time whichever branch is taken.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        timeout: float | None = None,
        transport_timeout: float | None = None,
        headers: dict[str, str] | None = None,
        config_obj: Config | None = None,
    ):
        """
        Initialize the dispatcher

        Args:
            http_client: HTTP client for making requests (optional)
            timeout: Seconds to wait for a result. Defaults to config value.
            transport_timeout: Seconds passed to the HTTP library. Defaults to config value.
            headers: Headers added to every request. Defaults to config value.
            config_obj: Config object (optional, uses global config if None)

        Raises:
            ConfigurationError: If a timeout is not a positive number
        """
        if config_obj is None:
            config_obj = config

        self.http_client = http_client or default_http_client

        if timeout is None:
            timeout = config_obj.get("client.timeouts.response_wait", DEFAULT_RESPONSE_WAIT)
        if transport_timeout is None:
            transport_timeout = config_obj.get(
                "client.timeouts.transport", DEFAULT_TRANSPORT_TIMEOUT
            )
        if headers is None:
            headers = config_obj.get("client.headers", DEFAULT_HEADERS)

        self.timeout = _positive(timeout, "client.timeouts.response_wait")
        self.transport_timeout = _positive(transport_timeout, "client.timeouts.transport")
        self.headers = dict(headers)
        self.abandoned = 0

    def dispatch(self, ctx: RequestContext) -> Outcome:
        """
        Send the request and wait up to self.timeout seconds for its result.

        Args:
            ctx: Validated request

        Returns:
            Success with the response record, Failure with a reason, or Timeout
        """
        start = time.perf_counter()
        outcome: Outcome | None = None
        try:
            outcome = self._run_with_deadline(ctx, start)
            return outcome
        finally:
            elapsed = time.perf_counter() - start
            kind = type(outcome).__name__ if outcome is not None else "error"
            logger.info(f"{ctx.method} {ctx.url} -> {kind} in {elapsed:.6f} s")

    def _run_with_deadline(self, ctx: RequestContext, start: float) -> Outcome:
        # Capacity one: the worker's single put never blocks, even if nobody reads it
        results: queue.Queue = queue.Queue(maxsize=1)
        worker = threading.Thread(
            target=self._perform,
            args=(ctx, results),
            name=f"dispatch-{ctx.method}",
            daemon=True,
        )
        worker.start()

        try:
            kind, payload = results.get(timeout=self.timeout)
        except queue.Empty:
            self.abandoned += 1
            logger.warning(
                f"{ctx.method} {ctx.url} timed out after {self.timeout:g} s; "
                f"background request abandoned ({self.abandoned} so far)"
            )
            return Timeout(timeout=self.timeout, elapsed=time.perf_counter() - start)

        elapsed = time.perf_counter() - start
        if kind == "success":
            return Success(record=payload, elapsed=elapsed)
        return Failure(reason=payload, elapsed=elapsed)

    def _perform(self, ctx: RequestContext, results: queue.Queue) -> None:
        """Worker body: perform the round trip and hand back one result"""
        try:
            response = self.http_client.request(
                ctx.method,
                ctx.url,
                headers=self.headers,
                body=ctx.body,
                timeout=self.transport_timeout,
            )
            result = ("success", ResponseRecord.from_response(response))
        except TransportError as e:
            logger.warning(f"{ctx.method} {ctx.url} failed: {e.reason}")
            result = ("failure", e.reason)
        except requests.exceptions.RequestException as e:
            logger.warning(f"{ctx.method} {ctx.url} failed: {e}")
            result = ("failure", f"{type(e).__name__}: {e}")
        except Exception as e:
            # The worker always hands back exactly one result
            logger.exception(f"Unexpected error while requesting {ctx.url}")
            result = ("failure", f"Unexpected error: {e}")

        results.put_nowait(result)


def _positive(value, config_key: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"expected a number, got {value!r}", config_key) from None
    if number <= 0:
        raise ConfigurationError(f"must be positive, got {value!r}", config_key)
    return number
