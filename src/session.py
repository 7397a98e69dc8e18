"""
Interactive client session

ClientSession is the single owner of all interface state: focus, selected
method, the editable URL and body text, the results text and the history.
The rendering layer reads from it and forwards the logical input events:
advance focus, advance method, submit, clear current region and quit.
"""

from enum import Enum

from .config import Config, config
from .dispatcher import RequestDispatcher
from .exceptions import InvalidBodyError, InvalidURLError
from .formatter import (
    format_elapsed,
    format_failure,
    format_history_entry,
    format_response,
    format_timeout,
)
from .history import HistoryLog
from .logging_config import get_module_logger
from .models import Failure, HistoryEntry, Outcome, Success, Timeout
from .navigation import FocusController, MethodSelector, Region
from .validation import validate_request

logger = get_module_logger("session")


class DispatchState(Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    COMPLETED = "completed"
    TIMED_OUT = "timed_out"


class ClientSession:
    """
    Interaction-handling context for one run of the client.

    Only the foreground thread calls into a session. The dispatcher's worker
    thread never touches it, so focus, method, fields and output need no locks.
    """

    def __init__(
        self,
        dispatcher: RequestDispatcher | None = None,
        history: HistoryLog | None = None,
        focus_controller: FocusController | None = None,
        method_selector: MethodSelector | None = None,
        url: str = "",
        method: str | None = None,
        body: str = "",
        config_obj: Config | None = None,
    ):
        """
        Initialize a session

        Args:
            dispatcher: Request dispatcher (optional, built from config if None)
            history: History log (optional, a fresh log if None)
            focus_controller: Region cycling (optional)
            method_selector: Method cycling (optional)
            url: Initial URL field text
            method: Initially selected method (defaults to GET)
            body: Initial request body text
            config_obj: Config object (optional, uses global config if None)
        """
        if config_obj is None:
            config_obj = config

        self.dispatcher = dispatcher or RequestDispatcher(config_obj=config_obj)
        self.history = history if history is not None else HistoryLog()
        self.focus_controller = focus_controller or FocusController()
        self.method_selector = method_selector or MethodSelector()

        self.clear_invalid_input = bool(config_obj.get("ui.clear_invalid_input", True))
        self.pretty_json = bool(config_obj.get("ui.pretty_json", False))

        self.focus = self.focus_controller.initial_state(config_obj.get("ui.initial_focus"))
        self.method_state = self.method_selector.initial_state(method)
        self.fields = {"url": url, "body": body}
        self.output: list[str] = []
        self.status_message = ""
        self.state = DispatchState.IDLE
        self.running = True

    # State accessors

    @property
    def method(self) -> str:
        return self.method_selector.label(self.method_state)

    @property
    def active_region(self) -> Region:
        return self.focus_controller.region(self.focus)

    @property
    def cursor_visible(self) -> bool:
        return self.focus.cursor_visible

    @property
    def output_text(self) -> str:
        return "".join(self.output)

    def history_lines(self) -> list[str]:
        return [format_history_entry(entry) for entry in self.history.all()]

    # Input events

    def advance_focus(self) -> Region:
        self.focus = self.focus_controller.next_state(self.focus)
        return self.active_region

    def advance_method(self) -> str:
        self.method_state = self.method_selector.next_state(self.method_state)
        logger.debug(f"Method: {self.method}")
        return self.method

    def clear_current_region(self) -> None:
        """Empty the focused text field or the results; other regions are unaffected"""
        name = self.active_region.name
        if name in self.fields:
            self.fields[name] = ""
        elif name == "output":
            self.output.clear()

    def request_quit(self) -> None:
        self.running = False

    def insert_text(self, text: str) -> bool:
        """Append text to the focused field. Returns False on read-only regions."""
        region = self.active_region
        if not region.editable or region.name not in self.fields:
            return False
        self.fields[region.name] += text
        return True

    def delete_char(self) -> bool:
        region = self.active_region
        if not region.editable or region.name not in self.fields:
            return False
        self.fields[region.name] = self.fields[region.name][:-1]
        return True

    def submit(self) -> Outcome | None:
        """
        Validate the current fields and dispatch the request.

        Returns:
            The dispatch outcome, or None when validation rejected the input
            (no network call, no history entry)
        """
        if self.state is DispatchState.DISPATCHING:
            logger.warning("Submit ignored: a request is already in flight")
            return None

        try:
            ctx = validate_request(self.fields["url"], self.method, self.fields["body"])
        except InvalidURLError as e:
            self._reject(e.field, str(e))
            return None
        except InvalidBodyError as e:
            self._reject(e.field, str(e))
            return None

        self.state = DispatchState.DISPATCHING
        self.status_message = f"Sending {ctx.method} {ctx.url} ..."
        try:
            outcome = self.dispatcher.dispatch(ctx)
        except Exception:
            # No outcome: the next submit must not look in flight
            self.state = DispatchState.IDLE
            raise

        if isinstance(outcome, Success):
            # Formatted and shown before the history entry becomes visible
            self.output.append(format_response(outcome.record, self.pretty_json))
            self.history.append(HistoryEntry.from_record(outcome.record))
            self.state = DispatchState.COMPLETED
        elif isinstance(outcome, Failure):
            self.output.append(format_failure(outcome.reason))
            self.state = DispatchState.COMPLETED
        elif isinstance(outcome, Timeout):
            self.output.append(format_timeout(outcome.timeout))
            self.state = DispatchState.TIMED_OUT

        self.status_message = format_elapsed(outcome.elapsed)
        return outcome

    def _reject(self, field: str, message: str) -> None:
        logger.info(f"Submit rejected: {message}")
        self.status_message = message
        if self.clear_invalid_input:
            self.fields[field] = ""
