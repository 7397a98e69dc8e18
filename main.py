#!/usr/bin/env python3
"""
HttpTerm-Py - Interactive terminal HTTP client

Send GET/POST/DELETE/PUT requests to any URL, inspect the status line,
headers and body, and keep a running history of the session.
"""

import argparse
import os
import sys
from pathlib import Path

from src.config import ConfigurationError, config
from src.dispatcher import RequestDispatcher
from src.logging_config import get_module_logger, setup_logging
from src.models import HTTP_METHODS, Success
from src.session import ClientSession

logger = get_module_logger("main")


def run_once(session: ClientSession) -> int:
    """
    Send the pre-filled request once and print the result.

    Returns:
        Process exit code: 0 on a response, 1 on rejected input, failure or timeout
    """
    outcome = session.submit()
    if outcome is None:
        print(session.status_message, file=sys.stderr)
        return 1

    print(session.output_text, end="")
    print(session.status_message)
    return 0 if isinstance(outcome, Success) else 1


def main():
    parser = argparse.ArgumentParser(
        description="Interactive terminal HTTP client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Configuration:
  Defaults come from config/*.yaml files:
    - config/client_config.yaml → --timeout, request headers
    - config/ui_config.yaml     → clear-on-invalid, JSON pretty printing
    - config/paths_config.yaml  → --log-file

Keys (interactive mode):
  Tab      next region          Space   next method (method region)
  Ctrl-S   send request         Ctrl-U  clear current region
  Ctrl-Q   quit (also Ctrl-C)

Examples:
  # Start the interface with a URL filled in
  python main.py --url https://httpbin.org/get

  # Send one request and print the response
  python main.py --once --method POST --url https://httpbin.org/post --body '{"a": 1}'
        """,
    )

    default_timeout = config.get("client.timeouts.response_wait", 3)
    default_log_file = os.environ.get(
        "HTTPTERM_LOG_FILE", config.get("paths.log_file", "logs/httpterm.log")
    )

    parser.add_argument("--url", type=str, default="", help="Initial request URL")
    parser.add_argument(
        "--method",
        type=str.upper,
        choices=HTTP_METHODS,
        default=HTTP_METHODS[0],
        help=f"Initial HTTP method (default: {HTTP_METHODS[0]})",
    )
    parser.add_argument("--body", type=str, default="", help="Initial JSON request body")
    parser.add_argument(
        "--timeout",
        type=float,
        default=default_timeout,
        help=f"Seconds to wait for a response (default: {default_timeout})",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=default_log_file,
        help=f"Log file path (default: {default_log_file})",
    )
    parser.add_argument(
        "--once",
        action="store_true",
        help="Send the request given by --url/--method/--body, print the result and exit",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Also log to the console (with --once only)"
    )

    args = parser.parse_args()

    setup_logging(Path(args.log_file), console_output=args.verbose and args.once)

    try:
        dispatcher = RequestDispatcher(timeout=args.timeout)
    except ConfigurationError as e:
        logger.error(str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    session = ClientSession(dispatcher=dispatcher, url=args.url, method=args.method, body=args.body)

    if args.once:
        sys.exit(run_once(session))

    # curses is only needed for the interactive interface
    from src.tui import run_tui

    run_tui(session)
    sys.exit(0)


if __name__ == "__main__":
    main()
