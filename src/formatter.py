"""
Text rendering for responses, failures and history lines
"""

import json

from .models import HistoryEntry, ResponseRecord

SEPARATOR = "-" * 21


def decode_body(body: bytes, pretty_json: bool = False) -> str:
    """
    Decode body bytes as text for display.

    Binary bodies are shown as their bytes interpreted as UTF-8 with
    replacement characters; there is no binary-safe rendering.
    """
    text = body.decode("utf-8", errors="replace")
    if not pretty_json or not text.strip():
        return text

    try:
        return json.dumps(json.loads(text), indent=4, ensure_ascii=False)
    except json.JSONDecodeError:
        return text


def format_response(record: ResponseRecord, pretty_json: bool = False) -> str:
    """
    Render a response record in the fixed display layout.

    Layout:
        {method} {path} {protocol}
        Status {status}
        <blank>
        {name} => {value}      (one line per header value)
        <blank>
        body
         {body}
        ---------------------

    Args:
        record: Completed response
        pretty_json: Re-indent JSON bodies (off by default)

    Returns:
        Display text ending with a newline
    """
    lines = [
        f"{record.method} {record.path} {record.protocol}",
        f"Status {record.status} ",
        "",
    ]
    lines.extend(f"{name} => {value}" for name, value in record.headers)
    lines.append("")
    lines.append(f"body \n {decode_body(record.body, pretty_json)}")
    lines.append(SEPARATOR)
    return "\n".join(lines) + "\n"


def format_failure(reason: str) -> str:
    """Render a transport failure in place of a response"""
    return f"Error: {reason}\n{SEPARATOR}\n"


def format_timeout(timeout: float) -> str:
    """Fixed message shown when the bounded wait expires"""
    return f"Request timed out after {timeout:g} seconds\n{SEPARATOR}\n"


def format_history_entry(entry: HistoryEntry) -> str:
    return f"{entry.method} {entry.url} {entry.status}"


def format_elapsed(elapsed: float) -> str:
    return f"Time: {elapsed:.6f} s"
