"""
In-memory request history for the lifetime of the process
"""

from threading import Lock

from .logging_config import get_module_logger
from .models import HistoryEntry

logger = get_module_logger("history")


class HistoryLog:
    """
    Append-only, insertion-ordered log of completed requests.

    No capacity bound, no deduplication and no persistence. Appends and
    reads are serialized with a lock so a display read never sees a
    half-written list.
    """

    def __init__(self):
        self._entries: list[HistoryEntry] = []
        self._lock = Lock()

    def append(self, entry: HistoryEntry) -> None:
        with self._lock:
            self._entries.append(entry)
        logger.debug(f"History +1: {entry.method} {entry.url} {entry.status}")

    def all(self) -> list[HistoryEntry]:
        """Snapshot of all entries, oldest first"""
        with self._lock:
            return list(self._entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
