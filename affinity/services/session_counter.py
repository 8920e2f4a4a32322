"""In-memory per-session request counters.

One store lives on each application instance and is discarded with the
process.  Nothing is persisted, replicated or evicted: this is the backing
state for a session-affinity demo, where a client that keeps landing on the
same backend sees its count climb 1, 2, 3, …
"""
from __future__ import annotations

import threading


class SessionCounterStore:
    """Maps session identifiers to how many times they have been counted.

    Identifiers are opaque: the empty string is a key like any other and
    no case folding or trimming is applied.  Route handlers run on the
    server's worker threads, so every read-modify-write happens under one
    lock.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counts: dict[str, int] = {}

    def increment_and_get(self, session_id: str) -> int:
        """Count one more hit for ``session_id`` and return the new total.

        A never-seen identifier starts at 1.  For a single identifier the
        values handed out across all callers are exactly 1..n, with no
        duplicates and no lost increments.
        """
        with self._lock:
            count = self._counts.get(session_id, 0) + 1
            self._counts[session_id] = count
        return count

    def get(self, session_id: str) -> int:
        """Current total for ``session_id`` (0 if unseen).  Does not count."""
        with self._lock:
            return self._counts.get(session_id, 0)

    def __len__(self) -> int:
        with self._lock:
            return len(self._counts)
