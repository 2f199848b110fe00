"""In-memory fixed-window request throttle.

Notes:
- Per-process only: running multiple workers multiplies the effective limit.
- Thread-safe: one lock guards every read-modify-write and the sweep.
- A window opens on a client's first request and expires strictly after
  ``reset_at``; a request landing exactly on ``reset_at`` still counts
  against the old window.
"""

from __future__ import annotations

import math
import threading
import time
from dataclasses import replace
from typing import Callable

from advisor_gateway.adapters.rate_limit.base import (
    AbstractRequestThrottle,
    ThrottleDecision,
    ThrottleEntry,
)


def _epoch_ms() -> float:
    return time.time() * 1000


class InMemoryRequestThrottle(AbstractRequestThrottle):
    """Fixed-window throttle keyed by client (usually the remote address).

    Important:
        State lives in this process. Behind several workers each worker
        enforces its own independent limit.
    """

    def __init__(
        self,
        *,
        max_requests: int = 500,
        window_ms: int = 900_000,
        clock: Callable[[], float] = _epoch_ms,
    ) -> None:
        """Initialize the throttle.

        Args:
            max_requests: Requests admitted per client per window.
            window_ms: Window length in milliseconds.
            clock: Time source returning epoch milliseconds.

        Raises:
            ValueError: If max_requests or window_ms are not positive.
        """
        if max_requests < 1:
            raise ValueError("max_requests must be >= 1")
        if window_ms < 1:
            raise ValueError("window_ms must be >= 1")

        self._max_requests = max_requests
        self._window_ms = window_ms
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, ThrottleEntry] = {}

    @property
    def max_requests(self) -> int:
        return self._max_requests

    @property
    def window_ms(self) -> int:
        return self._window_ms

    def _allowed(self, entry: ThrottleEntry) -> ThrottleDecision:
        return ThrottleDecision(
            allowed=True,
            limit=self._max_requests,
            remaining=self._max_requests - entry.count,
            reset_at=entry.reset_at,
            retry_after_seconds=None,
        )

    def _denied(self, entry: ThrottleEntry, now: float) -> ThrottleDecision:
        retry_after = max(0, math.ceil((entry.reset_at - now) / 1000))
        return ThrottleDecision(
            allowed=False,
            limit=self._max_requests,
            remaining=0,
            reset_at=entry.reset_at,
            retry_after_seconds=retry_after,
        )

    def check(self, client_key: str) -> ThrottleDecision:
        """Admit or deny one request for ``client_key``.

        Args:
            client_key: Client identifier (e.g. remote IP address).

        Returns:
            ThrottleDecision; denied requests leave the entry untouched.
        """
        with self._lock:
            now = self._clock()
            entry = self._entries.get(client_key)

            if entry is None or now > entry.reset_at:
                entry = ThrottleEntry(count=1, reset_at=now + self._window_ms)
                self._entries[client_key] = entry
                return self._allowed(entry)

            if entry.count < self._max_requests:
                entry.count += 1
                return self._allowed(entry)

            return self._denied(entry, now)

    def sweep(self) -> int:
        """Remove every entry whose window has expired.

        Uses the same strict comparison as :meth:`check`, under the same lock.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            now = self._clock()
            expired = [key for key, entry in self._entries.items() if now > entry.reset_at]
            for key in expired:
                del self._entries[key]
            return len(expired)

    def get_entry(self, client_key: str) -> ThrottleEntry | None:
        with self._lock:
            entry = self._entries.get(client_key)
            return replace(entry) if entry is not None else None

    def reset(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
