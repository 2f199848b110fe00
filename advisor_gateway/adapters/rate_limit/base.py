"""Request throttle interfaces.

The HTTP layer depends on this abstraction rather than a concrete store, so a
shared-cache backend can replace the per-process one without touching routes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass
class ThrottleEntry:
    """Per-client window state.

    Attributes:
        count: Requests admitted in the current window (>= 1).
        reset_at: Epoch milliseconds after which the window is expired.
    """

    count: int
    reset_at: float


@dataclass(frozen=True)
class ThrottleDecision:
    """Outcome of a single throttle check.

    Attributes:
        allowed: True when the request may proceed (Allowed), False when Denied.
        limit: Max requests per window.
        remaining: Requests left in the current window (0 when denied).
        reset_at: Epoch milliseconds when the current window expires.
        retry_after_seconds: Suggested wait in whole seconds when denied.
    """

    allowed: bool
    limit: int
    remaining: int
    reset_at: float
    retry_after_seconds: int | None


class AbstractRequestThrottle(ABC):
    """Interface for per-client request throttles."""

    @abstractmethod
    def check(self, client_key: str) -> ThrottleDecision:
        """Admit or deny one request for ``client_key``.

        Inspection and mutation happen as one atomic step: an allowed request
        is already counted when this returns. Never raises.
        """
        raise NotImplementedError

    @abstractmethod
    def sweep(self) -> int:
        """Remove expired entries and return how many were removed."""
        raise NotImplementedError

    @abstractmethod
    def get_entry(self, client_key: str) -> ThrottleEntry | None:
        """Return a copy of the stored entry, or None."""
        raise NotImplementedError

    @abstractmethod
    def reset(self) -> None:
        """Drop all stored entries."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
