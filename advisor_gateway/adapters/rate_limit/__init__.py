"""Request throttle adapters.

A small abstraction so the gateway starts with an in-memory store and can
move to a shared store later without changing the API layer.
"""

from advisor_gateway.adapters.rate_limit.base import (
    AbstractRequestThrottle,
    ThrottleDecision,
    ThrottleEntry,
)
from advisor_gateway.adapters.rate_limit.factory import create_request_throttle
from advisor_gateway.adapters.rate_limit.in_memory import InMemoryRequestThrottle

__all__ = [
    "AbstractRequestThrottle",
    "InMemoryRequestThrottle",
    "ThrottleDecision",
    "ThrottleEntry",
    "create_request_throttle",
]
