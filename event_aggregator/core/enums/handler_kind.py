"""Handler kinds.

Every subscription is either synchronous or asynchronous; the kind selects
which registry of an aggregator holds it.
"""

from enum import Enum


class HandlerKind(str, Enum):
    """Shape of an event handler."""

    SYNC = "sync"
    ASYNC = "async"
