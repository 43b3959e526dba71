"""Thread-safe registry of handler records.

One registry holds records of a single variant (sync or async). Every read
and write happens under the registry's own lock, and the lock is held only
long enough to copy or mutate the record list. Handlers are never invoked
while the lock is held: dispatch works on a snapshot, so a handler may
subscribe, unsubscribe or publish reentrantly without deadlocking.
"""

import threading
from collections.abc import Callable
from typing import Any, Generic, TypeVar

from event_aggregator.domain.events.base_event import Event
from event_aggregator.infrastructure.events.handler_record import (
    AsyncEventHandlerRecord,
    EventHandlerRecord,
)

RecordT = TypeVar("RecordT", EventHandlerRecord, AsyncEventHandlerRecord)


class HandlerRegistry(Generic[RecordT]):
    """Ordered collection of handler records guarded by one lock.

    Invariant: no two records hold equal handlers. Iteration order is
    insertion order.
    """

    def __init__(self) -> None:
        self._records: list[RecordT] = []
        self._lock = threading.Lock()

    def add(self, record: RecordT) -> bool:
        """Append record unless an equal handler is already registered.

        Returns:
            True if the record was added, False for an ignored duplicate.
        """
        with self._lock:
            if any(existing.matches(record.handler) for existing in self._records):
                return False
            self._records.append(record)
            return True

    def remove(self, handler: Callable[..., Any]) -> int:
        """Remove every record whose handler equals handler.

        Returns:
            Number of records removed (0 when handler was not registered).
        """
        with self._lock:
            kept = [record for record in self._records if not record.matches(handler)]
            removed = len(self._records) - len(kept)
            self._records = kept
            return removed

    def snapshot_for(self, event_type: type[Event]) -> tuple[RecordT, ...]:
        """Copy of the records registered for exactly event_type."""
        with self._lock:
            return tuple(
                record for record in self._records if record.event_type is event_type
            )

    def contains(self, handler: Callable[..., Any]) -> bool:
        with self._lock:
            return any(record.matches(handler) for record in self._records)

    def count(self, event_type: type[Event] | None = None) -> int:
        """Number of records, optionally only those for event_type."""
        with self._lock:
            if event_type is None:
                return len(self._records)
            return sum(1 for record in self._records if record.event_type is event_type)

    def event_types(self) -> list[type[Event]]:
        """Distinct registered event types, in first-registration order."""
        with self._lock:
            return list(dict.fromkeys(record.event_type for record in self._records))

    def __len__(self) -> int:
        return self.count()
