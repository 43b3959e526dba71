"""Base event class.

This module defines the Event base class that marks a value as publishable
through an event aggregator. Events represent "things that happened" and are
named in past tense (e.g., OrderPlaced, SensorTripped).

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for diagnostics
    - The event's class object is its type identity (registry key)

Usage:
    >>> from dataclasses import dataclass
    >>>
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class PingReceived(Event):
    ...     id: int
    >>>
    >>> event = PingReceived(id=7)
    >>> print(event.event_id)  # Auto-generated UUID
    >>> print(event.occurred_at)  # Auto-generated timestamp
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class Event:
    """Base class for all publishable events.

    Events are immutable records carried by value. The aggregator never
    mutates or stores them beyond the duration of a dispatch call.

    All events MUST:
        1. Inherit from this base class
        2. Be frozen dataclasses (immutable after creation)
        3. Use kw_only=True (force keyword arguments for clarity)

    Dispatch matches the exact runtime type of an event. A handler registered
    for a base class does NOT receive instances of its subclasses.

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))


def is_event_type(obj: Any) -> bool:
    """Return True if obj is a class usable as an event type identity.

    Args:
        obj: Candidate type object.

    Returns:
        True when obj is a class deriving from Event.
    """
    return isinstance(obj, type) and issubclass(obj, Event)
