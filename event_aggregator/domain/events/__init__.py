"""Event capability and handler tag.

Usage:
    from event_aggregator.domain.events import Event, event_handler
"""

from event_aggregator.domain.events.base_event import Event, is_event_type
from event_aggregator.domain.events.handler_tag import event_handler, is_event_handler

__all__ = [
    "Event",
    "is_event_type",
    "event_handler",
    "is_event_handler",
]
