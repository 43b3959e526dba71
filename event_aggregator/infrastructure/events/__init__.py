"""Event aggregator adapters.

Usage:
    from event_aggregator.infrastructure.events import (
        InProcessEventAggregator,
        subscribe_all_handlers,
    )
"""

from event_aggregator.infrastructure.events.auto_wiring import (
    DiscoveredHandler,
    discover_handlers,
    subscribe_all_handlers,
    unsubscribe_all_handlers,
)
from event_aggregator.infrastructure.events.handler_record import (
    AsyncEventHandlerRecord,
    EventHandlerRecord,
)
from event_aggregator.infrastructure.events.handler_registry import HandlerRegistry
from event_aggregator.infrastructure.events.in_process_event_aggregator import (
    InProcessEventAggregator,
)

__all__ = [
    "AsyncEventHandlerRecord",
    "DiscoveredHandler",
    "EventHandlerRecord",
    "HandlerRegistry",
    "InProcessEventAggregator",
    "discover_handlers",
    "subscribe_all_handlers",
    "unsubscribe_all_handlers",
]
