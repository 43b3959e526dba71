"""In-process typed event aggregator.

Usage:
    from event_aggregator import Event, InProcessEventAggregator, event_handler
"""

from event_aggregator.core.enums import HandlerKind
from event_aggregator.core.errors import (
    EventAggregatorError,
    HandlerShapeMismatchError,
    SubscriptionLookupError,
    UnsupportedHandlerSignatureError,
)
from event_aggregator.domain.events import Event, event_handler, is_event_handler
from event_aggregator.domain.protocols import (
    AsyncEventHandler,
    EventAggregatorProtocol,
    EventHandler,
)
from event_aggregator.infrastructure.events import (
    DiscoveredHandler,
    InProcessEventAggregator,
    discover_handlers,
    subscribe_all_handlers,
    unsubscribe_all_handlers,
)

__all__ = [
    "AsyncEventHandler",
    "DiscoveredHandler",
    "Event",
    "EventAggregatorError",
    "EventAggregatorProtocol",
    "EventHandler",
    "HandlerKind",
    "HandlerShapeMismatchError",
    "InProcessEventAggregator",
    "SubscriptionLookupError",
    "UnsupportedHandlerSignatureError",
    "discover_handlers",
    "event_handler",
    "is_event_handler",
    "subscribe_all_handlers",
    "unsubscribe_all_handlers",
]
