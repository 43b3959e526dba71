"""Core errors package.

Usage:
    from event_aggregator.core.errors import HandlerShapeMismatchError
"""

from event_aggregator.core.errors.aggregator_errors import (
    EventAggregatorError,
    HandlerShapeMismatchError,
    SubscriptionLookupError,
    UnsupportedHandlerSignatureError,
)

__all__ = [
    "EventAggregatorError",
    "HandlerShapeMismatchError",
    "SubscriptionLookupError",
    "UnsupportedHandlerSignatureError",
]
