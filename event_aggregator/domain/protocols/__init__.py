"""Domain ports (structural protocols).

Usage:
    from event_aggregator.domain.protocols import EventAggregatorProtocol, LoggerProtocol
"""

from event_aggregator.domain.protocols.event_aggregator_protocol import (
    AsyncEventHandler,
    EventAggregatorProtocol,
    EventHandler,
)
from event_aggregator.domain.protocols.logger_protocol import LoggerProtocol

__all__ = [
    "AsyncEventHandler",
    "EventAggregatorProtocol",
    "EventHandler",
    "LoggerProtocol",
]
