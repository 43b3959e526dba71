"""Composition root.

Factories deciding which adapters back the domain ports. Infrastructure is
imported lazily inside the factories so that importing the core never pulls
in adapters (and adapters may import from here without cycles).

Usage:
    from event_aggregator.core.container import get_event_aggregator

    aggregator = get_event_aggregator()
    aggregator.publish(PingReceived(id=7))
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from event_aggregator.core.config import EVENT_AGGREGATOR_TYPES, get_settings

if TYPE_CHECKING:
    from event_aggregator.domain.protocols import (
        EventAggregatorProtocol,
        LoggerProtocol,
    )


def get_logger() -> "LoggerProtocol":
    """Return a logger configured from settings.

    - testing/ci (or LOG_JSON=true): ConsoleAdapter with JSON rendering
    - otherwise: ConsoleAdapter with human-readable rendering

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from event_aggregator.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)


@lru_cache()
def get_event_aggregator() -> "EventAggregatorProtocol":
    """Get the application-scoped event aggregator singleton.

    Returns the adapter selected by EVENT_AGGREGATOR_TYPE:
        - 'in-process': InProcessEventAggregator

    Components that need isolation construct their own
    InProcessEventAggregator instead.

    Returns:
        Aggregator implementing EventAggregatorProtocol.

    Raises:
        ValueError: If EVENT_AGGREGATOR_TYPE names an unsupported adapter.
    """
    settings = get_settings()

    if settings.event_aggregator_type == "in-process":
        from event_aggregator.infrastructure.events.in_process_event_aggregator import (
            InProcessEventAggregator,
        )

        return InProcessEventAggregator(logger=get_logger())

    raise ValueError(
        f"Unsupported EVENT_AGGREGATOR_TYPE: {settings.event_aggregator_type}. "
        f"Supported: {', '.join(EVENT_AGGREGATOR_TYPES)}"
    )
