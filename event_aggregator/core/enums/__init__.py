"""Core enums package.

Usage:
    from event_aggregator.core.enums import Environment, HandlerKind
"""

from event_aggregator.core.enums.environment import Environment
from event_aggregator.core.enums.handler_kind import HandlerKind

__all__ = ["Environment", "HandlerKind"]
