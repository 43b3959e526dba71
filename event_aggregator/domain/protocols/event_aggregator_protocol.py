"""Event aggregator protocol (port).

This module defines the EventAggregatorProtocol interface that aggregator
implementations satisfy. The domain defines the port; infrastructure provides
adapters (currently InProcessEventAggregator).

Handlers come in two shapes that live in separate registries:
    - Sync handlers: ``def handler(event: E) -> None``
    - Async handlers: ``async def handler(event: E) -> None``

A handler subscribed through the sync methods is invisible to
publish_async() and vice versa, even for the same event type.

Usage:
    >>> aggregator = InProcessEventAggregator()
    >>>
    >>> def on_ping(event: PingReceived) -> None:
    ...     print(event.id)
    >>>
    >>> aggregator.subscribe(PingReceived, on_ping)
    >>> aggregator.publish(PingReceived(id=7))
    >>>
    >>> async def on_ping_async(event: PingReceived) -> None:
    ...     await notify(event.id)
    >>>
    >>> aggregator.subscribe_async(PingReceived, on_ping_async)
    >>> await aggregator.publish_async(PingReceived(id=9))
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol, TypeVar

from event_aggregator.domain.events.base_event import Event

E = TypeVar("E", bound=Event)

EventHandler = Callable[[E], None]
"""Synchronous handler: accepts one event, returns nothing."""

AsyncEventHandler = Callable[[E], Awaitable[None]]
"""Asynchronous handler: accepts one event, returns an awaitable."""


class EventAggregatorProtocol(Protocol):
    """Protocol for event aggregator implementations.

    Key Requirements:
        1. **Exact type routing**: Handlers only receive events whose runtime
           type equals the subscribed event type (no subclass matching).
        2. **Idempotent subscribe**: Subscribing an equal handler twice keeps
           one subscription.
        3. **Errors propagate**: Handler exceptions reach the publisher.
        4. **Isolated registries**: Sync and async subscriptions never mix.
    """

    def subscribe(self, event_type: type[E], handler: EventHandler[E]) -> None:
        """Register a synchronous handler for an event type.

        Raises:
            HandlerShapeMismatchError: If handler does not accept exactly
                one event_type argument.
        """
        ...

    def subscribe_async(
        self, event_type: type[E], handler: AsyncEventHandler[E]
    ) -> None:
        """Register an asynchronous handler for an event type."""
        ...

    def unsubscribe(self, event_type: type[E], handler: EventHandler[E]) -> None:
        """Remove a synchronous handler. No-op if it was never subscribed."""
        ...

    def unsubscribe_async(
        self, event_type: type[E], handler: AsyncEventHandler[E]
    ) -> None:
        """Remove an asynchronous handler. No-op if it was never subscribed."""
        ...

    def is_subscribed(self, handler: Callable[[Any], None]) -> bool:
        """Return True if handler is registered as a synchronous handler."""
        ...

    def is_subscribed_async(self, handler: Callable[[Any], Awaitable[None]]) -> bool:
        """Return True if handler is registered as an asynchronous handler."""
        ...

    def publish(self, event: Event) -> None:
        """Invoke every synchronous handler registered for type(event)."""
        ...

    async def publish_async(self, event: Event) -> None:
        """Run every asynchronous handler for type(event) and wait for all."""
        ...
