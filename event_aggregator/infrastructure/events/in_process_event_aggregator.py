"""In-process event aggregator.

This module implements EventAggregatorProtocol with two thread-safe handler
registries, one for synchronous and one for asynchronous handlers. Suitable
for wiring independent components of a single process together.

Architecture:
    - Implements EventAggregatorProtocol (hexagonal adapter pattern)
    - Two isolated HandlerRegistry instances (sync, async)
    - Snapshot under lock, invoke outside lock
    - Exact runtime type routing (no subclass matching)
    - Handler exceptions propagate to the publisher

Usage:
    >>> aggregator = InProcessEventAggregator(logger=get_logger())
    >>> aggregator.subscribe(PingReceived, on_ping)
    >>> aggregator.publish(PingReceived(id=7))
    >>>
    >>> aggregator.subscribe_async(PingReceived, on_ping_async)
    >>> await aggregator.publish_async(PingReceived(id=9))
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from event_aggregator.core.enums import HandlerKind
from event_aggregator.domain.events.base_event import Event
from event_aggregator.domain.protocols.event_aggregator_protocol import (
    AsyncEventHandler,
    EventHandler,
)
from event_aggregator.domain.protocols.logger_protocol import LoggerProtocol
from event_aggregator.infrastructure.events.handler_record import (
    AsyncEventHandlerRecord,
    EventHandlerRecord,
)
from event_aggregator.infrastructure.events.handler_registry import HandlerRegistry
from event_aggregator.infrastructure.events.introspection import describe

E = TypeVar("E", bound=Event)


class InProcessEventAggregator:
    """In-process event aggregator with isolated sync and async registries.

    Thread Safety:
        - All registry access is serialized by one lock per registry
        - The sync and async registries are never locked together
        - Handlers run outside any lock, so reentrant subscribe,
          unsubscribe and publish calls are safe

    Error Handling:
        - publish(): the first failing handler aborts the remaining ones and
          its exception reaches the caller
        - publish_async(): every handler is allowed to settle first; one
          failure is re-raised as-is, several are raised together as an
          exception group
        - No exception is logged or suppressed here

    Attributes:
        _handlers: Registry of synchronous handler records.
        _async_handlers: Registry of asynchronous handler records.
        _logger: Logger for subscription and dispatch diagnostics.

    Example:
        >>> aggregator = InProcessEventAggregator(logger=logger)
        >>> aggregator.subscribe(PingReceived, on_ping)
        >>> aggregator.subscribe(PingReceived, on_ping)  # duplicate ignored
        >>> aggregator.handler_count(PingReceived)
        1
    """

    def __init__(self, logger: LoggerProtocol | None = None) -> None:
        """Initialize empty registries.

        Args:
            logger: Logger for diagnostics. Defaults to the container's
                logger built from settings.
        """
        if logger is None:
            from event_aggregator.core.container import get_logger

            logger = get_logger()
        self._logger = logger
        self._handlers: HandlerRegistry[EventHandlerRecord] = HandlerRegistry()
        self._async_handlers: HandlerRegistry[AsyncEventHandlerRecord] = (
            HandlerRegistry()
        )

    def subscribe(self, event_type: type[E], handler: EventHandler[E]) -> None:
        """Register a synchronous handler for event_type.

        Subscribing a handler that is already registered is a no-op.

        Args:
            event_type: Exact event class to handle.
            handler: Callable accepting one event_type argument.

        Raises:
            HandlerShapeMismatchError: If handler does not fit event_type.
        """
        record = EventHandlerRecord(event_type, handler)
        self._log_subscribe(self._handlers.add(record), record, HandlerKind.SYNC)

    def subscribe_async(
        self, event_type: type[E], handler: AsyncEventHandler[E]
    ) -> None:
        """Register an asynchronous handler for event_type.

        Args:
            event_type: Exact event class to handle.
            handler: Coroutine function accepting one event_type argument.

        Raises:
            HandlerShapeMismatchError: If handler does not fit event_type.
        """
        record = AsyncEventHandlerRecord(event_type, handler)
        self._log_subscribe(
            self._async_handlers.add(record), record, HandlerKind.ASYNC
        )

    def unsubscribe(self, event_type: type[E], handler: EventHandler[E]) -> None:
        """Remove a synchronous handler. No-op if it was never subscribed."""
        removed = self._handlers.remove(handler)
        self._log_unsubscribe(removed, event_type, handler, HandlerKind.SYNC)

    def unsubscribe_async(
        self, event_type: type[E], handler: AsyncEventHandler[E]
    ) -> None:
        """Remove an asynchronous handler. No-op if it was never subscribed."""
        removed = self._async_handlers.remove(handler)
        self._log_unsubscribe(removed, event_type, handler, HandlerKind.ASYNC)

    def is_subscribed(self, handler: Callable[[Any], None]) -> bool:
        """Return True if handler is registered as a synchronous handler."""
        return self._handlers.contains(handler)

    def is_subscribed_async(self, handler: Callable[[Any], Awaitable[None]]) -> bool:
        """Return True if handler is registered as an asynchronous handler."""
        return self._async_handlers.contains(handler)

    def handler_count(self, event_type: type[Event] | None = None) -> int:
        """Number of synchronous subscriptions, optionally for one event type."""
        return self._handlers.count(event_type)

    def handler_count_async(self, event_type: type[Event] | None = None) -> int:
        """Number of asynchronous subscriptions, optionally for one event type."""
        return self._async_handlers.count(event_type)

    def publish(self, event: Event) -> None:
        """Invoke every synchronous handler registered for type(event).

        Handlers run sequentially, in subscription order, on the calling
        thread. If no handlers are registered this is a no-op.

        Args:
            event: Event to deliver.

        Raises:
            Exception: Whatever the first failing handler raised. Handlers
                after it are not invoked.
        """
        records = self._handlers.snapshot_for(type(event))
        if not records:
            return

        self._log_publish(event, len(records), HandlerKind.SYNC)
        for record in records:
            record.handle(event)

    async def publish_async(self, event: Event) -> None:
        """Run every asynchronous handler registered for type(event).

        Handlers start concurrently and this coroutine completes once all of
        them have settled. A failing handler never cancels its siblings.

        Flow:
            1. Snapshot handlers registered for type(event)
            2. If none, return immediately
            3. asyncio.gather(return_exceptions=True) over all handlers
            4. Raise collected failures, if any

        Args:
            event: Event to deliver.

        Raises:
            BaseException: The handler's own exception when exactly one
                handler failed.
            BaseExceptionGroup: When several handlers failed (an
                ExceptionGroup if all failures are Exceptions).
        """
        records = self._async_handlers.snapshot_for(type(event))
        if not records:
            return

        self._log_publish(event, len(records), HandlerKind.ASYNC)
        results = await asyncio.gather(
            *(record.handle_async(event) for record in records),
            return_exceptions=True,
        )

        failures = [result for result in results if isinstance(result, BaseException)]
        if len(failures) == 1:
            raise failures[0]
        if failures:
            raise BaseExceptionGroup(
                f"{len(failures)} of {len(records)} handlers failed for "
                f"{type(event).__name__}",
                failures,
            )

    def _log_subscribe(
        self,
        added: bool,
        record: EventHandlerRecord | AsyncEventHandlerRecord,
        kind: HandlerKind,
    ) -> None:
        # Duplicate subscriptions are ignored rather than rejected.
        self._logger.debug(
            "event_handler_subscribed" if added else "event_handler_already_subscribed",
            event_type=record.event_type.__name__,
            handler_name=describe(record.handler),
            handler_kind=kind.value,
        )

    def _log_unsubscribe(
        self, removed: int, event_type: type[Event], handler: Any, kind: HandlerKind
    ) -> None:
        if not removed:
            return
        self._logger.debug(
            "event_handler_unsubscribed",
            event_type=describe(event_type),
            handler_name=describe(handler),
            handler_kind=kind.value,
        )

    def _log_publish(self, event: Event, handler_count: int, kind: HandlerKind) -> None:
        self._logger.debug(
            "event_publishing",
            event_type=type(event).__name__,
            event_id=str(getattr(event, "event_id", "")),
            handler_count=handler_count,
            handler_kind=kind.value,
        )
