"""Handler records.

A handler record pairs an event type with the callable handling it. Records
are immutable and validate at construction that the callable fits the event
type, so a bad subscribe never reaches a registry.

Identity for deduplication and removal is callable equality. Python bound
methods compare equal when they wrap the same function and the same
receiver, so re-deriving ``obj.method`` yields a handler equal to the one
stored at subscribe time.
"""

import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from event_aggregator.core.errors import HandlerShapeMismatchError
from event_aggregator.domain.events.base_event import Event, is_event_type
from event_aggregator.infrastructure.events.introspection import (
    annotation_matches,
    describe,
    get_signature,
    is_async_callable,
    is_awaitable_annotation,
    returns_nothing,
    single_positional_parameter,
)


def _validate_shape(event_type: Any, handler: Any) -> inspect.Signature:
    """Check the parts of a handler's shape common to both variants.

    Returns:
        The handler's signature, for variant-specific checks.

    Raises:
        HandlerShapeMismatchError: On any mismatch.
    """
    if not is_event_type(event_type):
        raise HandlerShapeMismatchError(
            f"The event_type {describe(event_type)} does not derive from Event.",
            event_type=event_type,
            handler=handler,
        )
    if not callable(handler):
        raise HandlerShapeMismatchError(
            f"The handler {handler!r} is not callable.",
            event_type=event_type,
            handler=handler,
        )
    try:
        signature = get_signature(handler)
    except (TypeError, ValueError) as e:
        raise HandlerShapeMismatchError(
            f"The handler {describe(handler)} cannot be introspected.",
            event_type=event_type,
            handler=handler,
        ) from e

    parameter = single_positional_parameter(signature)
    if parameter is None:
        raise HandlerShapeMismatchError(
            f"The handler {describe(handler)} must accept exactly one positional "
            f"parameter of type {event_type.__name__}.",
            event_type=event_type,
            handler=handler,
        )
    # Unannotated parameters cannot contradict the declared type.
    if parameter.annotation is not inspect.Parameter.empty and not annotation_matches(
        parameter.annotation, event_type
    ):
        raise HandlerShapeMismatchError(
            f"The handler {describe(handler)} is not appropriate for handling the "
            f'event type "{event_type.__name__}".',
            event_type=event_type,
            handler=handler,
        )
    return signature


@dataclass(frozen=True, slots=True)
class EventHandlerRecord:
    """Synchronous handler for one event type.

    Attributes:
        event_type: Exact event class handled.
        handler: Callable accepting one event and returning None.

    Raises:
        HandlerShapeMismatchError: If handler does not fit event_type, is a
            coroutine function, or is annotated to return a value.
    """

    event_type: type[Event]
    handler: Callable[[Any], None]

    def __post_init__(self) -> None:
        signature = _validate_shape(self.event_type, self.handler)
        if is_async_callable(self.handler) or is_awaitable_annotation(
            signature.return_annotation
        ):
            raise HandlerShapeMismatchError(
                f"The handler {describe(self.handler)} is asynchronous; "
                "subscribe it as an async handler.",
                event_type=self.event_type,
                handler=self.handler,
            )
        if not returns_nothing(signature):
            raise HandlerShapeMismatchError(
                f"The handler {describe(self.handler)} returns "
                f'"{describe(signature.return_annotation)}"; synchronous handlers '
                "must return nothing.",
                event_type=self.event_type,
                handler=self.handler,
            )

    def matches(self, handler: Any) -> bool:
        return self.handler == handler

    def handle(self, event: Event) -> None:
        """Invoke the handler with event."""
        self.handler(event)


@dataclass(frozen=True, slots=True)
class AsyncEventHandlerRecord:
    """Asynchronous handler for one event type.

    Attributes:
        event_type: Exact event class handled.
        handler: Callable accepting one event and returning an awaitable.

    Raises:
        HandlerShapeMismatchError: If handler does not fit event_type or is
            neither a coroutine function nor annotated to return an awaitable.
    """

    event_type: type[Event]
    handler: Callable[[Any], Awaitable[None]]

    def __post_init__(self) -> None:
        signature = _validate_shape(self.event_type, self.handler)
        if not (
            is_async_callable(self.handler)
            or is_awaitable_annotation(signature.return_annotation)
        ):
            raise HandlerShapeMismatchError(
                f"The handler {describe(self.handler)} is synchronous; "
                "subscribe it as a sync handler.",
                event_type=self.event_type,
                handler=self.handler,
            )

    def matches(self, handler: Any) -> bool:
        return self.handler == handler

    async def handle_async(self, event: Event) -> None:
        """Invoke the handler with event and await its result.

        Raises:
            HandlerShapeMismatchError: If the handler returned a non-awaitable.
        """
        result = self.handler(event)
        if not inspect.isawaitable(result):
            raise HandlerShapeMismatchError(
                f"The handler {describe(self.handler)} returned "
                f"{type(result).__name__} instead of an awaitable.",
                event_type=self.event_type,
                handler=self.handler,
            )
        await result
