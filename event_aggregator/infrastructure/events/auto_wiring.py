"""Auto-wiring of tagged handler methods.

Discovers every method of an object tagged with @event_handler (inherited
ones included), derives its event type from the parameter annotation and its
kind from the function itself, and subscribes or unsubscribes it through the
aggregator's public methods.

Discovery and binding finish for all methods before the aggregator is
touched, so an unsupported method fails the call without leaving the object
half-subscribed.

Shape rules:
    - an instance method (tagged static or class methods are rejected, since
      they would be shared by every instance)
    - exactly one positional parameter, annotated with an Event subclass
    - ``def`` returning nothing (no annotation or ``-> None``): sync handler
    - ``async def`` returning nothing, or ``def`` annotated to return an
      awaitable: async handler
    - anything else raises UnsupportedHandlerSignatureError

Usage:
    >>> class Dashboard:
    ...     @event_handler
    ...     def on_ping(self, event: PingReceived) -> None: ...
    ...
    ...     @event_handler
    ...     async def on_ping_async(self, event: PingReceived) -> None: ...
    >>>
    >>> dashboard = Dashboard()
    >>> subscribe_all_handlers(aggregator, dashboard)
    >>> ...
    >>> unsubscribe_all_handlers(aggregator, dashboard)
"""

import inspect
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from event_aggregator.core.enums import HandlerKind
from event_aggregator.core.errors import (
    SubscriptionLookupError,
    UnsupportedHandlerSignatureError,
)
from event_aggregator.domain.events.base_event import Event, is_event_type
from event_aggregator.domain.events.handler_tag import is_event_handler
from event_aggregator.domain.protocols.event_aggregator_protocol import (
    EventAggregatorProtocol,
)
from event_aggregator.infrastructure.events.introspection import (
    describe,
    get_signature,
    is_async_callable,
    is_awaitable_annotation,
    returns_nothing,
    single_positional_parameter,
)

SUBSCRIBE = "subscribe"
UNSUBSCRIBE = "unsubscribe"

# (operation, kind) -> aggregator method name
_OPERATIONS: dict[tuple[str, HandlerKind], str] = {
    (SUBSCRIBE, HandlerKind.SYNC): "subscribe",
    (SUBSCRIBE, HandlerKind.ASYNC): "subscribe_async",
    (UNSUBSCRIBE, HandlerKind.SYNC): "unsubscribe",
    (UNSUBSCRIBE, HandlerKind.ASYNC): "unsubscribe_async",
}


@dataclass(frozen=True, slots=True)
class DiscoveredHandler:
    """A tagged method bound to its object.

    Attributes:
        name: Attribute name of the method.
        event_type: Event class taken from the parameter annotation.
        kind: Sync or async.
        handler: Bound method (equal to any later re-binding of the same
            method on the same object).
    """

    name: str
    event_type: type[Event]
    kind: HandlerKind
    handler: Callable[[Any], Any]


def discover_handlers(target: Any) -> list[DiscoveredHandler]:
    """Find and bind every tagged method of target.

    Args:
        target: Object whose class (and base classes) define tagged methods.

    Returns:
        Discovered handlers in attribute-name order.

    Raises:
        ValueError: If target is None.
        UnsupportedHandlerSignatureError: If a tagged method cannot be bound
            or is a static or class method.
    """
    if target is None:
        raise ValueError("target must not be None")

    cls = type(target)
    discovered = []
    for name in dir(cls):
        # Static lookup avoids triggering properties and descriptors.
        attribute = inspect.getattr_static(cls, name, None)
        if not is_event_handler(attribute):
            continue
        # Static and class members bind to the same callable on every instance.
        if isinstance(attribute, (staticmethod, classmethod)):
            raise UnsupportedHandlerSignatureError(name, "must be an instance method.")
        discovered.append(_bind(name, getattr(target, name)))
    return discovered


def _bind(name: str, handler: Callable[..., Any]) -> DiscoveredHandler:
    try:
        signature = get_signature(handler)
    except (TypeError, ValueError) as e:
        raise UnsupportedHandlerSignatureError(name, "cannot be introspected.") from e

    parameter = single_positional_parameter(signature)
    if parameter is None:
        raise UnsupportedHandlerSignatureError(
            name,
            f"has {len(signature.parameters)} parameters. "
            "Only 1 positional parameter of type Event is supported.",
        )

    event_type = parameter.annotation
    if not is_event_type(event_type):
        raise UnsupportedHandlerSignatureError(
            name, "must have a parameter annotated with an Event type."
        )

    return_annotation = signature.return_annotation
    if is_async_callable(handler):
        if not returns_nothing(signature):
            raise UnsupportedHandlerSignatureError(
                name,
                f'returns "{describe(return_annotation)}", which is not supported '
                "for use as an Event handler.",
            )
        kind = HandlerKind.ASYNC
    elif is_awaitable_annotation(return_annotation):
        kind = HandlerKind.ASYNC
    elif returns_nothing(signature):
        kind = HandlerKind.SYNC
    else:
        raise UnsupportedHandlerSignatureError(
            name,
            f'returns "{describe(return_annotation)}", which is not supported '
            "for use as an Event handler.",
        )

    return DiscoveredHandler(
        name=name, event_type=event_type, kind=kind, handler=handler
    )


def _resolve_operation(
    aggregator: EventAggregatorProtocol, operation: str, kind: HandlerKind
) -> Callable[[type[Event], Callable[..., Any]], None]:
    method_name = _OPERATIONS[(operation, kind)]
    method = getattr(aggregator, method_name, None)
    if not callable(method):
        raise SubscriptionLookupError(method_name, kind.value)
    return method


def _apply_all(
    aggregator: EventAggregatorProtocol, target: Any, operation: str
) -> list[DiscoveredHandler]:
    if aggregator is None:
        raise ValueError("aggregator must not be None")

    handlers = discover_handlers(target)
    calls = [
        (_resolve_operation(aggregator, operation, handler.kind), handler)
        for handler in handlers
    ]
    for method, handler in calls:
        method(handler.event_type, handler.handler)
    return handlers


def subscribe_all_handlers(
    aggregator: EventAggregatorProtocol, target: Any
) -> list[DiscoveredHandler]:
    """Subscribe every tagged method of target.

    Args:
        aggregator: Aggregator to subscribe with.
        target: Object defining tagged methods.

    Returns:
        The handlers that were subscribed.

    Raises:
        ValueError: If aggregator or target is None.
        UnsupportedHandlerSignatureError: If a tagged method cannot be bound.
            Nothing is subscribed in that case.
        SubscriptionLookupError: If aggregator lacks the method for a kind.
    """
    return _apply_all(aggregator, target, SUBSCRIBE)


def unsubscribe_all_handlers(
    aggregator: EventAggregatorProtocol, target: Any
) -> list[DiscoveredHandler]:
    """Unsubscribe every tagged method of target.

    Idempotent: succeeds silently if target was never subscribed or was
    already unsubscribed.

    Raises:
        ValueError: If aggregator or target is None.
        UnsupportedHandlerSignatureError: If a tagged method cannot be bound.
        SubscriptionLookupError: If aggregator lacks the method for a kind.
    """
    return _apply_all(aggregator, target, UNSUBSCRIBE)
