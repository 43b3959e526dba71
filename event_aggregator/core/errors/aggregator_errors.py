"""Event aggregator exceptions.

Error Hierarchy:
    EventAggregatorError (base)
    ├── HandlerShapeMismatchError (handler does not fit its event type)
    ├── UnsupportedHandlerSignatureError (tagged method cannot be auto-wired)
    └── SubscriptionLookupError (aggregator lacks the operation for a shape)

Exceptions raised by handlers themselves are never wrapped in these types;
they propagate to the publisher as raised.
"""

from typing import Any


class EventAggregatorError(Exception):
    """Base exception for event aggregator operations."""

    pass


class HandlerShapeMismatchError(EventAggregatorError, TypeError):
    """Handler callable does not accept exactly the declared event type.

    Raised when a handler record is constructed, so the registry is left
    unchanged.

    Attributes:
        event_type: Declared event type.
        handler: Offending callable.
    """

    def __init__(self, message: str, *, event_type: Any, handler: Any) -> None:
        super().__init__(message)
        self.event_type = event_type
        self.handler = handler


class UnsupportedHandlerSignatureError(EventAggregatorError, TypeError):
    """Tagged method has a signature auto-wiring cannot bind.

    Attributes:
        method_name: Name of the offending method.
        reason: Why the method was rejected.
    """

    def __init__(self, method_name: str, reason: str) -> None:
        super().__init__(f'The method "{method_name}" {reason}')
        self.method_name = method_name
        self.reason = reason


class SubscriptionLookupError(EventAggregatorError, LookupError):
    """Aggregator exposes no operation for a derived handler kind.

    Indicates a broken aggregator implementation, not bad user input.

    Attributes:
        operation: Name of the method that could not be resolved.
        kind: Handler kind value ("sync" or "async").
    """

    def __init__(self, operation: str, kind: str) -> None:
        super().__init__(
            f"Couldn't find any method named {operation} for {kind} handlers."
        )
        self.operation = operation
        self.kind = kind
