"""Handler tag for auto-wiring.

The event_handler decorator attaches a marker to a function without wrapping
it. Wrapping would change the function object and break bound method
equality, which auto-wiring relies on to find subscriptions again when
unsubscribing.

Usage:
    >>> class Thermostat:
    ...     @event_handler
    ...     def on_reading(self, event: ReadingTaken) -> None:
    ...         ...
    ...
    ...     @event_handler
    ...     async def on_alarm(self, event: AlarmRaised) -> None:
    ...         ...
"""

from collections.abc import Callable
from typing import Any, TypeVar

HandlerT = TypeVar("HandlerT", bound=Callable[..., Any])

_HANDLER_MARKER = "__event_handler__"


def event_handler(fn: HandlerT) -> HandlerT:
    """Tag a function or method as an event handler.

    Accepts plain functions and coroutine functions. Static and class methods
    can carry the tag too, but auto-wiring rejects them: only instance methods
    give each object its own subscription.

    Args:
        fn: Function to tag.

    Returns:
        The same object, unchanged apart from the marker attribute.
    """
    target = fn.__func__ if isinstance(fn, (staticmethod, classmethod)) else fn
    setattr(target, _HANDLER_MARKER, True)
    return fn


def is_event_handler(obj: Any) -> bool:
    """Return True if obj (or the function it wraps) carries the handler tag."""
    if isinstance(obj, (staticmethod, classmethod)):
        obj = obj.__func__
    return getattr(obj, _HANDLER_MARKER, False) is True
