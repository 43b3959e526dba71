"""Unit tests for handler records.

Tests cover:
- Shape validation (event type, arity, annotation, sync/async variant)
- Callable equality as record identity
- Invocation through handle()/handle_async()
"""

import functools
from collections.abc import Awaitable

import pytest

from event_aggregator.core.errors import HandlerShapeMismatchError
from event_aggregator.infrastructure.events.handler_record import (
    AsyncEventHandlerRecord,
    EventHandlerRecord,
)
from tests.fixtures import events as events_module
from tests.fixtures.events import LoudPing, Ping


def on_ping(event: Ping) -> None:
    pass


async def on_ping_async(event: Ping) -> None:
    pass


class Receiver:
    def __init__(self):
        self.received = []

    def on_ping(self, event: Ping) -> None:
        self.received.append(event)

    async def on_ping_async(self, event: Ping) -> None:
        self.received.append(event)


@pytest.mark.unit
class TestEventHandlerRecordValidation:
    """Test sync record construction checks."""

    def test_valid_function(self):
        record = EventHandlerRecord(Ping, on_ping)

        assert record.event_type is Ping
        assert record.handler is on_ping

    def test_valid_bound_method(self):
        receiver = Receiver()

        record = EventHandlerRecord(Ping, receiver.on_ping)

        assert record.matches(receiver.on_ping)

    def test_event_type_must_derive_from_event(self):
        with pytest.raises(HandlerShapeMismatchError, match="does not derive from Event"):
            EventHandlerRecord(str, lambda event: None)

    def test_handler_must_be_callable(self):
        with pytest.raises(HandlerShapeMismatchError, match="not callable"):
            EventHandlerRecord(Ping, "not a handler")

    def test_handler_must_take_exactly_one_parameter(self):
        def two_parameters(event: Ping, extra: int) -> None:
            pass

        def no_parameters() -> None:
            pass

        with pytest.raises(HandlerShapeMismatchError, match="exactly one"):
            EventHandlerRecord(Ping, two_parameters)
        with pytest.raises(HandlerShapeMismatchError, match="exactly one"):
            EventHandlerRecord(Ping, no_parameters)

    def test_keyword_only_parameter_rejected(self):
        def keyword_only(*, event: Ping) -> None:
            pass

        with pytest.raises(HandlerShapeMismatchError):
            EventHandlerRecord(Ping, keyword_only)

    def test_annotation_must_equal_event_type_exactly(self):
        """Test a handler for the base type does not fit a subclass event type."""
        with pytest.raises(HandlerShapeMismatchError, match='"LoudPing"'):
            EventHandlerRecord(LoudPing, on_ping)

    def test_coroutine_function_rejected(self):
        with pytest.raises(HandlerShapeMismatchError, match="asynchronous"):
            EventHandlerRecord(Ping, on_ping_async)

    def test_error_carries_event_type_and_handler(self):
        with pytest.raises(HandlerShapeMismatchError) as exc_info:
            EventHandlerRecord(LoudPing, on_ping)

        assert exc_info.value.event_type is LoudPing
        assert exc_info.value.handler is on_ping
        assert isinstance(exc_info.value, TypeError)

    def test_partial_with_one_remaining_parameter_accepted(self):
        def log_ping(prefix: str, event: Ping) -> None:
            pass

        handler = functools.partial(log_ping, "ping")

        record = EventHandlerRecord(Ping, handler)

        assert record.matches(handler)

    def test_string_annotations_resolved(self):
        def forward_ref(event: "Ping") -> None:
            pass

        record = EventHandlerRecord(Ping, forward_ref)

        assert record.event_type is Ping

    def test_unresolvable_dotted_annotation_rejected(self):
        """Test an annotation failing to evaluate is reported as a shape mismatch."""

        def missing_attribute(event: "events_module.Missing") -> None:
            pass

        with pytest.raises(HandlerShapeMismatchError, match="not appropriate"):
            EventHandlerRecord(Ping, missing_attribute)

    def test_value_returning_handler_rejected(self):
        def returns_count(event: Ping) -> int:
            return 1

        with pytest.raises(HandlerShapeMismatchError, match="must return nothing"):
            EventHandlerRecord(Ping, returns_count)

    def test_none_return_annotation_accepted(self):
        def no_annotation(event: Ping):
            pass

        assert EventHandlerRecord(Ping, no_annotation).handler is no_annotation
        assert EventHandlerRecord(Ping, on_ping).handler is on_ping

    def test_defaulted_extra_parameters_rejected(self):
        def with_options(event: Ping, *, verbose: bool = False) -> None:
            pass

        def with_default(event: Ping, retries: int = 3) -> None:
            pass

        with pytest.raises(HandlerShapeMismatchError, match="exactly one"):
            EventHandlerRecord(Ping, with_options)
        with pytest.raises(HandlerShapeMismatchError, match="exactly one"):
            EventHandlerRecord(Ping, with_default)


@pytest.mark.unit
class TestAsyncEventHandlerRecordValidation:
    """Test async record construction checks."""

    def test_valid_coroutine_function(self):
        record = AsyncEventHandlerRecord(Ping, on_ping_async)

        assert record.handler is on_ping_async

    def test_valid_bound_coroutine_method(self):
        receiver = Receiver()

        record = AsyncEventHandlerRecord(Ping, receiver.on_ping_async)

        assert record.matches(receiver.on_ping_async)

    def test_awaitable_annotated_function_accepted(self):
        def returns_awaitable(event: Ping) -> Awaitable[None]:
            return on_ping_async(event)

        record = AsyncEventHandlerRecord(Ping, returns_awaitable)

        assert record.event_type is Ping

    def test_plain_function_rejected(self):
        with pytest.raises(HandlerShapeMismatchError, match="synchronous"):
            AsyncEventHandlerRecord(Ping, on_ping)

    def test_annotation_must_equal_event_type_exactly(self):
        with pytest.raises(HandlerShapeMismatchError):
            AsyncEventHandlerRecord(LoudPing, on_ping_async)


@pytest.mark.unit
class TestHandlerRecordInvocation:
    """Test records invoke their handler."""

    def test_handle_calls_handler(self):
        receiver = Receiver()
        record = EventHandlerRecord(Ping, receiver.on_ping)
        event = Ping(id=1)

        record.handle(event)

        assert receiver.received == [event]

    @pytest.mark.asyncio
    async def test_handle_async_awaits_handler(self):
        receiver = Receiver()
        record = AsyncEventHandlerRecord(Ping, receiver.on_ping_async)
        event = Ping(id=2)

        await record.handle_async(event)

        assert receiver.received == [event]

    @pytest.mark.asyncio
    async def test_handle_async_rejects_non_awaitable_result(self):
        def lies(event: Ping) -> Awaitable[None]:
            return None  # type: ignore[return-value]

        record = AsyncEventHandlerRecord(Ping, lies)

        with pytest.raises(HandlerShapeMismatchError, match="instead of an awaitable"):
            await record.handle_async(Ping(id=3))

    def test_matches_uses_callable_equality(self):
        first = Receiver()
        second = Receiver()
        record = EventHandlerRecord(Ping, first.on_ping)

        assert record.matches(first.on_ping)
        assert not record.matches(second.on_ping)
        assert not record.matches(on_ping)
