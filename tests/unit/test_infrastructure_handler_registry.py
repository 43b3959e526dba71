"""Unit tests for HandlerRegistry.

Tests cover:
- add-if-absent, remove-by-identity, snapshot by exact type, membership
- Insertion order
- Snapshots are copies unaffected by later mutation
- Concurrent mutation from many threads
"""

import threading

import pytest

from event_aggregator.infrastructure.events.handler_record import EventHandlerRecord
from event_aggregator.infrastructure.events.handler_registry import HandlerRegistry
from tests.fixtures.events import LoudPing, Ping, Pong


def make_ping_handler():
    def handler(event: Ping) -> None:
        pass

    return handler


def on_pong(event: Pong) -> None:
    pass


def on_loud_ping(event: LoudPing) -> None:
    pass


@pytest.mark.unit
class TestHandlerRegistryOperations:
    """Test single-threaded registry behaviour."""

    def test_add_appends_new_record(self):
        registry = HandlerRegistry()
        handler = make_ping_handler()

        added = registry.add(EventHandlerRecord(Ping, handler))

        assert added is True
        assert len(registry) == 1
        assert registry.contains(handler)

    def test_add_ignores_equal_handler(self):
        registry = HandlerRegistry()
        handler = make_ping_handler()
        registry.add(EventHandlerRecord(Ping, handler))

        added = registry.add(EventHandlerRecord(Ping, handler))

        assert added is False
        assert len(registry) == 1

    def test_remove_returns_number_removed(self):
        registry = HandlerRegistry()
        handler = make_ping_handler()
        registry.add(EventHandlerRecord(Ping, handler))

        assert registry.remove(handler) == 1
        assert registry.remove(handler) == 0
        assert len(registry) == 0

    def test_remove_unknown_handler_is_noop(self):
        registry = HandlerRegistry()
        registry.add(EventHandlerRecord(Ping, make_ping_handler()))

        assert registry.remove(make_ping_handler()) == 0
        assert len(registry) == 1

    def test_snapshot_for_exact_type_in_insertion_order(self):
        registry = HandlerRegistry()
        first = make_ping_handler()
        second = make_ping_handler()
        registry.add(EventHandlerRecord(Ping, first))
        registry.add(EventHandlerRecord(Pong, on_pong))
        registry.add(EventHandlerRecord(LoudPing, on_loud_ping))
        registry.add(EventHandlerRecord(Ping, second))

        snapshot = registry.snapshot_for(Ping)

        assert [record.handler for record in snapshot] == [first, second]

    def test_snapshot_is_isolated_from_later_mutation(self):
        registry = HandlerRegistry()
        handler = make_ping_handler()
        registry.add(EventHandlerRecord(Ping, handler))

        snapshot = registry.snapshot_for(Ping)
        registry.remove(handler)
        registry.add(EventHandlerRecord(Ping, make_ping_handler()))

        assert len(snapshot) == 1
        assert snapshot[0].handler is handler

    def test_count_and_event_types(self):
        registry = HandlerRegistry()
        registry.add(EventHandlerRecord(Pong, on_pong))
        registry.add(EventHandlerRecord(Ping, make_ping_handler()))
        registry.add(EventHandlerRecord(Ping, make_ping_handler()))

        assert registry.count() == 3
        assert registry.count(Ping) == 2
        assert registry.count(LoudPing) == 0
        assert registry.event_types() == [Pong, Ping]


@pytest.mark.unit
class TestHandlerRegistryConcurrency:
    """Test registry under concurrent mutation."""

    def test_concurrent_adds_are_not_lost(self):
        registry = HandlerRegistry()
        handlers = [make_ping_handler() for _ in range(400)]
        barrier = threading.Barrier(8)

        def worker(chunk):
            barrier.wait()
            for handler in chunk:
                registry.add(EventHandlerRecord(Ping, handler))

        threads = [
            threading.Thread(target=worker, args=(handlers[i::8],)) for i in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 400

    def test_concurrent_duplicate_adds_keep_one_record(self):
        registry = HandlerRegistry()
        handler = make_ping_handler()
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            for _ in range(50):
                registry.add(EventHandlerRecord(Ping, handler))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(registry) == 1

    def test_concurrent_add_and_remove(self):
        registry = HandlerRegistry()
        handlers = [make_ping_handler() for _ in range(200)]
        for handler in handlers:
            registry.add(EventHandlerRecord(Ping, handler))
        extra = [make_ping_handler() for _ in range(200)]

        def remover():
            for handler in handlers:
                registry.remove(handler)

        def adder():
            for handler in extra:
                registry.add(EventHandlerRecord(Ping, handler))

        threads = [threading.Thread(target=remover), threading.Thread(target=adder)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert [record.handler for record in registry.snapshot_for(Ping)] == extra
