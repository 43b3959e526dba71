"""Pytest configuration.

Provides a mocked logger and a fresh aggregator per test, and resets cached
settings and container singletons so environment patches in one test never
leak into another.
"""

from unittest.mock import MagicMock

import pytest

from event_aggregator.core.config import get_settings
from event_aggregator.core.container import get_event_aggregator
from event_aggregator.infrastructure.events.in_process_event_aggregator import (
    InProcessEventAggregator,
)


@pytest.fixture(autouse=True)
def clear_cached_singletons():
    """Clear lru_cache'd settings and aggregator before and after each test."""
    get_settings.cache_clear()
    get_event_aggregator.cache_clear()
    yield
    get_settings.cache_clear()
    get_event_aggregator.cache_clear()


@pytest.fixture
def mock_logger():
    """Logger double satisfying LoggerProtocol."""
    return MagicMock()


@pytest.fixture
def aggregator(mock_logger):
    """Fresh aggregator with isolated registries."""
    return InProcessEventAggregator(logger=mock_logger)
