"""Logging adapters implementing LoggerProtocol."""

from event_aggregator.infrastructure.logging.console_adapter import ConsoleAdapter

__all__ = ["ConsoleAdapter"]
