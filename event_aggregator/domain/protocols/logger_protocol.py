"""LoggerProtocol definition for structured logging.

This protocol standardizes structured logging across the package while
remaining backend-agnostic. Implementations MUST ensure logs are structured
(message + key-value context).

Log Levels (standard 5-level hierarchy):
    - DEBUG: Subscription changes and dispatch diagnostics
    - INFO: Normal operational events
    - WARNING: Degraded behaviour
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Usage:
    from event_aggregator.core.container import get_logger

    logger: LoggerProtocol = get_logger()
    logger.debug("event_publishing", event_type="PingReceived", handler_count=2)

    # Scoped logging with bind()
    scoped = logger.bind(component="billing")
    scoped.info("Handlers wired")  # component auto-included
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    All logging calls MUST be structured: message + key-value context.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            **context: Structured key-value context fields.
        """
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception instance; implementation may include
                error_type and error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message for catastrophic failures."""
        ...

    def bind(self, **context: Any) -> "LoggerProtocol":
        """Return new logger with permanently bound context.

        Original logger instance remains unchanged (immutable pattern).

        Args:
            **context: Context to bind to all future logs.

        Returns:
            New logger instance with bound context.
        """
        ...

    def with_context(self, **context: Any) -> "LoggerProtocol":
        """Alias for bind()."""
        ...
