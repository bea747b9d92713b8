"""LoggerProtocol definition for structured logging.

Backend-agnostic structured logging port. Every call is a short message plus
key-value context.

Security:
    - NEVER log passwords, one-time codes or bearer tokens
    - Log emails only where an operator needs them to trace a flow

Usage:
    logger = container.logger
    logger.info("User signed up", email=str(email), requires_2fa=True)

    handler_logger = logger.bind(handler="login")
    handler_logger.warning("Login rejected", reason="invalid_credentials")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters.

    Supports the five standard levels plus context binding.
    """

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Human-readable message (avoid f-strings; use context).
            error: Optional exception; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: BaseException | None = None, **context: Any
    ) -> None:
        """Log a critical-level message (startup failures, misconfiguration)."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...
