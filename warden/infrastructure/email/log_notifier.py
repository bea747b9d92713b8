"""Logging notifier for development and tests.

Records that a message would have been delivered. The body carries the
one-time code and is never logged.
"""

from warden.core.errors import DomainError
from warden.core.result import Result, Success
from warden.domain.protocols import LoggerProtocol
from warden.domain.value_objects import Email


class LogNotifier:
    """Notifier that only writes a log line."""

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger

    async def send(
        self, recipient: Email, subject: str, body: str
    ) -> Result[None, DomainError]:
        self._logger.info(
            "notification_logged",
            recipient=recipient.value,
            subject=subject,
        )
        return Success(value=None)
