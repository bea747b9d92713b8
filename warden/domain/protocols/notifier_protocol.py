"""NotifierProtocol - Port for out-of-band message delivery.

Implementations:
    - LogNotifier: logs the delivery (development/tests)
    - PostmarkNotifier: Postmark HTTP API
"""

from typing import Protocol

from warden.core.errors import DomainError
from warden.core.result import Result
from warden.domain.value_objects import Email


class NotifierProtocol(Protocol):
    """Delivers one-time codes to the principal's mailbox.

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def send(
        self, recipient: Email, subject: str, body: str
    ) -> Result[None, DomainError]:
        """Deliver a message.

        Args:
            recipient: Destination address.
            subject: Message subject.
            body: Plain-text body. Contains secrets, never log it.

        Returns:
            Success(None) or Failure(ExternalServiceError) from the adapter.
        """
        ...
