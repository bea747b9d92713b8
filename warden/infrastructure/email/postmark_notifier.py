"""Postmark email notifier (adapter).

Delivers one-time codes through the Postmark HTTP API.

Architecture:
    - Implements NotifierProtocol (no inheritance required)
    - Uses httpx for async HTTP
    - Returns Result types; transport and non-2xx failures become
      ExternalServiceError

Request:
    POST {base_url}/email
    X-Postmark-Server-Token: <server token>
    {"From", "To", "Subject", "HtmlBody", "TextBody", "MessageStream"}
"""

import html

import httpx

from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result, Success
from warden.domain.protocols import LoggerProtocol
from warden.domain.value_objects import Email
from warden.infrastructure.enums import InfrastructureErrorCode
from warden.infrastructure.errors import ExternalServiceError

SERVICE_NAME = "postmark"
MESSAGE_STREAM = "outbound"


class PostmarkNotifier:
    """Postmark API client.

    Attributes:
        _base_url: API base URL (without trailing slash).
        _sender: From address.
        _server_token: Postmark server token.
        _timeout: HTTP request timeout in seconds.
    """

    def __init__(
        self,
        *,
        base_url: str,
        sender: Email,
        server_token: str,
        logger: LoggerProtocol,
        timeout: float = 10.0,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._sender = sender
        self._server_token = server_token
        self._timeout = timeout
        self._logger = logger.bind(service=SERVICE_NAME)

    async def send(
        self, recipient: Email, subject: str, body: str
    ) -> Result[None, ExternalServiceError]:
        """Send an email through Postmark.

        Returns:
            Success(None) on a 2xx response, Failure(ExternalServiceError)
            on timeout, connection error or any other status.
        """
        payload = {
            "From": self._sender.value,
            "To": recipient.value,
            "Subject": subject,
            "HtmlBody": html.escape(body),
            "TextBody": body,
            "MessageStream": MESSAGE_STREAM,
        }
        headers = {
            "X-Postmark-Server-Token": self._server_token,
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    f"{self._base_url}/email", json=payload, headers=headers
                )
        except httpx.TimeoutException as e:
            self._logger.warning("postmark_timeout", error=str(e))
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.UNEXPECTED_ERROR,
                    infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_TIMEOUT,
                    message="Postmark request timed out",
                    service_name=SERVICE_NAME,
                )
            )
        except httpx.HTTPError as e:
            self._logger.warning("postmark_connection_error", error=str(e))
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.UNEXPECTED_ERROR,
                    infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE,
                    message="Failed to connect to Postmark",
                    service_name=SERVICE_NAME,
                )
            )

        if not response.is_success:
            self._logger.warning(
                "postmark_rejected",
                status_code=response.status_code,
            )
            return Failure(
                error=ExternalServiceError(
                    code=ErrorCode.UNEXPECTED_ERROR,
                    infrastructure_code=InfrastructureErrorCode.EXTERNAL_SERVICE_ERROR,
                    message="Postmark rejected the message",
                    service_name=SERVICE_NAME,
                    details={
                        "status_code": response.status_code,
                        "response": response.text[:500],
                    },
                )
            )

        return Success(value=None)
