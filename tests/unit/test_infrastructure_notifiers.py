"""Unit tests for the notifier adapters.

PostmarkNotifier is exercised against pytest-httpx; no network access.
"""

import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from warden.core.result import Failure, Success
from warden.domain.value_objects import Email
from warden.infrastructure.email import LogNotifier, PostmarkNotifier
from warden.infrastructure.enums import InfrastructureErrorCode

BASE_URL = "https://api.postmarkapp.test"


@pytest.fixture
def notifier(mock_logger) -> PostmarkNotifier:
    return PostmarkNotifier(
        base_url=f"{BASE_URL}/",
        sender=Email("no-reply@example.com"),
        server_token="server-token",
        logger=mock_logger,
        timeout=2.0,
    )


@pytest.mark.unit
class TestPostmarkNotifier:
    """Test PostmarkNotifier."""

    async def test_send_posts_email_request(self, notifier, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST", url=f"{BASE_URL}/email", json={"ErrorCode": 0}
        )

        result = await notifier.send(
            Email("alice@example.com"), "Your 2FA code", "Your 2FA code is: 123456"
        )

        assert isinstance(result, Success)
        request = httpx_mock.get_request()
        assert request.headers["X-Postmark-Server-Token"] == "server-token"
        body = json.loads(request.content)
        assert body == {
            "From": "no-reply@example.com",
            "To": "alice@example.com",
            "Subject": "Your 2FA code",
            "HtmlBody": "Your 2FA code is: 123456",
            "TextBody": "Your 2FA code is: 123456",
            "MessageStream": "outbound",
        }

    async def test_html_body_is_escaped(self, notifier, httpx_mock: HTTPXMock):
        httpx_mock.add_response(method="POST", url=f"{BASE_URL}/email")

        await notifier.send(Email("alice@example.com"), "Hi", "<b>1 & 2</b>")

        body = json.loads(httpx_mock.get_request().content)
        assert body["HtmlBody"] == "&lt;b&gt;1 &amp; 2&lt;/b&gt;"
        assert body["TextBody"] == "<b>1 & 2</b>"

    async def test_non_success_status(self, notifier, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/email",
            status_code=422,
            json={"ErrorCode": 300, "Message": "Invalid email request"},
        )

        result = await notifier.send(Email("alice@example.com"), "Hi", "body")

        assert isinstance(result, Failure)
        assert result.error.service_name == "postmark"
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.EXTERNAL_SERVICE_ERROR
        )
        assert result.error.details["status_code"] == 422

    async def test_timeout(self, notifier, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        result = await notifier.send(Email("alice@example.com"), "Hi", "body")

        assert isinstance(result, Failure)
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.EXTERNAL_SERVICE_TIMEOUT
        )

    async def test_connection_error(self, notifier, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ConnectError("refused"))

        result = await notifier.send(Email("alice@example.com"), "Hi", "body")

        assert isinstance(result, Failure)
        assert (
            result.error.infrastructure_code
            == InfrastructureErrorCode.EXTERNAL_SERVICE_UNAVAILABLE
        )


@pytest.mark.unit
class TestLogNotifier:
    """Test LogNotifier."""

    async def test_logs_without_body(self, mock_logger):
        notifier = LogNotifier(mock_logger)

        result = await notifier.send(
            Email("alice@example.com"), "Your 2FA code", "Your 2FA code is: 123456"
        )

        assert isinstance(result, Success)
        mock_logger.info.assert_called_once_with(
            "notification_logged",
            recipient="alice@example.com",
            subject="Your 2FA code",
        )
        assert "123456" not in str(mock_logger.info.call_args)
