"""Unit tests for VerifyTwoFactorHandler.

Uses the real in-memory code store; the token service is mocked.
"""

import asyncio
from unittest.mock import AsyncMock, Mock

import pytest

from warden.application.commands import Authenticated, VerifyTwoFactor
from warden.application.commands.handlers import VerifyTwoFactorHandler
from warden.core.enums import ErrorCode
from warden.core.result import Failure, Success
from warden.domain.errors import TwoFACodeStoreError
from warden.domain.value_objects import Email, LoginAttemptId, TwoFACode
from warden.infrastructure.persistence.memory import InMemoryTwoFACodeStore

EMAIL = Email("alice@example.com")


@pytest.fixture
def token_service_mock() -> Mock:
    service = Mock()
    service.issue.return_value = Success(value="signed.jwt.token")
    return service


@pytest.fixture
def handler(two_fa_code_store, token_service_mock, mock_logger):
    return VerifyTwoFactorHandler(
        two_fa_code_store=two_fa_code_store,
        token_service=token_service_mock,
        logger=mock_logger,
    )


@pytest.fixture
async def pending(two_fa_code_store) -> LoginAttemptId:
    attempt_id = LoginAttemptId.generate()
    await two_fa_code_store.add_code(EMAIL, attempt_id, TwoFACode("123456"))
    return attempt_id


def verify(attempt_id, code="123456", email="alice@example.com"):
    return VerifyTwoFactor(
        email=email, login_attempt_id=str(attempt_id), two_fa_code=code
    )


@pytest.mark.unit
class TestVerifyTwoFactorHandler:
    """Test VerifyTwoFactorHandler."""

    async def test_correct_code_issues_token(self, handler, pending):
        result = await handler.handle(verify(pending))

        assert result == Success(
            value=Authenticated(email=EMAIL, token="signed.jwt.token")
        )

    async def test_code_is_single_use(self, handler, pending, two_fa_code_store):
        await handler.handle(verify(pending))

        replay = await handler.handle(verify(pending))

        assert replay.error.code == ErrorCode.INCORRECT_CREDENTIALS
        assert isinstance(await two_fa_code_store.get_code(EMAIL), Failure)

    async def test_wrong_code(self, handler, pending, token_service_mock):
        result = await handler.handle(verify(pending, code="654321"))

        assert result.error.code == ErrorCode.INCORRECT_CREDENTIALS
        token_service_mock.issue.assert_not_called()

    async def test_wrong_code_keeps_challenge(self, handler, pending):
        await handler.handle(verify(pending, code="654321"))

        result = await handler.handle(verify(pending))

        assert isinstance(result, Success)

    async def test_wrong_attempt_id(self, handler, pending):
        result = await handler.handle(verify(LoginAttemptId.generate()))

        assert result.error.code == ErrorCode.INCORRECT_CREDENTIALS

    async def test_no_pending_challenge(self, handler):
        result = await handler.handle(verify(LoginAttemptId.generate()))

        assert result.error.code == ErrorCode.INCORRECT_CREDENTIALS

    async def test_newer_challenge_replaces_older(
        self, handler, pending, two_fa_code_store
    ):
        newer = LoginAttemptId.generate()
        await two_fa_code_store.add_code(EMAIL, newer, TwoFACode("999999"))

        stale = await handler.handle(verify(pending))
        fresh = await handler.handle(verify(newer, code="999999"))

        assert stale.error.code == ErrorCode.INCORRECT_CREDENTIALS
        assert isinstance(fresh, Success)

    @pytest.mark.parametrize(
        ("email", "attempt_id", "code"),
        [
            ("nope", "0b4a2f8e-6c1d-4e3b-9a7f-5d2c8e1b4a60", "123456"),
            ("alice@example.com", "not-a-uuid", "123456"),
            ("alice@example.com", "0b4a2f8e-6c1d-4e3b-9a7f-5d2c8e1b4a60", "12345"),
        ],
    )
    async def test_invalid_input(self, handler, email, attempt_id, code):
        result = await handler.handle(verify(attempt_id, code=code, email=email))

        assert result.error.code == ErrorCode.INVALID_CREDENTIALS

    async def test_store_failure(self, token_service_mock, mock_logger):
        store = AsyncMock()
        store.consume_code.return_value = Failure(
            error=TwoFACodeStoreError.unexpected()
        )
        handler = VerifyTwoFactorHandler(
            two_fa_code_store=store,
            token_service=token_service_mock,
            logger=mock_logger,
        )

        result = await handler.handle(verify(LoginAttemptId.generate()))

        assert result.error.code == ErrorCode.UNEXPECTED_ERROR
        token_service_mock.issue.assert_not_called()

    async def test_unconsumed_challenge_does_not_issue_token(
        self, token_service_mock, mock_logger
    ):
        store = AsyncMock()
        store.consume_code.return_value = Success(value=False)
        handler = VerifyTwoFactorHandler(
            two_fa_code_store=store,
            token_service=token_service_mock,
            logger=mock_logger,
        )

        result = await handler.handle(verify(LoginAttemptId.generate()))

        assert result.error.code == ErrorCode.INCORRECT_CREDENTIALS
        token_service_mock.issue.assert_not_called()

    async def test_concurrent_verifications_accept_code_once(
        self, token_service_mock, mock_logger
    ):
        """Test only one of two simultaneous verifications gets a token."""

        class RoundTripStore(InMemoryTwoFACodeStore):
            # Yields to the loop before each call, like a network backend.
            async def get_code(self, email):
                await asyncio.sleep(0)
                return await super().get_code(email)

            async def consume_code(self, email, login_attempt_id, code):
                await asyncio.sleep(0)
                return await super().consume_code(email, login_attempt_id, code)

        store = RoundTripStore(ttl_seconds=600)
        attempt_id = LoginAttemptId.generate()
        await store.add_code(EMAIL, attempt_id, TwoFACode("123456"))
        handler = VerifyTwoFactorHandler(
            two_fa_code_store=store,
            token_service=token_service_mock,
            logger=mock_logger,
        )

        results = await asyncio.gather(
            handler.handle(verify(attempt_id)), handler.handle(verify(attempt_id))
        )

        successes = [r for r in results if isinstance(r, Success)]
        failures = [r for r in results if isinstance(r, Failure)]
        assert len(successes) == 1
        assert failures[0].error.code == ErrorCode.INCORRECT_CREDENTIALS
        token_service_mock.issue.assert_called_once_with(EMAIL)
