"""Unit tests for LogoutUserHandler and VerifyTokenHandler.

Both handlers run against a real JWTService and in-memory banned token
store, so revocation is exercised end to end.
"""

from unittest.mock import AsyncMock

import pytest

from warden.application.commands import LogoutResponse, LogoutUser, VerifyToken
from warden.application.commands.handlers import LogoutUserHandler, VerifyTokenHandler
from warden.core.enums import ErrorCode
from warden.core.result import Failure, Success
from warden.domain.errors import BannedTokenStoreError
from warden.domain.value_objects import Email


@pytest.fixture
def token(token_service) -> str:
    return token_service.issue(Email("alice@example.com")).value


@pytest.fixture
def logout_handler(token_service, banned_token_store, mock_logger):
    return LogoutUserHandler(
        token_service=token_service,
        banned_token_store=banned_token_store,
        logger=mock_logger,
    )


@pytest.fixture
def verify_handler(token_service, mock_logger):
    return VerifyTokenHandler(token_service=token_service, logger=mock_logger)


@pytest.mark.unit
class TestLogoutUserHandler:
    """Test LogoutUserHandler."""

    async def test_logout_bans_token(self, logout_handler, banned_token_store, token):
        result = await logout_handler.handle(LogoutUser(token=token))

        assert result == Success(value=LogoutResponse())
        assert result.value.message == "Successfully logged out."
        assert await banned_token_store.is_banned(token) == Success(value=True)

    @pytest.mark.parametrize("raw", [None, "", "  "])
    async def test_missing_token(self, logout_handler, raw):
        result = await logout_handler.handle(LogoutUser(token=raw))

        assert result.error.code == ErrorCode.TOKEN_MISSING

    async def test_garbage_token(self, logout_handler, banned_token_store):
        result = await logout_handler.handle(LogoutUser(token="garbage"))

        assert result.error.code == ErrorCode.TOKEN_INVALID
        assert await banned_token_store.is_banned("garbage") == Success(value=False)

    async def test_second_logout_is_invalid(self, logout_handler, token):
        await logout_handler.handle(LogoutUser(token=token))

        result = await logout_handler.handle(LogoutUser(token=token))

        assert result.error.code == ErrorCode.TOKEN_INVALID

    async def test_ban_failure(self, token_service, mock_logger, token):
        store = AsyncMock()
        store.ban_token.return_value = Failure(
            error=BannedTokenStoreError.unexpected()
        )
        handler = LogoutUserHandler(
            token_service=token_service,
            banned_token_store=store,
            logger=mock_logger,
        )

        result = await handler.handle(LogoutUser(token=token))

        assert result.error.code == ErrorCode.UNEXPECTED_ERROR


@pytest.mark.unit
class TestVerifyTokenHandler:
    """Test VerifyTokenHandler."""

    async def test_valid_token(self, verify_handler, token):
        result = await verify_handler.handle(VerifyToken(token=token))

        assert isinstance(result, Success)
        assert result.value.subject == "alice@example.com"

    async def test_revoked_token_is_invalid(
        self, verify_handler, logout_handler, token
    ):
        await logout_handler.handle(LogoutUser(token=token))

        result = await verify_handler.handle(VerifyToken(token=token))

        assert result.error.code == ErrorCode.TOKEN_INVALID
        assert result.error.domain_error.code == ErrorCode.TOKEN_REVOKED

    @pytest.mark.parametrize("raw", ["", "garbage", "a.b.c"])
    async def test_bad_tokens_are_invalid(self, verify_handler, raw):
        result = await verify_handler.handle(VerifyToken(token=raw))

        assert result.error.code == ErrorCode.TOKEN_INVALID
