"""Logout handler.

Flow:
1. Require a non-blank token
2. Validate it (signature, expiry, not already revoked)
3. Add it to the banned token list
4. Return LogoutResponse; the caller clears its cookie

A revoked token fails validation, so logging out twice with the same token
reports TOKEN_INVALID the second time.
"""

from warden.application.commands.auth_commands import LogoutResponse, LogoutUser
from warden.application.errors import SessionError
from warden.core.result import Failure, Result, Success
from warden.domain.protocols import (
    BannedTokenStore,
    LoggerProtocol,
    TokenServiceProtocol,
)
from warden.domain.value_objects import BearerToken


class LogoutUserHandler:
    """Handler for the logout command."""

    def __init__(
        self,
        token_service: TokenServiceProtocol,
        banned_token_store: BannedTokenStore,
        logger: LoggerProtocol,
    ) -> None:
        self._token_service = token_service
        self._banned_token_store = banned_token_store
        self._logger = logger.bind(handler="logout")

    async def handle(self, cmd: LogoutUser) -> Result[LogoutResponse, SessionError]:
        """Revoke the caller's token.

        Returns:
            Success(LogoutResponse).
            Failure(SessionError) with TOKEN_MISSING, TOKEN_INVALID or
            UNEXPECTED_ERROR.
        """
        match BearerToken.parse(cmd.token):
            case Failure():
                return Failure(error=SessionError.token_missing())
            case Success(value=token):
                pass

        match await self._token_service.validate(token.value):
            case Failure(error=error):
                self._logger.info("logout_rejected", reason=error.code.value)
                return Failure(error=SessionError.token_invalid(error))
            case Success(value=claims):
                pass

        match await self._banned_token_store.ban_token(token.value):
            case Failure(error=error):
                self._logger.error("logout_ban_failed")
                return Failure(error=SessionError.unexpected(error))

        self._logger.info("logout_succeeded", email=claims.subject)
        return Success(value=LogoutResponse())
