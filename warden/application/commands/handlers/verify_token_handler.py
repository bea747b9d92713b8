"""Verify token handler for resource servers.

Every rejection reason (expired, bad signature, malformed, revoked, store
failure) is reported as TOKEN_INVALID.
"""

from warden.application.commands.auth_commands import VerifyToken
from warden.application.errors import SessionError
from warden.core.result import Failure, Result, Success
from warden.domain.protocols import LoggerProtocol, TokenClaims, TokenServiceProtocol
from warden.domain.value_objects import BearerToken


class VerifyTokenHandler:
    """Handler for the verify-token command."""

    def __init__(
        self, token_service: TokenServiceProtocol, logger: LoggerProtocol
    ) -> None:
        self._token_service = token_service
        self._logger = logger.bind(handler="verify_token")

    async def handle(self, cmd: VerifyToken) -> Result[TokenClaims, SessionError]:
        match BearerToken.parse(cmd.token):
            case Failure(error=error):
                return Failure(error=SessionError.token_invalid(error))
            case Success(value=token):
                pass

        match await self._token_service.validate(token.value):
            case Failure(error=error):
                self._logger.debug("token_rejected", reason=error.code.value)
                return Failure(error=SessionError.token_invalid(error))
            case Success(value=claims):
                return Success(value=claims)
