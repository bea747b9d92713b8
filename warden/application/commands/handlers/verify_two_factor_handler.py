"""Verify two-factor handler.

Flow:
1. Parse email, login attempt id and code
2. Consume the live challenge for the email: the store compares attempt id
   and code and removes the challenge in one atomic step
3. Issue a token only if this call removed the challenge

Only the latest challenge for an email exists, so an older attempt id
never matches.
"""

from warden.application.commands.auth_commands import Authenticated, VerifyTwoFactor
from warden.application.errors import SessionError
from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result, Success
from warden.domain.protocols import LoggerProtocol, TokenServiceProtocol, TwoFACodeStore
from warden.domain.value_objects import Email, LoginAttemptId, TwoFACode


class VerifyTwoFactorHandler:
    """Handler for the verify-2FA command."""

    def __init__(
        self,
        two_fa_code_store: TwoFACodeStore,
        token_service: TokenServiceProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._two_fa_code_store = two_fa_code_store
        self._token_service = token_service
        self._logger = logger.bind(handler="verify_2fa")

    async def handle(self, cmd: VerifyTwoFactor) -> Result[Authenticated, SessionError]:
        """Complete the second factor.

        Returns:
            Success(Authenticated).
            Failure(SessionError) with INVALID_CREDENTIALS,
            INCORRECT_CREDENTIALS or UNEXPECTED_ERROR.
        """
        match Email.parse(cmd.email):
            case Failure(error=error):
                return Failure(error=SessionError.invalid_credentials(error))
            case Success(value=email):
                pass

        match LoginAttemptId.parse(cmd.login_attempt_id):
            case Failure(error=error):
                return Failure(error=SessionError.invalid_credentials(error))
            case Success(value=login_attempt_id):
                pass

        match TwoFACode.parse(cmd.two_fa_code):
            case Failure(error=error):
                return Failure(error=SessionError.invalid_credentials(error))
            case Success(value=code):
                pass

        match await self._two_fa_code_store.consume_code(email, login_attempt_id, code):
            case Failure(error=error) if error.code == ErrorCode.TWO_FA_CODE_NOT_FOUND:
                self._logger.info("two_fa_rejected", reason="no_pending_challenge")
                return Failure(error=SessionError.incorrect_credentials(error))
            case Failure(error=error):
                self._logger.error("two_fa_code_store_failed")
                return Failure(error=SessionError.unexpected(error))
            case Success(value=False):
                self._logger.info("two_fa_rejected", reason="mismatch")
                return Failure(error=SessionError.incorrect_credentials())
            case Success(value=True):
                pass

        match self._token_service.issue(email):
            case Failure(error=error):
                self._logger.error("two_fa_token_issue_failed")
                return Failure(error=SessionError.unexpected(error))
            case Success(value=token):
                self._logger.info("two_fa_succeeded", email=email.value)
                return Success(value=Authenticated(email=email, token=token))
