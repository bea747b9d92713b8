"""Login handler.

Flow:
1. Parse email and password
2. Validate credentials against the user store
3. Fetch the user to read its two-factor setting
4. Without 2FA: issue a token, return Authenticated
5. With 2FA: store a fresh (attempt id, code) pair, email the code,
   return TwoFactorPending

Unknown email and wrong password are reported identically to the caller.
The log keeps the distinction.
"""

from warden.application.commands.auth_commands import (
    Authenticated,
    LoginOutcome,
    LoginUser,
    TwoFactorPending,
)
from warden.application.errors import SessionError
from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result, Success
from warden.domain.protocols import (
    LoggerProtocol,
    NotifierProtocol,
    TokenServiceProtocol,
    TwoFACodeStore,
    UserStore,
)
from warden.domain.value_objects import Email, LoginAttemptId, Password, TwoFACode

TWO_FA_SUBJECT = "Your 2FA code"


class LoginUserHandler:
    """Handler for the login command.

    Holds no mutable state. Store failures are UNEXPECTED_ERROR and never
    issue a token.
    """

    def __init__(
        self,
        user_store: UserStore,
        two_fa_code_store: TwoFACodeStore,
        token_service: TokenServiceProtocol,
        notifier: NotifierProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._user_store = user_store
        self._two_fa_code_store = two_fa_code_store
        self._token_service = token_service
        self._notifier = notifier
        self._logger = logger.bind(handler="login")

    async def handle(self, cmd: LoginUser) -> Result[LoginOutcome, SessionError]:
        """Authenticate a principal.

        Returns:
            Success(Authenticated | TwoFactorPending).
            Failure(SessionError) with INVALID_CREDENTIALS,
            INCORRECT_CREDENTIALS or UNEXPECTED_ERROR.
        """
        match Email.parse(cmd.email):
            case Failure(error=error):
                return Failure(error=SessionError.invalid_credentials(error))
            case Success(value=email):
                pass

        match Password.parse(cmd.password):
            case Failure(error=error):
                return Failure(error=SessionError.invalid_credentials(error))
            case Success(value=password):
                pass

        match await self._user_store.validate_user(email, password):
            case Failure(error=error) if error.code == ErrorCode.UNEXPECTED_ERROR:
                self._logger.error("login_store_failure", reason=error.code.value)
                return Failure(error=SessionError.unexpected(error))
            case Failure(error=error):
                self._logger.info("login_rejected", reason=error.code.value)
                return Failure(error=SessionError.incorrect_credentials(error))

        match await self._user_store.get_user(email):
            case Failure(error=error):
                self._logger.error("login_user_lookup_failed", reason=error.code.value)
                return Failure(error=SessionError.unexpected(error))
            case Success(value=user):
                pass

        if user.requires_2fa:
            return await self._start_two_factor(email)

        match self._token_service.issue(email):
            case Failure(error=error):
                self._logger.error("login_token_issue_failed")
                return Failure(error=SessionError.unexpected(error))
            case Success(value=token):
                self._logger.info("login_succeeded", email=email.value)
                return Success(value=Authenticated(email=email, token=token))

    async def _start_two_factor(
        self, email: Email
    ) -> Result[LoginOutcome, SessionError]:
        login_attempt_id = LoginAttemptId.generate()
        code = TwoFACode.generate()

        match await self._two_fa_code_store.add_code(email, login_attempt_id, code):
            case Failure(error=error):
                self._logger.error("two_fa_code_store_failed")
                return Failure(error=SessionError.unexpected(error))

        match await self._notifier.send(
            email, TWO_FA_SUBJECT, f"Your 2FA code is: {code.value}"
        ):
            case Failure(error=error):
                self._logger.error("two_fa_code_delivery_failed")
                return Failure(error=SessionError.unexpected(error))

        self._logger.info("two_fa_challenge_started", email=email.value)
        return Success(
            value=TwoFactorPending(email=email, login_attempt_id=login_attempt_id)
        )
