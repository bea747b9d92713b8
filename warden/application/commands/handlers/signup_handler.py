"""Signup handler.

Flow:
1. Parse email and password (policy check)
2. Add user to the store (store hashes the password)
3. Return Success(email)
"""

from warden.application.commands.auth_commands import SignupUser
from warden.application.errors import SessionError
from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result, Success
from warden.domain.entities import NewUser
from warden.domain.protocols import LoggerProtocol, UserStore
from warden.domain.value_objects import Email, Password


class SignupHandler:
    """Handler for the signup command."""

    def __init__(self, user_store: UserStore, logger: LoggerProtocol) -> None:
        self._user_store = user_store
        self._logger = logger.bind(handler="signup")

    async def handle(self, cmd: SignupUser) -> Result[Email, SessionError]:
        """Register a principal.

        Returns:
            Success(Email) with the normalized email.
            Failure(SessionError) with INVALID_CREDENTIALS,
            USER_ALREADY_EXISTS or UNEXPECTED_ERROR.
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

        new_user = NewUser(
            email=email, password=password, requires_2fa=cmd.requires_2fa
        )
        match await self._user_store.add_user(new_user):
            case Failure(error=error) if error.code == ErrorCode.USER_ALREADY_EXISTS:
                self._logger.info("signup_rejected", reason=error.code.value)
                return Failure(error=SessionError.user_already_exists(error))
            case Failure(error=error):
                self._logger.error("signup_failed", reason=error.code.value)
                return Failure(error=SessionError.unexpected(error))

        self._logger.info(
            "user_signed_up", email=email.value, requires_2fa=cmd.requires_2fa
        )
        return Success(value=email)
