"""Session command handlers."""

from warden.application.commands.handlers.login_user_handler import LoginUserHandler
from warden.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from warden.application.commands.handlers.signup_handler import SignupHandler
from warden.application.commands.handlers.verify_token_handler import (
    VerifyTokenHandler,
)
from warden.application.commands.handlers.verify_two_factor_handler import (
    VerifyTwoFactorHandler,
)

__all__ = [
    "LoginUserHandler",
    "LogoutUserHandler",
    "SignupHandler",
    "VerifyTokenHandler",
    "VerifyTwoFactorHandler",
]
