"""Domain value objects.

Value objects are immutable and validated on construction: an invalid input
never produces a value. Each type also exposes a ``parse`` classmethod that
returns a Result instead of raising.
"""

from warden.domain.value_objects.bearer_token import BearerToken
from warden.domain.value_objects.email import Email
from warden.domain.value_objects.login_attempt_id import LoginAttemptId
from warden.domain.value_objects.password import Password
from warden.domain.value_objects.two_fa_code import TwoFACode

__all__ = [
    "BearerToken",
    "Email",
    "LoginAttemptId",
    "Password",
    "TwoFACode",
]
