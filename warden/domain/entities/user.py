"""User domain entities.

Pure business data, no framework dependencies.

Two shapes exist because a plaintext password only ever travels inward:
    - NewUser: signup input, carries a policy-checked plaintext Password
    - User: stored principal, carries only the password hash
"""

from dataclasses import dataclass

from warden.domain.value_objects import Email, Password


@dataclass(frozen=True, kw_only=True)
class NewUser:
    """Principal to be registered.

    Attributes:
        email: Normalized email (identity key).
        password: Plaintext password that passed the policy.
        requires_2fa: Whether login needs an emailed one-time code.
    """

    email: Email
    password: Password
    requires_2fa: bool = False


@dataclass(frozen=True, kw_only=True)
class User:
    """Registered principal.

    Attributes:
        email: Normalized email (identity key).
        password_hash: Argon2id PHC string, never plaintext.
        requires_2fa: Whether login needs an emailed one-time code.
    """

    email: Email
    password_hash: str
    requires_2fa: bool = False

    def __repr__(self) -> str:
        return f"User(email={self.email!r}, requires_2fa={self.requires_2fa})"
