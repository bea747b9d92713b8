"""Domain protocols (ports).

Infrastructure adapters satisfy these structurally; they never inherit from
them.
"""

from warden.domain.protocols.banned_token_store import BannedTokenStore
from warden.domain.protocols.logger_protocol import LoggerProtocol
from warden.domain.protocols.notifier_protocol import NotifierProtocol
from warden.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from warden.domain.protocols.token_service_protocol import (
    TokenClaims,
    TokenServiceProtocol,
)
from warden.domain.protocols.two_fa_code_store import TwoFACodeStore
from warden.domain.protocols.user_store import UserStore

__all__ = [
    "BannedTokenStore",
    "LoggerProtocol",
    "NotifierProtocol",
    "PasswordHashingProtocol",
    "TokenClaims",
    "TokenServiceProtocol",
    "TwoFACodeStore",
    "UserStore",
]
