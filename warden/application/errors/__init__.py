"""Application layer errors.

Exports:
    SessionError: Error returned by every session command handler
"""

from warden.application.errors.session_error import SessionError

__all__ = ["SessionError"]
