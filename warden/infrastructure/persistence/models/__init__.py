"""Database models."""

from warden.infrastructure.persistence.models.user import UserModel

__all__ = ["UserModel"]
