"""Domain entities."""

from warden.domain.entities.user import NewUser, User

__all__ = ["NewUser", "User"]
