"""SQLAlchemy store implementations."""

from warden.infrastructure.persistence.repositories.postgres_user_store import (
    PostgresUserStore,
)

__all__ = ["PostgresUserStore"]
