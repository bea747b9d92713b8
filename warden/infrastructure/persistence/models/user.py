"""User database model.

Security:
    - password_hash: NEVER stores plaintext passwords (argon2id PHC string)
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from warden.infrastructure.persistence.base import BaseModel


class UserModel(BaseModel):
    """Registered principal.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when user registered (from BaseModel)
        email: Unique normalized email address
        password_hash: Argon2id hash (NEVER plaintext)
        requires_2fa: Whether login needs an emailed one-time code
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
    )
    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    requires_2fa: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"
