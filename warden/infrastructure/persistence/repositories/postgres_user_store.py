"""PostgresUserStore - SQLAlchemy implementation of the UserStore protocol.

Adapter for hexagonal architecture. Maps between domain User entities and
the database UserModel. The unique constraint on email is what decides a
concurrent duplicate signup.
"""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from warden.core.enums import ErrorCode
from warden.core.result import Failure, Result, Success
from warden.domain.entities import NewUser, User
from warden.domain.errors import UserStoreError
from warden.domain.protocols import PasswordHashingProtocol
from warden.domain.value_objects import Email, Password
from warden.infrastructure.enums import InfrastructureErrorCode
from warden.infrastructure.errors import DatabaseError
from warden.infrastructure.persistence.database import Database
from warden.infrastructure.persistence.models import UserModel


class PostgresUserStore:
    """SQLAlchemy implementation of the UserStore protocol.

    This class does NOT inherit from UserStore (Protocol uses structural
    typing). Each operation runs in its own session.

    Example:
        >>> store = PostgresUserStore(database, password_service)
        >>> await store.add_user(NewUser(email=email, password=password))
    """

    def __init__(
        self, database: Database, password_service: PasswordHashingProtocol
    ) -> None:
        self._database = database
        self._password_service = password_service

    async def add_user(self, user: NewUser) -> Result[None, UserStoreError]:
        match await self._password_service.hash_password(user.password.value):
            case Failure(error=error):
                return Failure(error=UserStoreError.unexpected(cause=error))
            case Success(value=password_hash):
                pass

        try:
            async with self._database.get_session() as session:
                session.add(
                    UserModel(
                        email=user.email.value,
                        password_hash=password_hash,
                        requires_2fa=user.requires_2fa,
                    )
                )
                await session.flush()
        except IntegrityError:
            return Failure(error=UserStoreError.already_exists())
        except SQLAlchemyError as e:
            return Failure(
                error=UserStoreError.unexpected(cause=self._database_error(e))
            )
        return Success(value=None)

    async def get_user(self, email: Email) -> Result[User, UserStoreError]:
        try:
            async with self._database.get_session() as session:
                result = await session.execute(
                    select(UserModel).where(UserModel.email == email.value)
                )
                user_model = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            return Failure(
                error=UserStoreError.unexpected(cause=self._database_error(e))
            )

        if user_model is None:
            return Failure(error=UserStoreError.not_found())

        return self._to_domain(user_model)

    async def validate_user(
        self, email: Email, password: Password
    ) -> Result[None, UserStoreError]:
        match await self.get_user(email):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=user):
                pass

        if not await self._password_service.verify_password(
            password.value, user.password_hash
        ):
            return Failure(error=UserStoreError.invalid_credentials())
        return Success(value=None)

    def _to_domain(self, user_model: UserModel) -> Result[User, UserStoreError]:
        """Convert database model to domain entity.

        A stored email that no longer parses is reported as UNEXPECTED_ERROR.
        """
        match Email.parse(user_model.email):
            case Failure(error=error):
                return Failure(error=UserStoreError.unexpected(cause=error))
            case Success(value=email):
                return Success(
                    value=User(
                        email=email,
                        password_hash=user_model.password_hash,
                        requires_2fa=user_model.requires_2fa,
                    )
                )

    @staticmethod
    def _database_error(e: SQLAlchemyError) -> DatabaseError:
        return DatabaseError(
            code=ErrorCode.UNEXPECTED_ERROR,
            infrastructure_code=InfrastructureErrorCode.DATABASE_ERROR,
            message="User store query failed",
            details={"error": str(e), "type": type(e).__name__},
        )
