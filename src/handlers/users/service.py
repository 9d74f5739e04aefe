"""Business logic for user operations."""

from typing import Any

from aws_lambda_powertools import Logger

from core.models.errors import BadRequestError, InvalidIDError
from core.models.user import User
from core.repositories.user_repository import UserRepository
from core.utils.deadline import ensure_not_cancelled

logger = Logger(UTC=True)


class UserService:
    """Application service for the user lifecycle.

    Every operation first checks that the calling invocation has not been
    cancelled, then delegates to the repository.
    """

    def __init__(self, repository: UserRepository) -> None:
        self.repository = repository

    @staticmethod
    def _validate_fields(user: User) -> None:
        if not user.name.strip() or not user.email.strip():
            raise BadRequestError(message="name and email are required")

    @staticmethod
    def _validate_id(user_id: int) -> None:
        if user_id <= 0:
            raise InvalidIDError(message="Invalid ID format", details={"user_id": user_id})

    def create_user(self, user: User, context: Any = None) -> User:
        ensure_not_cancelled(context)
        self._validate_fields(user)

        created = self.repository.create(user)
        logger.info("User created", extra={"user_id": created.id})
        return created

    def get_user(self, user_id: int, context: Any = None) -> User:
        ensure_not_cancelled(context)
        self._validate_id(user_id)

        return self.repository.get_by_id(user_id)

    def get_all_users(self, context: Any = None) -> list[User]:
        ensure_not_cancelled(context)

        return self.repository.get_all()

    def update_user(self, user_id: int, user: User, context: Any = None) -> User:
        """Overwrite name, email and age of an existing user.

        Raises:
            InvalidIDError: If ``user_id`` is not positive
            BadRequestError: If name or email is empty
            NotFoundError: If the user does not exist
        """
        ensure_not_cancelled(context)
        self._validate_id(user_id)
        self._validate_fields(user)

        updated = self.repository.update(user_id, user)
        logger.info("User updated", extra={"user_id": user_id})
        return updated

    def delete_user(self, user_id: int, context: Any = None) -> None:
        ensure_not_cancelled(context)
        self._validate_id(user_id)

        self.repository.delete(user_id)
        logger.info("User deleted", extra={"user_id": user_id})
