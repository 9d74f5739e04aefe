"""Abstract contract for user persistence."""

from abc import ABC, abstractmethod

from core.models.user import User


class UserRepository(ABC):
    """Contract for storing and retrieving users.

    Implementations could be in-memory, PostgreSQL, DynamoDB, etc.
    """

    @abstractmethod
    def create(self, user: User) -> User:
        """Store a new user and return it with its assigned id.

        The incoming ``id`` is ignored; ids are assigned by the store,
        are positive and never reused.
        """

    @abstractmethod
    def get_by_id(self, user_id: int) -> User:
        """Fetch a user.

        Raises:
            NotFoundError: If no user has ``user_id``
        """

    @abstractmethod
    def get_all(self) -> list[User]:
        """Return every stored user, in id order."""

    @abstractmethod
    def update(self, user_id: int, user: User) -> User:
        """Replace the fields of an existing user, keeping its id.

        Raises:
            NotFoundError: If no user has ``user_id``
        """

    @abstractmethod
    def delete(self, user_id: int) -> None:
        """Remove a user.

        Raises:
            NotFoundError: If no user has ``user_id``
        """
