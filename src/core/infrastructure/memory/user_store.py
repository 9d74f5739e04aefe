"""In-memory implementation of UserRepository."""

from collections.abc import Iterable, Mapping

from aws_lambda_powertools import Logger

from core.models.errors import NotFoundError
from core.models.user import User
from core.repositories.user_repository import UserRepository
from core.utils.locks import ReadWriteLock

logger = Logger(UTC=True)


class InMemoryUserStore(UserRepository):
    """Users kept in a process-local map guarded by a reader/writer lock.

    Ids are assigned sequentially from 1 and never reused, even after a
    delete. Records are copied in and out so callers cannot mutate stored
    state.
    """

    def __init__(self, seed: Iterable[Mapping[str, object]] = ()) -> None:
        self._lock = ReadWriteLock()
        self._users: dict[int, User] = {}
        self._next_id = 1

        for fields in seed:
            self.create(User.model_validate(dict(fields)))

    def create(self, user: User) -> User:
        with self._lock.write_lock():
            created = user.model_copy(update={"id": self._next_id})
            self._users[created.id] = created
            self._next_id += 1

        logger.debug("User created", extra={"user_id": created.id})
        return created.model_copy()

    def get_by_id(self, user_id: int) -> User:
        with self._lock.read_lock():
            user = self._users.get(user_id)

        if user is None:
            raise NotFoundError(message="User not found", details={"user_id": user_id})

        return user.model_copy()

    def get_all(self) -> list[User]:
        with self._lock.read_lock():
            users = [self._users[user_id] for user_id in sorted(self._users)]

        return [user.model_copy() for user in users]

    def update(self, user_id: int, user: User) -> User:
        with self._lock.write_lock():
            if user_id not in self._users:
                raise NotFoundError(message="User not found", details={"user_id": user_id})

            updated = user.model_copy(update={"id": user_id})
            self._users[user_id] = updated

        logger.debug("User updated", extra={"user_id": user_id})
        return updated.model_copy()

    def delete(self, user_id: int) -> None:
        with self._lock.write_lock():
            if self._users.pop(user_id, None) is None:
                raise NotFoundError(message="User not found", details={"user_id": user_id})

        logger.debug("User deleted", extra={"user_id": user_id})
