"""In-memory implementation of MediaRepository."""

from aws_lambda_powertools import Logger

from core.models.errors import NotFoundError
from core.models.media import Media
from core.repositories.media_repository import MediaRepository
from core.utils.locks import ReadWriteLock

logger = Logger(UTC=True)


class InMemoryMediaStore(MediaRepository):
    """Media metadata keyed by media id, guarded by a reader/writer lock."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._media: dict[str, Media] = {}

    def save(self, media: Media) -> None:
        with self._lock.write_lock():
            self._media[media.id] = media.model_copy()

        logger.debug("Media registered", extra={"media_id": media.id})

    def get_by_id(self, media_id: str) -> Media:
        with self._lock.read_lock():
            media = self._media.get(media_id)

        if media is None:
            raise NotFoundError(message="Media not found", details={"media_id": media_id})

        return media.model_copy()

    def get_all(self) -> list[Media]:
        with self._lock.read_lock():
            records = list(self._media.values())

        return [media.model_copy() for media in records]

    def delete(self, media_id: str) -> None:
        with self._lock.write_lock():
            if self._media.pop(media_id, None) is None:
                raise NotFoundError(message="Media not found", details={"media_id": media_id})

        logger.debug("Media removed", extra={"media_id": media_id})
