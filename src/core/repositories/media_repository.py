"""Abstract contract for media metadata persistence."""

from abc import ABC, abstractmethod

from core.models.media import Media


class MediaRepository(ABC):
    """Contract for storing and retrieving media metadata."""

    @abstractmethod
    def save(self, media: Media) -> None:
        """Register a media record under its id, replacing any previous one."""

    @abstractmethod
    def get_by_id(self, media_id: str) -> Media:
        """Fetch a media record.

        Raises:
            NotFoundError: If no record has ``media_id``
        """

    @abstractmethod
    def get_all(self) -> list[Media]:
        """Return every registered media record."""

    @abstractmethod
    def delete(self, media_id: str) -> None:
        """Remove a media record.

        Raises:
            NotFoundError: If no record has ``media_id``
        """
