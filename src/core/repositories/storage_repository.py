"""Abstract contract for media file storage."""

from abc import ABC, abstractmethod


class MediaFileStorage(ABC):
    """Contract for storing and retrieving media files.

    Implementations could be local disk, S3, GCS, etc.
    Services depend on this interface, not the implementation.
    """

    @abstractmethod
    def save(self, *, stored_name: str, data: bytes) -> str:
        """Write a file and return its path.

        Args:
            stored_name: Server-generated file name, including extension
            data: Binary file content

        Returns:
            Path of the written file

        Raises:
            InternalError: If the write fails
        """

    @abstractmethod
    def read(self, *, stored_name: str) -> bytes:
        """Read a stored file.

        Raises:
            NotFoundError: If the file doesn't exist
            InternalError: If the read fails
        """

    @abstractmethod
    def remove(self, *, stored_name: str) -> None:
        """Delete a stored file. A file that is already gone is not an error.

        Raises:
            InternalError: If deletion fails
        """
