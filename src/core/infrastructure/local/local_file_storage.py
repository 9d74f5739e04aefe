"""Local-disk implementation of MediaFileStorage."""

from pathlib import Path

from aws_lambda_powertools import Logger

from core.models.errors import InternalError, NotFoundError
from core.repositories.storage_repository import MediaFileStorage

logger = Logger(UTC=True)


class LocalFileStorage(MediaFileStorage):
    """Media files kept as flat files under a single root directory."""

    def __init__(self, root: str | Path) -> None:
        """Create storage rooted at ``root``, creating the directory if needed."""
        self._root = Path(root).resolve()
        self._ensure_root()

    @property
    def root(self) -> Path:
        return self._root

    def _ensure_root(self) -> None:
        try:
            self._root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.exception("Failed to create media root", extra={"root": str(self._root)})
            raise InternalError(
                message="Failed to create media directory",
                details={"root": str(self._root)},
            ) from exc

    def path_for(self, stored_name: str) -> Path:
        """Resolve ``stored_name`` to a path directly inside the root.

        Raises:
            InternalError: If the name would escape the root
        """
        path = (self._root / stored_name).resolve()

        if not stored_name or path.parent != self._root:
            raise InternalError(
                message="Invalid stored file name",
                details={"stored_name": stored_name},
            )

        return path

    def save(self, *, stored_name: str, data: bytes) -> str:
        path = self.path_for(stored_name)

        logger.debug("Writing media file", extra={"path": str(path), "size": len(data)})

        self._ensure_root()

        try:
            path.write_bytes(data)
        except OSError as exc:
            logger.exception("Failed to write media file", extra={"path": str(path)})
            raise InternalError(
                message="Failed to save file",
                details={"stored_name": stored_name},
            ) from exc

        return str(path)

    def read(self, *, stored_name: str) -> bytes:
        path = self.path_for(stored_name)

        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise NotFoundError(
                message="Media file not found",
                details={"stored_name": stored_name},
            ) from exc
        except OSError as exc:
            logger.exception("Failed to read media file", extra={"path": str(path)})
            raise InternalError(
                message="Failed to read file",
                details={"stored_name": stored_name},
            ) from exc

    def remove(self, *, stored_name: str) -> None:
        path = self.path_for(stored_name)

        try:
            path.unlink()
        except FileNotFoundError:
            logger.info("Media file already absent", extra={"path": str(path)})
        except OSError as exc:
            logger.exception("Failed to delete media file", extra={"path": str(path)})
            raise InternalError(
                message="Failed to delete file",
                details={"stored_name": stored_name},
            ) from exc
        else:
            logger.debug("Media file deleted", extra={"path": str(path)})
