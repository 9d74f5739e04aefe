"""Business logic for media operations.

This module runs the upload pipeline (size ceiling, content type
resolution, image normalization, persistence and registration) and the
read and delete operations, translating failures into classified errors.
"""

import uuid
from typing import Any

from aws_lambda_powertools import Logger
from PIL import UnidentifiedImageError

from core.models.errors import (
    AppError,
    FileTooLargeError,
    InternalError,
    UnsupportedTypeError,
)
from core.models.media import Media
from core.repositories.media_repository import MediaRepository
from core.repositories.storage_repository import MediaFileStorage
from core.utils.constants import (
    MAX_FILE_SIZE,
    MEDIA_TYPE_IMAGE,
    MEDIA_TYPE_PDF,
    PDF_FORMAT,
    SUPPORTED_CONTENT_TYPES,
    format_size_mb,
    get_max_file_size_mb,
)
from core.utils.deadline import ensure_not_cancelled
from core.utils.images import normalize_image
from core.utils.mime import is_supported_content_type, matching_image_type, resolve_content_type
from core.utils.multipart import UploadedFile
from core.utils.time import unix_time_ns, utc_now_iso

logger = Logger(UTC=True)


class MediaService:
    """Application service responsible for media files.

    This service orchestrates:
    - Upload validation and image normalization
    - Writing file content to storage
    - Registering metadata with the media repository
    """

    def __init__(self, repository: MediaRepository, storage: MediaFileStorage) -> None:
        self.repository = repository
        self.storage = storage

    @staticmethod
    def generate_stored_name(media_format: str) -> str:
        """Collision-resistant file name: ``{uuid4}_{time_ns}.{format}``."""
        return f"{uuid.uuid4()}_{unix_time_ns()}.{media_format}"

    def upload_media(self, file: UploadedFile, context: Any = None) -> Media:
        """Validate, normalize, persist and register an uploaded file.

        The upload flow is:
        1. Reject cancelled invocations
        2. Enforce the size ceiling on the declared size
        3. Resolve and validate the content type
        4. Re-encode images; keep PDFs verbatim
        5. Write the bytes under a generated name
        6. Register the metadata

        The written file is not removed when registration fails.

        Raises:
            FileTooLargeError: If the declared size exceeds the ceiling
            UnsupportedTypeError: If the content type is not accepted
            InternalError: On cancellation, decode, write or registration failure
        """
        ensure_not_cancelled(context)

        if file.size > MAX_FILE_SIZE:
            logger.warning(
                "Upload exceeds size limit",
                extra={"size": file.size, "original_name": file.filename},
            )
            raise FileTooLargeError(
                message=(
                    f"File size {format_size_mb(file.size)}MB exceeds maximum allowed size "
                    f"of {get_max_file_size_mb()}MB"
                ),
                details={"size_bytes": file.size, "max_bytes": MAX_FILE_SIZE},
            )

        try:
            stream = file.open()
        except OSError as exc:
            logger.exception("Failed to open uploaded file", extra={"original_name": file.filename})
            raise InternalError(message="Failed to open file") from exc

        with stream:
            content_type = resolve_content_type(file.content_type, file.filename)

            if not is_supported_content_type(content_type):
                logger.warning("Unsupported content type", extra={"content_type": content_type})
                raise UnsupportedTypeError(
                    message=(
                        f"Unsupported file type: {content_type}. "
                        f"Supported types: {', '.join(SUPPORTED_CONTENT_TYPES)}"
                    ),
                    details={"content_type": content_type},
                )

            try:
                data = stream.read()
            except OSError as exc:
                logger.exception("Failed to read uploaded file", extra={"original_name": file.filename})
                raise InternalError(message="Failed to read file") from exc

        width: int | None = None
        height: int | None = None
        image_type = matching_image_type(content_type)

        if image_type is not None:
            media_type = MEDIA_TYPE_IMAGE

            try:
                normalized = normalize_image(data, image_type)
            except (UnidentifiedImageError, OSError, ValueError) as exc:
                logger.exception(
                    "Failed to decode image",
                    extra={"content_type": image_type, "original_name": file.filename},
                )
                raise InternalError(message="Failed to decode image") from exc

            data = normalized.data
            media_format = normalized.format

            if normalized.width > 0 and normalized.height > 0:
                width, height = normalized.width, normalized.height
        else:
            media_type = MEDIA_TYPE_PDF
            media_format = PDF_FORMAT

        stored_name = self.generate_stored_name(media_format)
        file_path = self.storage.save(stored_name=stored_name, data=data)

        media = Media(
            id=str(uuid.uuid4()),
            original_name=file.filename,
            stored_name=stored_name,
            type=media_type,
            format=media_format,
            size_bytes=len(data),
            file_path=file_path,
            uploaded_at=utc_now_iso(),
            width=width,
            height=height,
        )

        try:
            self.repository.save(media)
        except Exception as exc:
            logger.exception(
                "Failed to register media metadata",
                extra={"media_id": media.id, "file_path": file_path},
            )
            raise InternalError(
                message="Failed to save media metadata",
                details={"media_id": media.id},
            ) from exc

        logger.info(
            "Media uploaded",
            extra={
                "media_id": media.id,
                "type": media.type,
                "format": media.format,
                "size_bytes": media.size_bytes,
            },
        )
        return media

    def get_media(self, media_id: str, context: Any = None) -> Media:
        ensure_not_cancelled(context)
        return self.repository.get_by_id(media_id)

    def get_all_media(self, context: Any = None) -> list[Media]:
        ensure_not_cancelled(context)

        try:
            return self.repository.get_all()
        except AppError:
            raise
        except Exception as exc:
            logger.exception("Failed to list media")
            raise InternalError(message="Failed to list media") from exc

    def open_media(self, media_id: str, context: Any = None) -> tuple[Media, bytes]:
        """Return a media record together with its stored bytes.

        Raises:
            NotFoundError: If the record or its file does not exist
        """
        media = self.get_media(media_id, context)
        return media, self.storage.read(stored_name=media.stored_name)

    def delete_media(self, media_id: str, context: Any = None) -> None:
        """Remove the stored file, then the metadata record.

        A file that is already gone does not stop the delete.

        Raises:
            NotFoundError: If no record has ``media_id``
            InternalError: If file or metadata removal fails
        """
        media = self.get_media(media_id, context)

        self.storage.remove(stored_name=media.stored_name)

        try:
            self.repository.delete(media_id)
        except Exception as exc:
            logger.exception(
                "Failed to remove media metadata after file removal",
                extra={"media_id": media_id},
            )
            raise InternalError(
                message="Failed to delete media metadata",
                details={"media_id": media_id},
            ) from exc

        logger.info("Media deleted", extra={"media_id": media_id})
