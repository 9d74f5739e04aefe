from collections.abc import Mapping
from pathlib import PurePath

from core.utils.constants import (
    BINARY_CONTENT_TYPE,
    EXTENSION_CONTENT_TYPE_MAP,
    FORMAT_CONTENT_TYPE_MAP,
    SUPPORTED_CONTENT_TYPES,
    SUPPORTED_IMAGE_TYPES,
)


def content_type_from_name(filename: str | None) -> str:
    """Look up a content type from the file extension; unknown yields ``""``."""
    if not filename:
        return ""

    extension_map: Mapping[str, str] = EXTENSION_CONTENT_TYPE_MAP
    return extension_map.get(PurePath(filename).suffix.lower(), "")


def resolve_content_type(declared: str | None, filename: str | None) -> str:
    """Prefer the declared MIME type, falling back to the extension table."""
    if declared and declared.strip():
        return declared.strip()

    return content_type_from_name(filename)


def is_supported_content_type(content_type: str) -> bool:
    return bool(content_type) and any(ct in content_type for ct in SUPPORTED_CONTENT_TYPES)


def matching_image_type(content_type: str) -> str | None:
    """Return the supported image type contained in ``content_type``, if any."""
    for image_type in SUPPORTED_IMAGE_TYPES:
        if image_type in content_type:
            return image_type
    return None


def content_type_for_format(media_format: str) -> str:
    """Content type used when serving a stored file of the given format."""
    return FORMAT_CONTENT_TYPE_MAP.get(media_format.lower(), BINARY_CONTENT_TYPE)
