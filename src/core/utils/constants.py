"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================

ERROR_CODE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_BAD_REQUEST = "BAD_REQUEST"
ERROR_CODE_INTERNAL = "INTERNAL_ERROR"
ERROR_CODE_INVALID_ID = "INVALID_ID"
ERROR_CODE_FILE_TOO_LARGE = "FILE_TOO_LARGE"
ERROR_CODE_UNSUPPORTED_TYPE = "UNSUPPORTED_TYPE"
ERROR_CODE_UNAUTHORIZED = "UNAUTHORIZED"


# ============================================================================
# File Upload Constraints
# ============================================================================

MAX_FILE_SIZE = 200 * 1024 * 1024  # 200 MiB in bytes

IMAGE_QUALITY = 85

NORMALIZED_IMAGE_FORMAT = "webp"
PDF_FORMAT = "pdf"

MEDIA_TYPE_IMAGE = "image"
MEDIA_TYPE_PDF = "pdf"

MULTIPART_FILE_FIELD = "file"

SUPPORTED_IMAGE_TYPES: Final[tuple[str, ...]] = (
    "image/jpeg",
    "image/png",
    "image/webp",
    "image/gif",
)

PDF_CONTENT_TYPE = "application/pdf"

SUPPORTED_CONTENT_TYPES: Final[tuple[str, ...]] = (*SUPPORTED_IMAGE_TYPES, PDF_CONTENT_TYPE)

EXTENSION_CONTENT_TYPE_MAP: Final[dict[str, str]] = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".gif": "image/gif",
    ".pdf": PDF_CONTENT_TYPE,
}

# Pillow decoder names per accepted image type
IMAGE_DECODERS: Final[dict[str, tuple[str, ...]]] = {
    "image/jpeg": ("JPEG",),
    "image/png": ("PNG",),
    "image/webp": ("WEBP",),
    "image/gif": ("GIF",),
}

FORMAT_CONTENT_TYPE_MAP: Final[dict[str, str]] = {
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "webp": "image/webp",
    "gif": "image/gif",
    "pdf": PDF_CONTENT_TYPE,
}

# ============================================================================
# Request Context
# ============================================================================

USER_ID_PATH_PARAM = "user_id"
REQUEST_SCOPE_KEY = "request_scope"
AUTHORIZATION_HEADER = "Authorization"

# ============================================================================
# Demo Data
# ============================================================================

DEMO_USERS: Final[tuple[dict[str, str | int], ...]] = (
    {"name": "John Doe", "email": "john@example.com", "age": 30},
    {"name": "Jane Smith", "email": "jane@example.com", "age": 28},
    {"name": "Bob Johnson", "email": "bob@example.com", "age": 35},
)

# ============================================================================
# API Gateway Configuration
# ============================================================================

DEFAULT_CONTENT_TYPE = "application/json"
BINARY_CONTENT_TYPE = "application/octet-stream"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_MEDIA_STORAGE_ROOT = "MEDIA_STORAGE_ROOT"
ENV_SEED_DEMO_USERS = "SEED_DEMO_USERS"
DEFAULT_MEDIA_STORAGE_ROOT = "/tmp/uploads"
METRICS_NAMESPACE = "MediaUserService"

# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb() -> int:
    """Get maximum file size in megabytes."""
    return MAX_FILE_SIZE // (1024 * 1024)


def format_size_mb(size_bytes: int) -> str:
    """Format a byte count as MiB with two decimals (e.g. ``"201.50"``)."""
    return f"{size_bytes / (1024 * 1024):.2f}"
