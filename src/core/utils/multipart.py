"""Parsing of multipart/form-data request bodies delivered by API Gateway."""

from __future__ import annotations

import base64
import binascii
import io
from dataclasses import dataclass
from email.message import Message
from email.utils import collapse_rfc2231_value
from typing import BinaryIO

from aws_lambda_powertools import Logger
from requests_toolbelt.multipart.decoder import MultipartDecoder

from core.models.errors import BadRequestError

logger = Logger(UTC=True)

_DISPOSITION = "Content-Disposition"


@dataclass(frozen=True)
class UploadedFile:
    """A file part taken from a multipart form.

    ``size`` and ``content_type`` are what the client declared; both are
    untrusted and re-validated by the upload pipeline.
    """

    filename: str
    content_type: str
    size: int
    data: bytes

    def open(self) -> BinaryIO:
        """Return a fresh readable stream over the file content."""
        return io.BytesIO(self.data)


def decode_body(body: str | None, *, is_base64_encoded: bool) -> bytes:
    """Return the raw request body bytes.

    Raises:
        BadRequestError: If a base64 body cannot be decoded
    """
    if not body:
        return b""

    if not is_base64_encoded:
        return body.encode("utf-8")

    try:
        return base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise BadRequestError(message="Failed to parse form") from exc


def _disposition_params(value: str) -> tuple[str | None, str | None]:
    message = Message()
    message[_DISPOSITION] = value

    name = message.get_param("name", header=_DISPOSITION)
    if isinstance(name, tuple):
        name = collapse_rfc2231_value(name)

    return name, message.get_filename()


def extract_file(body: bytes, content_type: str | None, *, field: str) -> UploadedFile:
    """Find the file part named ``field`` in a multipart body.

    Raises:
        BadRequestError: If the body is not a parseable multipart form, or
            the form has no file under ``field``
    """
    if not content_type or "multipart/form-data" not in content_type.lower():
        raise BadRequestError(
            message="Failed to parse form",
            details={"content_type": content_type or ""},
        )

    try:
        decoder = MultipartDecoder(body, content_type)
        parts = decoder.parts
    except Exception as exc:
        logger.warning("Multipart body could not be decoded", extra={"error": str(exc)})
        raise BadRequestError(message="Failed to parse form") from exc

    for part in parts:
        disposition = part.headers.get(_DISPOSITION.encode())
        if not disposition:
            continue

        name, filename = _disposition_params(disposition.decode(decoder.encoding))
        if name != field or filename is None:
            continue

        part_type = part.headers.get(b"Content-Type", b"").decode(decoder.encoding)

        return UploadedFile(
            filename=filename,
            content_type=part_type.strip(),
            size=len(part.content),
            data=part.content,
        )

    raise BadRequestError(
        message="Failed to get file from request",
        details={"field": field},
    )
