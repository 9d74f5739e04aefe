"""Image decoding and normalization.

Every accepted image is decoded with the codec matching its resolved
content type and re-encoded to a single output format at a fixed quality.
Normalization never resizes, so decoded and stored dimensions are equal.
"""

import io
from dataclasses import dataclass

from PIL import Image

from core.utils.constants import IMAGE_DECODERS, IMAGE_QUALITY, NORMALIZED_IMAGE_FORMAT

# Modes the WebP encoder accepts as-is
_ENCODABLE_MODES = frozenset({"RGB", "RGBA"})


@dataclass(frozen=True)
class NormalizedImage:
    """Result of re-encoding an uploaded image."""

    data: bytes
    width: int
    height: int
    format: str = NORMALIZED_IMAGE_FORMAT


def _encodable(image: Image.Image) -> Image.Image:
    if image.mode in _ENCODABLE_MODES:
        return image

    has_alpha = "A" in image.getbands() or (
        image.mode == "P" and "transparency" in image.info
    )
    return image.convert("RGBA" if has_alpha else "RGB")


def normalize_image(
    data: bytes,
    image_type: str,
    *,
    quality: int = IMAGE_QUALITY,
) -> NormalizedImage:
    """Decode ``data`` as ``image_type`` and re-encode it as WebP.

    Args:
        data: Raw uploaded bytes
        image_type: One of the supported image MIME types
        quality: Encoder quality on a 0-100 scale

    Returns:
        The encoded bytes and the decoded pixel bounds

    Raises:
        KeyError: If ``image_type`` has no registered decoder
        PIL.UnidentifiedImageError: If the bytes are not a ``image_type`` image
        OSError: If decoding or encoding fails
    """
    decoders = IMAGE_DECODERS[image_type]

    with Image.open(io.BytesIO(data), formats=decoders) as image:
        image.load()
        width, height = image.size

        output = io.BytesIO()
        _encodable(image).save(output, format=NORMALIZED_IMAGE_FORMAT.upper(), quality=quality)

    return NormalizedImage(data=output.getvalue(), width=width, height=height)
