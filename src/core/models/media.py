"""Shared media metadata model."""

from typing import Any, Literal

from pydantic import BaseModel, Field, StrictInt, StrictStr


class Media(BaseModel):
    """Metadata of a stored media file as returned by the Media API."""

    id: StrictStr = Field(..., min_length=1, description="Unique media identifier (UUID)")
    original_name: StrictStr = Field(..., description="Filename submitted by the client (display only)")
    stored_name: StrictStr = Field(..., description="Server-generated file name, including extension")

    type: Literal["image", "pdf"] = Field(..., description="Media kind")
    format: StrictStr = Field(..., description="Normalized encoding (e.g. webp, pdf)")
    size_bytes: StrictInt = Field(..., ge=0, description="Size of the persisted file in bytes")

    file_path: StrictStr = Field(..., description="Server-controlled storage path")
    uploaded_at: StrictStr = Field(..., description="ISO-8601 upload timestamp (UTC)")

    width: StrictInt | None = Field(None, description="Image width in pixels")
    height: StrictInt | None = Field(None, description="Image height in pixels")

    def to_dict(self) -> dict[str, Any]:
        """Serialize for API responses, omitting absent image dimensions."""
        return self.model_dump(exclude_none=True)


class MediaUploadResponse(BaseModel):
    """Response returned after a successful upload."""

    success: bool = Field(..., description="Whether the upload succeeded")
    message: str = Field(..., description="Human readable outcome")
    media: dict[str, Any] = Field(..., description="Created media metadata")


class MediaListResponse(BaseModel):
    """Response for listing media."""

    total: StrictInt = Field(..., description="Number of media records")
    media: list[dict[str, Any]] = Field(..., description="Media metadata objects")


class MediaDeleteResponse(BaseModel):
    """Response for a successful delete."""

    success: bool
    message: str
