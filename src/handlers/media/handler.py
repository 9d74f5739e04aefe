"""
HTTP routes for the Media API.
"""

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.metrics import MetricUnit

from core.models.media import MediaDeleteResponse, MediaListResponse, MediaUploadResponse
from core.utils.constants import METRICS_NAMESPACE, MULTIPART_FILE_FIELD
from core.utils.mime import content_type_for_format
from core.utils.multipart import decode_body, extract_file
from core.utils.request import get_header
from core.utils.response import ResponseBuilder

from .service import MediaService

logger = Logger(UTC=True)
metrics = Metrics(namespace=METRICS_NAMESPACE)

# Characters that would break out of a quoted header parameter
_UNSAFE_FILENAME_CHARS = str.maketrans({'"': "_", "\\": "_", "\r": "_", "\n": "_"})


def attachment_disposition(filename: str) -> str:
    """``Content-Disposition`` value offering ``filename`` as a download."""
    return f'attachment; filename="{filename.translate(_UNSAFE_FILENAME_CHARS)}"'


class MediaHandler:
    """Translate between API Gateway requests and :class:`MediaService`."""

    def __init__(self, app: APIGatewayRestResolver, service: MediaService) -> None:
        self.app = app
        self.service = service

    def register_routes(self) -> None:
        app = self.app

        app.post("/media/upload")(self.upload_media)
        app.get("/media")(self.list_media)
        app.get("/media/<media_id>")(self.get_media)
        app.get("/media/<media_id>/download")(self.download_media)
        app.delete("/media/<media_id>")(self.delete_media)

    def upload_media(self) -> Response:
        event = self.app.current_event

        body = decode_body(event.body, is_base64_encoded=event.is_base64_encoded)
        file = extract_file(
            body,
            get_header(self.app, "Content-Type"),
            field=MULTIPART_FILE_FIELD,
        )

        logger.debug(
            "Received media upload",
            extra={
                "original_name": file.filename,
                "declared_type": file.content_type,
                "size": file.size,
            },
        )

        media = self.service.upload_media(file, self.app.lambda_context)

        metrics.add_metric(name="MediaUploaded", unit=MetricUnit.Count, value=1)

        response = MediaUploadResponse(
            success=True,
            message="File uploaded successfully",
            media=media.to_dict(),
        )
        return ResponseBuilder.created(response.model_dump())

    def list_media(self) -> Response:
        records = self.service.get_all_media(self.app.lambda_context)

        response = MediaListResponse(
            total=len(records),
            media=[media.to_dict() for media in records],
        )
        return ResponseBuilder.ok(response.model_dump())

    def get_media(self, media_id: str) -> Response:
        media = self.service.get_media(media_id, self.app.lambda_context)
        return ResponseBuilder.ok(media.to_dict())

    def download_media(self, media_id: str) -> Response:
        media, content = self.service.open_media(media_id, self.app.lambda_context)

        return ResponseBuilder.binary_response(
            content,
            content_type=content_type_for_format(media.format),
            headers={"Content-Disposition": attachment_disposition(media.original_name)},
        )

    def delete_media(self, media_id: str) -> Response:
        self.service.delete_media(media_id, self.app.lambda_context)

        metrics.add_metric(name="MediaDeleted", unit=MetricUnit.Count, value=1)

        response = MediaDeleteResponse(success=True, message="Media deleted successfully")
        return ResponseBuilder.ok(response.model_dump())
