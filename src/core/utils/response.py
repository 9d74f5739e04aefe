"""
Centralized API response builder for the API Gateway resolver.
"""

from __future__ import annotations

import json
from http import HTTPStatus
from typing import Any

from aws_lambda_powertools.event_handler import Response

from core.models.errors import get_app_error, status_for_error
from core.utils.constants import (
    DEFAULT_CONTENT_TYPE,
    ERROR_CODE_INTERNAL,
    ERROR_CODE_UNAUTHORIZED,
)
from core.utils.time import utc_now_iso

JsonDict = dict[str, Any]

GENERIC_INTERNAL_MESSAGE = "Internal server error"


class ResponseBuilder:
    """Factory for API Gateway-compatible HTTP responses."""

    @staticmethod
    def _response(
        *,
        status: HTTPStatus,
        body: JsonDict | list[Any],
        request_id: str | None = None,
    ) -> Response:
        payload: JsonDict | list[Any] = body

        if request_id and isinstance(body, dict):
            payload = {**body, "request_id": request_id}

        return Response(
            status_code=status.value,
            content_type=DEFAULT_CONTENT_TYPE,
            body=json.dumps(payload),
        )

    @staticmethod
    def ok(body: JsonDict | list[Any], *, request_id: str | None = None) -> Response:
        return ResponseBuilder._response(status=HTTPStatus.OK, body=body, request_id=request_id)

    @staticmethod
    def created(body: JsonDict, *, request_id: str | None = None) -> Response:
        return ResponseBuilder._response(
            status=HTTPStatus.CREATED,
            body=body,
            request_id=request_id,
        )

    @staticmethod
    def no_content() -> Response:
        return Response(status_code=HTTPStatus.NO_CONTENT.value, content_type=None, body="")

    @staticmethod
    def error(
        *,
        status: HTTPStatus,
        message: str,
        error: str | None = None,
        details: JsonDict | None = None,
        request_id: str | None = None,
    ) -> Response:
        """Build the canonical error envelope shared by every resource."""
        payload: JsonDict = {
            "error": message,
            "code": error or status.name,
            "timestamp": utc_now_iso(),
        }

        if details:
            payload["details"] = details

        return ResponseBuilder._response(status=status, body=payload, request_id=request_id)

    @staticmethod
    def unauthorized(
        message: str = "Missing authorization header",
        *,
        request_id: str | None = None,
    ) -> Response:
        return ResponseBuilder.error(
            status=HTTPStatus.UNAUTHORIZED,
            message=message,
            error=ERROR_CODE_UNAUTHORIZED,
            request_id=request_id,
        )

    @staticmethod
    def internal_error(
        message: str = GENERIC_INTERNAL_MESSAGE,
        *,
        request_id: str | None = None,
    ) -> Response:
        return ResponseBuilder.error(
            status=HTTPStatus.INTERNAL_SERVER_ERROR,
            message=message,
            error=ERROR_CODE_INTERNAL,
            request_id=request_id,
        )

    @staticmethod
    def from_exception(exc: BaseException, *, request_id: str | None = None) -> Response:
        """Translate any error into a response using the single status mapping.

        Internal and unclassified failures never expose their message or
        cause to the client.
        """
        status = status_for_error(exc)
        app_error = get_app_error(exc)

        if app_error is None or status == HTTPStatus.INTERNAL_SERVER_ERROR:
            return ResponseBuilder.internal_error(request_id=request_id)

        return ResponseBuilder.error(
            status=status,
            message=app_error.message,
            error=app_error.error_code,
            details=app_error.details,
            request_id=request_id,
        )

    @staticmethod
    def binary_response(
        content: bytes,
        *,
        content_type: str,
        headers: dict[str, str] | None = None,
    ) -> Response:
        """Binary body; the resolver base64-encodes bytes for API Gateway."""
        response_headers: dict[str, str] = {"Content-Length": str(len(content))}

        if headers:
            response_headers.update(headers)

        return Response(
            status_code=HTTPStatus.OK.value,
            content_type=content_type,
            body=content,
            headers=response_headers,
        )
