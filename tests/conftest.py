"""
Pytest configuration and fixtures for media-user-service tests.
Provides Lambda context, resolver, API Gateway event and sample file fixtures.
"""

import base64
import io
import json
import os
import tempfile
from collections.abc import Callable
from types import SimpleNamespace
from typing import Any

import pytest
from PIL import Image
from requests_toolbelt import MultipartEncoder

os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "media-user-service")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "MediaUserService")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")
os.environ.setdefault("MEDIA_STORAGE_ROOT", tempfile.mkdtemp(prefix="media-user-service-"))

from core.container import Container  # noqa: E402

AUTH_HEADERS = {"Authorization": "Bearer test-token"}


@pytest.fixture
def lambda_context() -> SimpleNamespace:
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
        get_remaining_time_in_millis=lambda: 30_000,
    )


@pytest.fixture
def expired_context(lambda_context) -> SimpleNamespace:
    """Context of an invocation with no execution time left."""
    lambda_context.get_remaining_time_in_millis = lambda: 0
    return lambda_context


@pytest.fixture
def media_root(tmp_path):
    return tmp_path / "uploads"


@pytest.fixture
def container(media_root) -> Container:
    return Container(media_root=str(media_root))


@pytest.fixture
def app(container):
    return container.build_resolver()


@pytest.fixture
def make_event() -> Callable[..., dict[str, Any]]:
    """
    Build an API Gateway REST proxy event.

    Usage:
        event = make_event("POST", "/users", body={"name": "Ann"})
    """

    def _make(
        method: str,
        path: str,
        *,
        body: dict[str, Any] | str | None = None,
        headers: dict[str, str] | None = None,
        is_base64_encoded: bool = False,
        authorized: bool = True,
    ) -> dict[str, Any]:
        request_headers: dict[str, str] = dict(AUTH_HEADERS) if authorized else {}
        request_headers.update(headers or {})

        if isinstance(body, dict):
            body = json.dumps(body)
            request_headers.setdefault("Content-Type", "application/json")

        return {
            "resource": path,
            "path": path,
            "httpMethod": method,
            "headers": request_headers,
            "multiValueHeaders": {key: [value] for key, value in request_headers.items()},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "body": body,
            "isBase64Encoded": is_base64_encoded,
            "requestContext": {
                "requestId": "test-request-id",
                "stage": "test",
                "httpMethod": method,
                "path": path,
                "identity": {"sourceIp": "127.0.0.1"},
            },
        }

    return _make


@pytest.fixture
def invoke(app, lambda_context) -> Callable[[dict[str, Any]], dict[str, Any]]:
    """Resolve an event against the shared test resolver."""

    def _invoke(event: dict[str, Any]) -> dict[str, Any]:
        response: dict[str, Any] = app.resolve(event, lambda_context)
        return response

    return _invoke


@pytest.fixture
def make_image() -> Callable[..., bytes]:
    """
    Render a solid-colour image with Pillow.

    Usage:
        png = make_image("PNG", (40, 30))
    """

    def _make(
        pil_format: str = "PNG",
        size: tuple[int, int] = (32, 24),
        mode: str = "RGB",
        color: Any = "red",
    ) -> bytes:
        buffer = io.BytesIO()
        Image.new(mode, size, color).save(buffer, format=pil_format)
        return buffer.getvalue()

    return _make


@pytest.fixture
def multipart_body() -> Callable[..., tuple[str, str]]:
    """
    Encode a multipart form the way API Gateway delivers binary bodies.

    Returns:
        Tuple of (base64 body, Content-Type header value)
    """

    def _encode(
        filename: str,
        data: bytes,
        content_type: str | None = None,
        *,
        field: str = "file",
    ) -> tuple[str, str]:
        part: tuple[Any, ...] = (filename, data) if content_type is None else (filename, data, content_type)
        encoder = MultipartEncoder(fields={field: part})
        return base64.b64encode(encoder.to_string()).decode("ascii"), encoder.content_type

    return _encode


@pytest.fixture
def upload_event(make_event, multipart_body) -> Callable[..., dict[str, Any]]:
    def _make(filename: str, data: bytes, content_type: str | None = None) -> dict[str, Any]:
        body, form_type = multipart_body(filename, data, content_type)
        return make_event(
            "POST",
            "/media/upload",
            body=body,
            headers={"Content-Type": form_type},
            is_base64_encoded=True,
        )

    return _make


@pytest.fixture
def response_header() -> Callable[[dict[str, Any], str], str | None]:
    """Read a response header from either ``headers`` or ``multiValueHeaders``."""

    def _get(response: dict[str, Any], name: str) -> str | None:
        wanted = name.lower()

        for key, value in (response.get("headers") or {}).items():
            if key.lower() == wanted:
                return str(value)

        for key, values in (response.get("multiValueHeaders") or {}).items():
            if key.lower() == wanted and values:
                return str(values[0])

        return None

    return _get


@pytest.fixture
def noisy_png() -> bytes:
    """Roughly 5 KB PNG; random pixels keep the encoder from compressing it away."""
    buffer = io.BytesIO()
    Image.frombytes("RGB", (40, 40), os.urandom(40 * 40 * 3)).save(buffer, format="PNG")
    return buffer.getvalue()
