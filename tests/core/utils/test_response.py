import json
from http import HTTPStatus

from core.models.errors import FileTooLargeError, InternalError, NotFoundError
from core.utils.response import ResponseBuilder


class TestResponseBuilder:
    def test_ok_serializes_list(self) -> None:
        response = ResponseBuilder.ok([{"id": 1}])

        assert response.status_code == 200
        assert response.headers["Content-Type"] == "application/json"
        assert json.loads(response.body) == [{"id": 1}]

    def test_created_adds_request_id(self) -> None:
        response = ResponseBuilder.created({"id": 1}, request_id="req-1")

        assert response.status_code == 201
        assert json.loads(response.body) == {"id": 1, "request_id": "req-1"}

    def test_no_content(self) -> None:
        response = ResponseBuilder.no_content()

        assert response.status_code == 204
        assert response.body == ""

    def test_error_envelope(self) -> None:
        response = ResponseBuilder.error(
            status=HTTPStatus.BAD_REQUEST,
            message="Invalid ID format",
            error="INVALID_ID",
            request_id="req-1",
        )
        body = json.loads(response.body)

        assert response.status_code == 400
        assert body["error"] == "Invalid ID format"
        assert body["code"] == "INVALID_ID"
        assert body["request_id"] == "req-1"
        assert "timestamp" in body
        assert "details" not in body

    def test_unauthorized(self) -> None:
        response = ResponseBuilder.unauthorized()
        body = json.loads(response.body)

        assert response.status_code == 401
        assert body["code"] == "UNAUTHORIZED"

    def test_from_exception_uses_status_mapping(self) -> None:
        error = FileTooLargeError(message="too big", details={"size_bytes": 1})
        response = ResponseBuilder.from_exception(error)
        body = json.loads(response.body)

        assert response.status_code == 413
        assert body["error"] == "too big"
        assert body["code"] == "FILE_TOO_LARGE"
        assert body["details"] == {"size_bytes": 1}

    def test_from_exception_hides_internal_message(self) -> None:
        try:
            try:
                raise OSError("/tmp/uploads is read-only")
            except OSError as exc:
                raise InternalError(message="Failed to save file") from exc
        except InternalError as exc:
            response = ResponseBuilder.from_exception(exc)

        body = json.loads(response.body)

        assert response.status_code == 500
        assert body["error"] == "Internal server error"
        assert "read-only" not in response.body

    def test_from_exception_unclassified_is_500(self) -> None:
        response = ResponseBuilder.from_exception(KeyError("x"))

        assert response.status_code == 500
        assert json.loads(response.body)["code"] == "INTERNAL_ERROR"

    def test_from_exception_wrapped_not_found(self) -> None:
        outer = RuntimeError("wrapper")
        outer.__cause__ = NotFoundError(message="Media not found")

        response = ResponseBuilder.from_exception(outer)

        assert response.status_code == 404

    def test_binary_response(self) -> None:
        response = ResponseBuilder.binary_response(
            b"%PDF-1.4",
            content_type="application/pdf",
            headers={"Content-Disposition": 'attachment; filename="a.pdf"'},
        )

        assert response.status_code == 200
        assert response.body == b"%PDF-1.4"
        assert response.headers["Content-Length"] == "8"
        assert response.headers["Content-Disposition"] == 'attachment; filename="a.pdf"'
