"""Request validation utilities."""

import json
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.models.errors import BadRequestError

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "valid integer" in msg_lower or "valid string" in msg_lower:
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def parse_json_body(body: str | None) -> dict[str, Any]:
    """Decode a JSON object request body.

    Raises:
        BadRequestError: If the body is missing, malformed, or not an object
    """
    try:
        data = json.loads(body or "")
    except json.JSONDecodeError as exc:
        raise BadRequestError(message="Invalid request body") from exc

    if not isinstance(data, dict):
        raise BadRequestError(message="Invalid request body")

    return data


def validate_request(model: type[ModelT], data: dict[str, Any]) -> ModelT:
    """Validate request data against a Pydantic model.

    Raises:
        BadRequestError: With sanitized field errors in ``details``
    """
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise BadRequestError(
            message="Invalid request body",
            details={"errors": sanitize_validation_errors(exc.errors())},
        ) from exc
