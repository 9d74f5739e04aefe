"""Route middleware that validates a numeric path identifier."""

import re

from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.event_handler.middlewares import BaseMiddlewareHandler, NextMiddleware

from core.models.errors import InvalidIDError
from core.models.request_scope import get_request_scope
from core.utils.constants import USER_ID_PATH_PARAM

# Optional sign followed by ASCII digits
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Identifiers are signed 64-bit integers
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


class ValidateIdMiddleware(BaseMiddlewareHandler):
    """Parse a path segment as a base-10 integer into the request scope.

    On failure the chain stops with InvalidIDError; nothing downstream runs.
    """

    def __init__(self, param: str = USER_ID_PATH_PARAM) -> None:
        super().__init__()
        self.param = param

    def handler(self, app: APIGatewayRestResolver, next_middleware: NextMiddleware) -> Response:
        route_args = app.context.get("_route_args") or {}
        raw = route_args.get(self.param) or ""

        if not _INTEGER_PATTERN.fullmatch(raw) or not _MIN_ID <= int(raw, 10) <= _MAX_ID:
            raise InvalidIDError(
                message="Invalid ID format",
                details={self.param: raw},
            )

        get_request_scope(app).user_id = int(raw, 10)

        return next_middleware(app)
