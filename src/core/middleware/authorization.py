"""Presence-only authorization check.

Any non-empty ``Authorization`` header is accepted; no token is verified.
"""

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.event_handler.middlewares import NextMiddleware

from core.utils.constants import AUTHORIZATION_HEADER
from core.utils.request import get_header, get_request_id
from core.utils.response import ResponseBuilder

logger = Logger(UTC=True)


def authorization_middleware(
    app: APIGatewayRestResolver,
    next_middleware: NextMiddleware,
) -> Response:
    header = get_header(app, AUTHORIZATION_HEADER)

    if not header or not header.strip():
        logger.warning("Rejected request without authorization header")
        return ResponseBuilder.unauthorized(request_id=get_request_id(app))

    return next_middleware(app)
