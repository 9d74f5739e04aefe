"""Global middleware that logs every request on entry and exit."""

import time

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.event_handler.middlewares import NextMiddleware

from core.utils.request import get_source_ip

logger = Logger(UTC=True)


def request_logging_middleware(
    app: APIGatewayRestResolver,
    next_middleware: NextMiddleware,
) -> Response:
    """Record method, path and remote origin, then the total duration.

    The completion entry is written even when a downstream stage raises.
    """
    event = app.current_event
    started = time.perf_counter()
    status_code: int | None = None

    logger.info(
        "Request started",
        extra={
            "http_method": event.http_method,
            "path": event.path,
            "source_ip": get_source_ip(app),
        },
    )

    try:
        response = next_middleware(app)
        status_code = response.status_code
        return response
    finally:
        logger.info(
            "Request completed",
            extra={
                "http_method": event.http_method,
                "path": event.path,
                "status_code": status_code,
                "duration_ms": round((time.perf_counter() - started) * 1000, 3),
            },
        )
