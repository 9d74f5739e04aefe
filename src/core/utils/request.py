"""Accessors for the request currently being resolved."""

from aws_lambda_powertools.event_handler import APIGatewayRestResolver


def get_header(app: APIGatewayRestResolver, name: str) -> str | None:
    """Case-insensitive lookup of a single request header."""
    wanted = name.lower()

    for key, value in (app.current_event.raw_event.get("headers") or {}).items():
        if key.lower() == wanted:
            return value

    return None


def get_source_ip(app: APIGatewayRestResolver) -> str | None:
    request_context = app.current_event.raw_event.get("requestContext") or {}
    identity = request_context.get("identity") or {}
    return identity.get("sourceIp")


def get_request_id(app: APIGatewayRestResolver) -> str | None:
    """Lambda request id of the current invocation, when a context is present."""
    return getattr(app.lambda_context, "aws_request_id", None)
