"""Typed request-scoped storage shared by the middleware chain and handlers."""

from dataclasses import dataclass

from aws_lambda_powertools.event_handler import APIGatewayRestResolver

from core.models.user import User
from core.utils.constants import REQUEST_SCOPE_KEY


@dataclass
class RequestScope:
    """Values produced by route middleware for the current request only.

    ``user_id`` is written by the ID validation middleware and ``user`` by
    the entity load middleware. Handlers read, never re-validate.
    """

    user_id: int | None = None
    user: User | None = None


def get_request_scope(app: APIGatewayRestResolver) -> RequestScope:
    """Return the scope of the request being resolved, creating it on first use.

    The resolver clears its context after every invocation, so a scope never
    outlives the request that created it.
    """
    scope = app.context.get(REQUEST_SCOPE_KEY)

    if not isinstance(scope, RequestScope):
        scope = RequestScope()
        app.append_context(**{REQUEST_SCOPE_KEY: scope})

    return scope
