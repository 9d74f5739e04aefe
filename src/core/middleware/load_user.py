"""Route middleware that loads the user named by the validated path id."""

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.event_handler.middlewares import BaseMiddlewareHandler, NextMiddleware

from core.models.errors import InternalError
from core.models.request_scope import get_request_scope
from core.repositories.user_repository import UserRepository

logger = Logger(UTC=True)


class LoadUserMiddleware(BaseMiddlewareHandler):
    """Look up the user and place it in the request scope.

    Must run after :class:`ValidateIdMiddleware`. A missing user propagates
    the store's NotFoundError.
    """

    def __init__(self, repository: UserRepository) -> None:
        super().__init__()
        self.repository = repository

    def handler(self, app: APIGatewayRestResolver, next_middleware: NextMiddleware) -> Response:
        scope = get_request_scope(app)

        if scope.user_id is None:
            logger.error("User id missing from request scope; middleware misordered")
            raise InternalError(message="User ID not found in context")

        scope.user = self.repository.get_by_id(scope.user_id)

        return next_middleware(app)
