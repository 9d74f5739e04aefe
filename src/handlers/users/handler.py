"""
HTTP routes for the Users API.
"""

from aws_lambda_powertools import Logger, Metrics
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.metrics import MetricUnit

from core.middleware.load_user import LoadUserMiddleware
from core.middleware.path_params import ValidateIdMiddleware
from core.models.errors import InternalError
from core.models.request_scope import get_request_scope
from core.models.user import User
from core.utils.constants import METRICS_NAMESPACE
from core.utils.response import ResponseBuilder
from core.utils.validators import parse_json_body, validate_request

from .models import CreateUserRequest, UpdateUserRequest
from .service import UserService

logger = Logger(UTC=True)
metrics = Metrics(namespace=METRICS_NAMESPACE)


class UserHandler:
    """Translate between API Gateway requests and :class:`UserService`.

    Routes carrying ``{user_id}`` run the ID validation and user load
    middleware first, so their handlers read the user from the request scope.
    """

    def __init__(self, app: APIGatewayRestResolver, service: UserService) -> None:
        self.app = app
        self.service = service

    def register_routes(self) -> None:
        app = self.app
        load_chain = [
            ValidateIdMiddleware(),
            LoadUserMiddleware(self.service.repository),
        ]

        app.post("/users")(self.create_user)
        app.get("/users")(self.list_users)
        app.get("/users/<user_id>", middlewares=load_chain)(self.get_user)
        app.put("/users/<user_id>", middlewares=load_chain)(self.update_user)
        app.delete("/users/<user_id>", middlewares=load_chain)(self.delete_user)

    def _scoped_user(self) -> User:
        user = get_request_scope(self.app).user
        if user is None:
            raise InternalError(message="User not found in context")
        return user

    def create_user(self) -> Response:
        body = parse_json_body(self.app.current_event.body)
        request = validate_request(CreateUserRequest, body)

        user = self.service.create_user(request.to_user(), self.app.lambda_context)

        metrics.add_metric(name="UserCreated", unit=MetricUnit.Count, value=1)

        return ResponseBuilder.created(user.model_dump())

    def list_users(self) -> Response:
        users = self.service.get_all_users(self.app.lambda_context)
        return ResponseBuilder.ok([user.model_dump() for user in users])

    def get_user(self, user_id: str) -> Response:
        return ResponseBuilder.ok(self._scoped_user().model_dump())

    def update_user(self, user_id: str) -> Response:
        current = self._scoped_user()

        body = parse_json_body(self.app.current_event.body)
        request = validate_request(UpdateUserRequest, body)

        updated = self.service.update_user(current.id, request.to_user(), self.app.lambda_context)

        return ResponseBuilder.ok(updated.model_dump())

    def delete_user(self, user_id: str) -> Response:
        current = self._scoped_user()

        self.service.delete_user(current.id, self.app.lambda_context)

        return ResponseBuilder.no_content()
