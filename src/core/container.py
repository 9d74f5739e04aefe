"""Dependency wiring for the service.

The container owns the process-wide stores and services. Resolvers built
from one container share that state, so every route of a warm Lambda
execution environment sees the same users and media.
"""

import os
from http import HTTPStatus

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response

from core.infrastructure.local.local_file_storage import LocalFileStorage
from core.infrastructure.memory.media_store import InMemoryMediaStore
from core.infrastructure.memory.user_store import InMemoryUserStore
from core.middleware.authorization import authorization_middleware
from core.middleware.request_logging import request_logging_middleware
from core.models.errors import AppError, get_app_error, status_for_error
from core.utils.constants import (
    DEFAULT_MEDIA_STORAGE_ROOT,
    DEMO_USERS,
    ENV_MEDIA_STORAGE_ROOT,
    ENV_SEED_DEMO_USERS,
    ERROR_CODE_NOT_FOUND,
)
from core.utils.request import get_request_id
from core.utils.response import ResponseBuilder
from handlers.media.handler import MediaHandler
from handlers.media.service import MediaService
from handlers.users.handler import UserHandler
from handlers.users.service import UserService

logger = Logger(UTC=True)


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").strip().lower() in {"1", "true", "yes"}


class Container:
    """Repositories, storage and services for one process."""

    def __init__(self, *, media_root: str, seed_demo_users: bool = False) -> None:
        self.user_repository = InMemoryUserStore(seed=DEMO_USERS if seed_demo_users else ())
        self.media_repository = InMemoryMediaStore()
        self.file_storage = LocalFileStorage(media_root)

        self.user_service = UserService(self.user_repository)
        self.media_service = MediaService(self.media_repository, self.file_storage)

        logger.debug(
            "Container initialized",
            extra={"media_root": str(self.file_storage.root), "seeded": seed_demo_users},
        )

    @classmethod
    def from_env(cls) -> "Container":
        return cls(
            media_root=os.getenv(ENV_MEDIA_STORAGE_ROOT, DEFAULT_MEDIA_STORAGE_ROOT),
            seed_demo_users=_env_flag(ENV_SEED_DEMO_USERS),
        )

    def build_resolver(self) -> APIGatewayRestResolver:
        """Create a resolver with global middleware, routes and error mapping.

        Powertools keeps the event being resolved on the router class, so
        resolve calls must not overlap within a process. Lambda runs one
        invocation per execution environment at a time.
        """
        app = APIGatewayRestResolver()
        app.use(middlewares=[request_logging_middleware, authorization_middleware])

        UserHandler(app, self.user_service).register_routes()
        MediaHandler(app, self.media_service).register_routes()

        @app.exception_handler(AppError)
        def handle_app_error(exc: AppError) -> Response:
            status = status_for_error(exc)

            if status == HTTPStatus.INTERNAL_SERVER_ERROR:
                logger.error(
                    "Request failed with internal error",
                    extra={"error": str(exc), "error_code": exc.error_code},
                    exc_info=exc,
                )
            else:
                logger.info(
                    "Request rejected",
                    extra={"error": exc.message, "error_code": exc.error_code, "status": status.value},
                )

            return ResponseBuilder.from_exception(exc, request_id=get_request_id(app))

        @app.exception_handler(Exception)
        def handle_unexpected_error(exc: Exception) -> Response:
            app_error = get_app_error(exc)
            if app_error is not None:
                return handle_app_error(app_error)

            logger.error("Unhandled error", extra={"error": str(exc)}, exc_info=exc)
            return ResponseBuilder.internal_error(request_id=get_request_id(app))

        @app.not_found
        def handle_route_not_found(exc: Exception) -> Response:
            return ResponseBuilder.error(
                status=HTTPStatus.NOT_FOUND,
                message="Route not found",
                error=ERROR_CODE_NOT_FOUND,
                request_id=get_request_id(app),
            )

        return app
