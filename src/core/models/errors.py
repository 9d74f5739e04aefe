"""Classified application errors and their HTTP status mapping."""

from http import HTTPStatus
from typing import Any

from core.utils.constants import (
    ERROR_CODE_BAD_REQUEST,
    ERROR_CODE_FILE_TOO_LARGE,
    ERROR_CODE_INTERNAL,
    ERROR_CODE_INVALID_ID,
    ERROR_CODE_NOT_FOUND,
    ERROR_CODE_UNSUPPORTED_TYPE,
)


class AppError(Exception):
    """
    Base exception for all classified service errors.

    All custom errors must inherit from this class.
    Callers must explicitly provide a message; the error code is fixed per
    subclass. The underlying cause, when any, is attached with
    ``raise ... from cause`` and exposed through :attr:`cause`.
    """

    message: str
    error_code: str
    details: dict[str, Any]

    def __init__(
        self,
        *,
        message: str,
        error_code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message
        self.error_code = error_code
        self.details = details or {}

        super().__init__(self.message)

    @property
    def cause(self) -> BaseException | None:
        """Underlying exception wrapped by this error, if any."""
        return self.__cause__

    def __str__(self) -> str:
        if self.__cause__ is not None:
            return f"[{self.error_code}] {self.message}: {self.__cause__}"
        return f"[{self.error_code}] {self.message}"


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_NOT_FOUND,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class BadRequestError(AppError):
    """Raised when request validation fails."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_BAD_REQUEST,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InternalError(AppError):
    """Raised when an internal operation fails; the cause stays server-side."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INTERNAL,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class InvalidIDError(AppError):
    """Raised when a path identifier is not a valid integer."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_INVALID_ID,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class FileTooLargeError(AppError):
    """Raised when file size exceeds the allowed limit."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_FILE_TOO_LARGE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


class UnsupportedTypeError(AppError):
    """Raised when an unsupported content type is provided."""

    def __init__(
        self,
        *,
        message: str,
        error_code: str = ERROR_CODE_UNSUPPORTED_TYPE,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            error_code=error_code,
            details=details,
        )


ERROR_STATUS_MAP: dict[type[AppError], HTTPStatus] = {
    NotFoundError: HTTPStatus.NOT_FOUND,
    BadRequestError: HTTPStatus.BAD_REQUEST,
    InvalidIDError: HTTPStatus.BAD_REQUEST,
    UnsupportedTypeError: HTTPStatus.BAD_REQUEST,
    FileTooLargeError: HTTPStatus.REQUEST_ENTITY_TOO_LARGE,
    InternalError: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def get_app_error(exc: BaseException | None) -> AppError | None:
    """Return the first AppError found along the exception chain.

    Follows explicit (``__cause__``) and implicit (``__context__``) chaining,
    so a classified error wrapped by an unrelated exception is still found.
    Returns None for unclassified errors.
    """
    seen: set[int] = set()

    while exc is not None and id(exc) not in seen:
        if isinstance(exc, AppError):
            return exc
        seen.add(id(exc))
        exc = exc.__cause__ or exc.__context__

    return None


def status_for_error(exc: BaseException | None) -> HTTPStatus:
    """Map any error to its HTTP status. Unclassified errors are 500."""
    app_error = get_app_error(exc)
    if app_error is None:
        return HTTPStatus.INTERNAL_SERVER_ERROR

    for cls in type(app_error).__mro__:
        status = ERROR_STATUS_MAP.get(cls)
        if status is not None:
            return status

    return HTTPStatus.INTERNAL_SERVER_ERROR
