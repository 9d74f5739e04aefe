"""Request cancellation checks based on the Lambda invocation deadline."""

from typing import Any

from core.models.errors import InternalError


def is_cancelled(context: Any | None) -> bool:
    """Return True when the invocation has no execution time left.

    A missing context, or one without a deadline, is never cancelled.
    """
    if context is None:
        return False

    remaining = getattr(context, "get_remaining_time_in_millis", None)
    if not callable(remaining):
        return False

    return remaining() <= 0


def ensure_not_cancelled(context: Any | None) -> None:
    """Fail fast when the calling request has already been cancelled.

    Raises:
        InternalError: wrapping a TimeoutError describing the expired deadline
    """
    if is_cancelled(context):
        raise InternalError(message="context cancelled") from TimeoutError(
            "Lambda invocation deadline exceeded"
        )
