import contextlib
import logging
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class BaseServiceError(Exception):
    detail: str = "Unknown service error"

    def __init__(self, detail: str | None = None) -> None:
        self.detail = detail or self.detail


class NotConfiguredError(BaseServiceError):
    detail = "Aggregator credentials are not configured"


class AggregatorError(BaseServiceError):
    """Failure while talking to the bank-aggregation API.

    ``status_code`` is the upstream HTTP status, or ``None`` when the request
    never got a response (connection error, timeout).
    """

    detail = "Aggregator request failed"

    def __init__(
        self,
        detail: str | None = None,
        status_code: int | None = None,
        action: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.status_code = status_code
        self.action = action


def get_safe_error_message(status_code: int | None) -> str:
    """User-facing message for an upstream failure.

    Only the status is looked at: upstream bodies may carry credentials and
    must never reach the client.
    """
    if status_code in (401, 403):
        return "Authentication error. Please check your credentials."
    if status_code == 404:
        return "Resource not found."
    if status_code == 429:
        return "Too many requests. Please try again later."
    if status_code is not None and status_code >= 500:
        return "External service error. Please try again later."
    return "An error occurred. Please try again."


@contextlib.contextmanager
def upstream_action(action: str) -> Iterator[None]:
    """Tag aggregator failures raised inside the block with ``action``."""
    try:
        yield
    except AggregatorError as exc:
        logger.warning(
            "%s (upstream status: %s): %s", action, exc.status_code, exc.detail
        )
        exc.action = action
        raise
