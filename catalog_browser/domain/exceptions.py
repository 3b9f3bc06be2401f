"""Catalog fetch exceptions.

Errors raised by the product client when the remote catalog cannot
satisfy a request. The list cache itself never raises; these propagate
from the client to whichever view issued the request.
"""

from typing import Any

# User-facing messages for each error kind
NETWORK_ERROR = "Network connection failed"
NOT_FOUND = "Resource not found"
SERVER_ERROR = "Server error occurred"
INVALID_REQUEST = "Invalid request parameters"


class CatalogError(Exception):
    """Base class for all catalog fetch errors.

    All fetch errors inherit from this class so a view can catch
    them in one place and show ``message`` to the user.
    """

    default_message = SERVER_ERROR

    def __init__(
        self,
        message: str | None = None,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize catalog error.

        Args:
            message: Human-readable error message.
            status_code: HTTP status code, if a response was received.
            details: Optional dictionary with additional error context.
        """
        self.message = message or self.default_message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundError(CatalogError):
    """Raised when an identifier or query yields nothing."""

    default_message = NOT_FOUND


class NetworkError(CatalogError):
    """Raised on transport failures (timeouts, refused connections)."""

    default_message = NETWORK_ERROR


class ServerError(CatalogError):
    """Raised on a non-2xx response or an unreadable body."""

    default_message = SERVER_ERROR


class InvalidRequestError(CatalogError):
    """Raised for an empty search query or a missing identifier."""

    default_message = INVALID_REQUEST


def error_for_status(
    status_code: int,
    message: str | None = None,
    details: dict[str, Any] | None = None,
) -> CatalogError:
    """Classify an HTTP error status.

    Args:
        status_code: HTTP status code (>= 400).
        message: Optional message overriding the kind's default.
        details: Optional error context.

    Returns:
        The matching CatalogError subclass instance.
    """
    if status_code == 404:
        error_cls: type[CatalogError] = NotFoundError
    elif status_code in (400, 422):
        error_cls = InvalidRequestError
    else:
        error_cls = ServerError
    return error_cls(message, status_code=status_code, details=details)
