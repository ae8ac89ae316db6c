"""Errors raised by the Betterpick API layer."""

from enum import Enum
from typing import Optional


class APIError(Exception):
    """Base exception for failures reported by the API transport."""

    pass


class TransportError(APIError):
    """Raised when the HTTP layer itself fails (no connectivity, DNS, timeout)."""

    pass


class InvalidStatusCodeError(APIError):
    """Raised when the server answers with a non-2xx status code."""

    def __init__(self, status_code: int, url: str) -> None:
        super().__init__(f"HTTP error {status_code}: {url}")
        self.status_code = status_code
        self.url = url


class EmptyResponseError(APIError):
    """Raised when a successful response carries no body."""

    pass


class InvalidResponseBodyError(APIError):
    """Raised when the body cannot be decoded into the expected type."""

    pass


class ResponseNotCreatedError(APIError):
    """Raised when the transport returns no response object."""

    pass


class UnknownAPIError(APIError):
    """Raised for failures that fit no other category."""

    pass


class ManagerResultError(Enum):
    """The two failure kinds surfaced to the application."""

    USER_NETWORK = "user_network"
    SERVER = "server"


def classify_error(error: APIError) -> ManagerResultError:
    """
    Map a transport failure to an application error kind.

    Only transport-level failures are the user's network; everything else,
    malformed responses included, is the server's.
    """
    if isinstance(error, TransportError):
        return ManagerResultError.USER_NETWORK
    return ManagerResultError.SERVER


class BetterpickError(Exception):
    """Raised when a synchronous caller unwraps a failed result."""

    def __init__(self, kind: ManagerResultError, cause: Optional[APIError] = None) -> None:
        message = "Network unavailable" if kind is ManagerResultError.USER_NETWORK else "Server error"
        super().__init__(message)
        self.kind = kind
        self.cause = cause
