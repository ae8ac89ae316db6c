"""Networking layer for the Betterpick API."""

from .errors import (
    APIError,
    BetterpickError,
    EmptyResponseError,
    InvalidResponseBodyError,
    InvalidStatusCodeError,
    ManagerResultError,
    ResponseNotCreatedError,
    TransportError,
    UnknownAPIError,
    classify_error,
)
from .handler import APICompletion, APIHandler, APIResponse, RequestsAPIHandler
from .manager import BetterpickAPIManager
from .request import APIRequest, APIRequestContext, HTTPMethod, build_request, percent_encode
from .result import Callback, ManagerResult, wait_for

__all__ = [
    # Errors
    "APIError",
    "BetterpickError",
    "EmptyResponseError",
    "InvalidResponseBodyError",
    "InvalidStatusCodeError",
    "ManagerResultError",
    "ResponseNotCreatedError",
    "TransportError",
    "UnknownAPIError",
    "classify_error",
    # Transport
    "APICompletion",
    "APIHandler",
    "APIResponse",
    "RequestsAPIHandler",
    # Manager
    "BetterpickAPIManager",
    "Callback",
    "ManagerResult",
    "wait_for",
    # Requests
    "APIRequest",
    "APIRequestContext",
    "HTTPMethod",
    "build_request",
    "percent_encode",
]
