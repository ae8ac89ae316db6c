"""HTTP request construction for the Betterpick API."""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Mapping, Optional, TypeVar
from urllib.parse import quote

from ..config import DEFAULT_TIMEOUT


ResponseBody = TypeVar("ResponseBody")


class HTTPMethod(Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(frozen=True)
class APIRequest:
    """A fully resolved request ready for the transport."""

    url: str
    method: HTTPMethod = HTTPMethod.GET
    timeout: float = DEFAULT_TIMEOUT


@dataclass(frozen=True)
class APIRequestContext(Generic[ResponseBody]):
    """
    Pairs a request with the type its response body decodes into.

    Attributes:
        response_body_type: Class exposing ``from_dict`` for the JSON body.
        request: The request to perform.
    """

    response_body_type: type
    request: APIRequest


def percent_encode(value: str) -> str:
    """Percent-encode a query component or path identifier.

    Only RFC 3986 unreserved characters are left as is, so `&`, `=`, `+`,
    `/` and spaces in values can never change the shape of the URL.
    """
    return quote(value, safe="")


def build_request(
    base_url: str,
    endpoint: str,
    method: HTTPMethod,
    parameters: Optional[Mapping[str, str]] = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> APIRequest:
    """
    Build a request for an endpoint of the API.

    Args:
        base_url: API root; any path prefix (e.g. ``/api/v1``) is kept.
        endpoint: Endpoint path such as ``/leagues``.
        method: HTTP method.
        parameters: Query parameters, appended in iteration order.
        timeout: Request timeout in seconds.

    Returns:
        The resolved APIRequest.
    """
    url = base_url.rstrip("/") + "/" + endpoint.lstrip("/")
    if parameters:
        query = "&".join(
            f"{percent_encode(key)}={percent_encode(value)}"
            for key, value in parameters.items()
        )
        url = f"{url}?{query}"
    return APIRequest(url=url, method=method, timeout=timeout)
