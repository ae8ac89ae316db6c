"""HTTP transport for the Betterpick API."""

import logging
from abc import ABC, abstractmethod
from concurrent.futures import Executor, Future
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from .errors import (
    APIError,
    EmptyResponseError,
    InvalidResponseBodyError,
    InvalidStatusCodeError,
    ResponseNotCreatedError,
    TransportError,
    UnknownAPIError,
)
from .request import APIRequestContext

logger = logging.getLogger(__name__)


@dataclass
class APIResponse:
    """
    Outcome of a transport call: a decoded body or an error, never both.

    Attributes:
        body: The decoded response body on success.
        error: The failure cause otherwise.
        status_code: HTTP status, when a response was received.
    """

    body: Any = None
    error: Optional[APIError] = None
    status_code: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.error is None


APICompletion = Callable[[APIResponse], None]


class APIHandler(ABC):
    """Something that can perform a typed request and report the outcome."""

    @abstractmethod
    def perform(self, request_context: APIRequestContext, completion: APICompletion) -> None:
        """
        Perform the request and call ``completion`` exactly once.

        Implementations must report failures through ``completion`` rather
        than raising.
        """
        pass


class RequestsAPIHandler(APIHandler):
    """
    Transport backed by a ``requests.Session``.

    Requests run inline by default. With an executor they run on its worker
    threads and the completion fires there too.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        """
        Initialize the handler.

        Args:
            session: Session to reuse; a new one is created if omitted.
            executor: Executor to run requests on, or None to run inline.
        """
        self.executor = executor

        # Session for connection reuse
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": "Betterpick/1.0 (Python client)",
                "Accept": "application/json",
            }
        )

    def perform(self, request_context: APIRequestContext, completion: APICompletion) -> None:
        if self.executor is None:
            completion(self.execute(request_context))
            return

        future = self.executor.submit(lambda: completion(self.execute(request_context)))
        future.add_done_callback(_log_completion_failure)

    def execute(self, request_context: APIRequestContext) -> APIResponse:
        """
        Run the request synchronously and decode the body.

        Returns:
            APIResponse with either the decoded body or the failure cause.
        """
        try:
            return self._fetch(request_context)
        except APIError as e:
            return APIResponse(error=e, status_code=getattr(e, "status_code", None))
        except Exception as e:
            logger.exception("Unexpected failure performing %s", request_context.request.url)
            return APIResponse(error=UnknownAPIError(str(e)))

    def _fetch(self, request_context: APIRequestContext) -> APIResponse:
        request = request_context.request
        try:
            response = self._session.request(
                request.method.value,
                request.url,
                timeout=request.timeout,
            )
        except requests.exceptions.Timeout:
            raise TransportError(f"Request timed out: {request.url}")
        except requests.exceptions.RequestException as e:
            raise TransportError(f"Request failed: {request.url} - {e}")

        if not isinstance(response, requests.Response):
            raise ResponseNotCreatedError(f"No response for {request.url}")

        if not 200 <= response.status_code < 300:
            raise InvalidStatusCodeError(response.status_code, request.url)

        if not response.content:
            raise EmptyResponseError(f"Empty body: {request.url}")

        try:
            data = response.json()
            body = request_context.response_body_type.from_dict(data)
        except (ValueError, KeyError, TypeError, AttributeError) as e:
            raise InvalidResponseBodyError(f"Cannot decode body of {request.url}: {e}")

        return APIResponse(body=body, status_code=response.status_code)


def _log_completion_failure(future: Future) -> None:
    """Surface exceptions raised by completions running on the executor."""
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error("Completion raised on worker thread", exc_info=error)
