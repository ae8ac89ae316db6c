"""Results delivered to API manager callers."""

import threading
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

from .errors import APIError, BetterpickError, ManagerResultError


ResponseBody = TypeVar("ResponseBody")


@dataclass
class ManagerResult(Generic[ResponseBody]):
    """
    Success with a body, or failure with one of two error kinds.

    Attributes:
        value: Decoded body on success.
        error: USER_NETWORK or SERVER on failure.
        cause: The underlying transport failure, for logging only.
    """

    value: Optional[ResponseBody] = None
    error: Optional[ManagerResultError] = None
    cause: Optional[APIError] = None

    @classmethod
    def success(cls, value: ResponseBody) -> "ManagerResult[ResponseBody]":
        return cls(value=value)

    @classmethod
    def failure(
        cls, error: ManagerResultError, cause: Optional[APIError] = None
    ) -> "ManagerResult[ResponseBody]":
        return cls(error=error, cause=cause)

    @property
    def is_success(self) -> bool:
        return self.error is None

    def unwrap(self) -> ResponseBody:
        """
        Return the body of a successful result.

        Raises:
            BetterpickError: If the result is a failure.
        """
        if self.error is not None:
            raise BetterpickError(self.error, self.cause)
        return self.value


Callback = Callable[[ManagerResult], None]


def wait_for(call: Callable[..., None], *args, timeout: Optional[float] = None) -> ManagerResult:
    """
    Call a callback-style manager method and block until it completes.

    Args:
        call: Bound manager method taking a ``completion`` keyword.
        *args: Positional arguments for the method.
        timeout: Seconds to wait, or None to wait indefinitely.

    Returns:
        The ManagerResult passed to the completion.

    Raises:
        TimeoutError: If the completion did not fire in time.
    """
    done = threading.Event()
    results: list[ManagerResult] = []

    def completion(result: ManagerResult) -> None:
        results.append(result)
        done.set()

    call(*args, completion=completion)
    if not done.wait(timeout):
        raise TimeoutError(f"{getattr(call, '__name__', call)} did not complete within {timeout}s")
    return results[0]
