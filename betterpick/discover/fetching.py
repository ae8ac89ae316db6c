"""Base view model for screens backed by a single API fetch."""

import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Optional, TypeVar

from ..networking import BetterpickAPIManager, Callback, ManagerResult, ManagerResultError

logger = logging.getLogger(__name__)

Model = TypeVar("Model")

Dispatch = Callable[[Callable[[], None]], None]
StateObserver = Callable[["FetchState"], None]


class FetchStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    DISPLAYING = "displaying"
    FAILED = "failed"


@dataclass(frozen=True)
class FetchState(Generic[Model]):
    """
    State of a fetching view model.

    ``value`` is set only while displaying, ``error`` only when failed.
    """

    status: FetchStatus
    value: Optional[Model] = None
    error: Optional[ManagerResultError] = None

    @classmethod
    def idle(cls) -> "FetchState":
        return cls(FetchStatus.IDLE)

    @classmethod
    def loading(cls) -> "FetchState":
        return cls(FetchStatus.LOADING)

    @classmethod
    def displaying(cls, value: Model) -> "FetchState":
        return cls(FetchStatus.DISPLAYING, value=value)

    @classmethod
    def failed(cls, error: ManagerResultError) -> "FetchState":
        return cls(FetchStatus.FAILED, error=error)

    @property
    def is_displaying(self) -> bool:
        return self.status is FetchStatus.DISPLAYING


def _call_inline(work: Callable[[], None]) -> None:
    work()


class FetchingViewModel(ABC, Generic[Model]):
    """
    Drives idle -> loading -> displaying/failed for one API call.

    Every ``start()`` takes a new generation; completions belonging to an
    older generation are dropped so they cannot overwrite newer state.
    """

    def __init__(
        self,
        api_manager: Optional[BetterpickAPIManager] = None,
        dispatch: Optional[Dispatch] = None,
    ) -> None:
        """
        Initialize the view model.

        Args:
            api_manager: Manager used to reach the API.
            dispatch: Runs completion work on the UI thread; inline if omitted.
        """
        self.api_manager = api_manager or BetterpickAPIManager()
        self._dispatch = dispatch or _call_inline
        self._state: FetchState = FetchState.idle()
        self._generation = 0
        self._observers: list[StateObserver] = []
        self._lock = threading.Lock()

    @property
    def state(self) -> FetchState:
        return self._state

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """
        Call ``observer`` with the new state after every change.

        Returns:
            A function that removes the observer.
        """
        self._observers.append(observer)
        return lambda: self._observers.remove(observer)

    def start(self) -> None:
        """Begin a new fetch, superseding any fetch still in flight."""
        with self._lock:
            self._generation += 1
            generation = self._generation
            self._state = FetchState.loading()
        self._notify()

        def completion(result: ManagerResult) -> None:
            self._dispatch(lambda: self._finish(generation, result))

        self.start_fetching(completion)

    def _finish(self, generation: int, result: ManagerResult) -> None:
        if result.is_success:
            try:
                model = self.response_body_to_model(result.value)
            except Exception:
                logger.exception("Could not convert %s to a model", type(result.value).__name__)
                model = None
            new_state = FetchState.failed(ManagerResultError.SERVER) if model is None else FetchState.displaying(model)
        else:
            new_state = FetchState.failed(result.error)

        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping stale fetch %d (latest is %d)", generation, self._generation)
                return
            self._state = new_state
        self._notify()

    def _notify(self) -> None:
        state = self._state
        for observer in list(self._observers):
            observer(state)

    @abstractmethod
    def start_fetching(self, completion: Callback) -> None:
        """Issue the API call; ``completion`` receives its result."""
        pass

    @abstractmethod
    def response_body_to_model(self, response_body: Any) -> Optional[Model]:
        """Convert the decoded body into what the screen displays."""
        pass
