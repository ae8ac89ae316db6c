"""Shared fixtures for the Betterpick tests."""

from typing import Any, Optional

import pytest

from betterpick.config import APIConfig
from betterpick.models import GetPlayersResponseBody, PlayerPreview
from betterpick.networking import (
    APICompletion,
    APIError,
    APIHandler,
    APIRequestContext,
    APIResponse,
    BetterpickAPIManager,
)


TEST_BASE_URL = "https://api.test/api/v1"


class FakeAPIHandler(APIHandler):
    """
    Transport double that records every request.

    Completions fire immediately with queued responses unless ``hold`` is
    set, in which case they are kept in ``pending`` for the test to fire.
    """

    def __init__(self) -> None:
        self.requests: list[APIRequestContext] = []
        self.responses: list[APIResponse] = []
        self.pending: list[APICompletion] = []
        self.hold = False

    def respond_with(self, body: Any = None, error: Optional[APIError] = None) -> None:
        self.responses.append(APIResponse(body=body, error=error))

    def perform(self, request_context: APIRequestContext, completion: APICompletion) -> None:
        self.requests.append(request_context)
        if self.hold:
            self.pending.append(completion)
            return
        response = self.responses.pop(0) if self.responses else APIResponse(body=GetPlayersResponseBody())
        completion(response)

    @property
    def urls(self) -> list[str]:
        return [context.request.url for context in self.requests]


def make_player_json(player_id: str, name: str = "Player", overall: int = 80, **extra: Any) -> dict[str, Any]:
    """JSON object for a player preview as the API returns it."""
    data = {
        "id": player_id,
        "name": name,
        "overall": overall,
        "positions": ["ST"],
        "nationality": "Brazil",
    }
    data.update(extra)
    return data


def make_players_body(*player_ids: str) -> GetPlayersResponseBody:
    return GetPlayersResponseBody(
        players=[PlayerPreview(id=pid, name=f"Player {pid}", overall=80) for pid in player_ids]
    )


@pytest.fixture
def fake_handler() -> FakeAPIHandler:
    return FakeAPIHandler()


@pytest.fixture
def manager(fake_handler: FakeAPIHandler) -> BetterpickAPIManager:
    return BetterpickAPIManager(api_handler=fake_handler, config=APIConfig(base_url=TEST_BASE_URL))
