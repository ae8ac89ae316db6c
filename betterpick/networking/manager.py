"""Betterpick API manager: one method per REST endpoint."""

import logging
from typing import Mapping, Optional

from ..config import APIConfig
from ..models import (
    GetClubPlayersResponseBody,
    GetLeagueResponseBody,
    GetLeaguesResponseBody,
    GetNationalitiesBody,
    GetPlayersResponseBody,
    GetSearchResponseBody,
    Player,
    PlayerFilterData,
    TeamPreview,
)
from .errors import classify_error
from .handler import APIHandler, APIResponse, RequestsAPIHandler
from .request import APIRequest, APIRequestContext, HTTPMethod, build_request, percent_encode
from .result import Callback, ManagerResult

logger = logging.getLogger(__name__)


class BetterpickAPIManager:
    """
    Client for the Betterpick REST API.

    Every endpoint method performs exactly one HTTP call and reports the
    outcome to ``completion`` as a ManagerResult.
    """

    def __init__(
        self,
        api_handler: Optional[APIHandler] = None,
        config: Optional[APIConfig] = None,
    ) -> None:
        """
        Initialize the manager.

        Args:
            api_handler: Transport to perform requests with.
            config: API settings; read from the environment if omitted.
        """
        self.api_handler = api_handler or RequestsAPIHandler()
        self.config = config or APIConfig.from_env()

    def api_request(
        self,
        endpoint: str,
        method: HTTPMethod = HTTPMethod.GET,
        parameters: Optional[Mapping[str, str]] = None,
    ) -> APIRequest:
        """Build a request against the configured base URL."""
        return build_request(
            self.config.base_url,
            endpoint,
            method,
            parameters=parameters,
            timeout=self.config.timeout,
        )

    def perform(self, request_context: APIRequestContext, completion: Callback) -> None:
        """
        Perform a request and classify its outcome.

        Failures reach ``completion`` as USER_NETWORK or SERVER only.
        """
        url = request_context.request.url
        logger.debug("%s %s", request_context.request.method.value, url)

        def handle(response: APIResponse) -> None:
            if response.error is None:
                completion(ManagerResult.success(response.body))
                return
            kind = classify_error(response.error)
            logger.warning("Request to %s failed (%s): %s", url, kind.value, response.error)
            completion(ManagerResult.failure(kind, response.error))

        self.api_handler.perform(request_context, handle)

    def _get(
        self,
        endpoint: str,
        response_body_type: type,
        completion: Callback,
        parameters: Optional[Mapping[str, str]] = None,
    ) -> None:
        request = self.api_request(endpoint, HTTPMethod.GET, parameters)
        self.perform(APIRequestContext(response_body_type, request), completion)

    # GET /leagues
    def leagues(self, completion: Callback, league_id: Optional[str] = None) -> None:
        """List leagues, optionally narrowed to one league id."""
        parameters = {"id": league_id} if league_id is not None else None
        self._get("/leagues", GetLeaguesResponseBody, completion, parameters)

    # GET /leagues/{leagueID}
    def league(self, league_id: str, completion: Callback) -> None:
        self._get(f"/leagues/{percent_encode(league_id)}", GetLeagueResponseBody, completion)

    # GET /nationalities
    def nationalities(self, completion: Callback) -> None:
        self._get("/nationalities", GetNationalitiesBody, completion)

    # GET /players/club/{clubID}
    def club_players(self, club_id: str, completion: Callback) -> None:
        self._get(f"/players/club/{percent_encode(club_id)}", GetClubPlayersResponseBody, completion)

    # GET /players/{playerID}/full
    def player(self, player_id: str, completion: Callback) -> None:
        self._get(f"/players/{percent_encode(player_id)}/full", Player, completion)

    # GET /search?name={name}
    def search(self, name: str, completion: Callback) -> None:
        self._get("/search", GetSearchResponseBody, completion, {"name": name})

    # GET /players/search
    def players(self, filter_data: PlayerFilterData, completion: Callback) -> None:
        """Search players matching the filter criteria."""
        self._get("/players/search", GetPlayersResponseBody, completion, filter_data.parameters)

    # GET /clubs/{clubID}
    def club(self, club_id: str, completion: Callback) -> None:
        self._get(f"/clubs/{percent_encode(club_id)}", TeamPreview, completion)
