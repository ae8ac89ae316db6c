"""View model for the player discovery screen."""

from typing import Optional

from ..models import GetPlayersResponseBody, Nationality, PlayerFilterData, PlayerPreview
from ..networking import BetterpickAPIManager, Callback
from .fetching import Dispatch, FetchingViewModel


class DiscoverPlayerViewModel(FetchingViewModel[list[PlayerPreview]]):
    """
    Lists players matching the current filter criteria.

    Every filter change goes through ``set_filter_data``, ``update_filter``
    or ``reset_filter_data`` and starts exactly one new fetch.
    """

    def __init__(
        self,
        nationalities: list[Nationality],
        api_manager: Optional[BetterpickAPIManager] = None,
        dispatch: Optional[Dispatch] = None,
    ) -> None:
        super().__init__(api_manager=api_manager, dispatch=dispatch)
        self.nationalities = nationalities
        self._player_filter_data = PlayerFilterData.default()

    @property
    def player_filter_data(self) -> PlayerFilterData:
        return self._player_filter_data

    def set_filter_data(self, filter_data: PlayerFilterData) -> None:
        """Replace the filter criteria and fetch."""
        self._player_filter_data = filter_data
        self.start()

    def update_filter(self, **changes) -> None:
        """Change individual criteria (e.g. ``position=Position.ST``) and fetch."""
        self.set_filter_data(self._player_filter_data.updated(**changes))

    def reset_filter_data(self) -> None:
        """Restore every criterion to its default and fetch."""
        self.set_filter_data(PlayerFilterData.default())

    def start_fetching(self, completion: Callback) -> None:
        self.api_manager.players(self._player_filter_data, completion)

    def response_body_to_model(self, response_body: GetPlayersResponseBody) -> Optional[list[PlayerPreview]]:
        return response_body.players

    def number_of_players(self) -> int:
        if not self.state.is_displaying:
            return 0
        return len(self.state.value)

    def player(self, at: int) -> Optional[PlayerPreview]:
        """The player shown in row ``at``, or None if there is no such row."""
        if not self.state.is_displaying:
            return None
        players = self.state.value
        if at < 0 or at >= len(players):
            return None
        return players[at]
