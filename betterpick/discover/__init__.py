"""View models for the player discovery screen."""

from .discover_player import DiscoverPlayerViewModel
from .fetching import Dispatch, FetchingViewModel, FetchState, FetchStatus
from .player_filter import (
    ANY_TEXT,
    FilterSection,
    PlayerFilterViewModel,
    PlayerInfoRow,
    SortCellData,
)

__all__ = [
    # Fetching
    "Dispatch",
    "FetchingViewModel",
    "FetchState",
    "FetchStatus",
    # Discover
    "DiscoverPlayerViewModel",
    # Filter
    "ANY_TEXT",
    "FilterSection",
    "PlayerFilterViewModel",
    "PlayerInfoRow",
    "SortCellData",
]
