"""Data models for Betterpick."""

from .filter import DEFAULT_MAX_OVERALL, DEFAULT_MIN_OVERALL, PlayerFilterData, SortOrder
from .player import (
    MAX_OVERALL,
    MIN_OVERALL,
    Nationality,
    Player,
    PlayerPreview,
    Position,
    PreferredFoot,
)
from .responses import (
    GetClubPlayersResponseBody,
    GetLeagueResponseBody,
    GetLeaguesResponseBody,
    GetNationalitiesBody,
    GetPlayersResponseBody,
    GetSearchResponseBody,
)
from .team import League, LeaguePreview, TeamPreview

__all__ = [
    # Filter
    "DEFAULT_MAX_OVERALL",
    "DEFAULT_MIN_OVERALL",
    "PlayerFilterData",
    "SortOrder",
    # Player
    "MAX_OVERALL",
    "MIN_OVERALL",
    "Nationality",
    "Player",
    "PlayerPreview",
    "Position",
    "PreferredFoot",
    # Responses
    "GetClubPlayersResponseBody",
    "GetLeagueResponseBody",
    "GetLeaguesResponseBody",
    "GetNationalitiesBody",
    "GetPlayersResponseBody",
    "GetSearchResponseBody",
    # Team
    "League",
    "LeaguePreview",
    "TeamPreview",
]
