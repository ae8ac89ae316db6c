"""Response bodies returned by the Betterpick API endpoints."""

from dataclasses import dataclass, field
from typing import Any

from .player import Nationality, PlayerPreview
from .team import League, LeaguePreview, TeamPreview, require_object


@dataclass
class GetLeaguesResponseBody:
    """Body of ``GET /leagues``."""

    leagues: list[LeaguePreview] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GetLeaguesResponseBody":
        return cls(leagues=[LeaguePreview.from_dict(item) for item in data["leagues"]])


@dataclass
class GetLeagueResponseBody:
    """Body of ``GET /leagues/{leagueID}``."""

    league: League

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GetLeagueResponseBody":
        return cls(league=League.from_dict(data["league"]))


@dataclass
class GetNationalitiesBody:
    """Body of ``GET /nationalities``."""

    nationalities: list[Nationality] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GetNationalitiesBody":
        return cls(nationalities=[Nationality.from_dict(item) for item in data["nationalities"]])


@dataclass
class GetClubPlayersResponseBody:
    """Body of ``GET /players/club/{clubID}``."""

    players: list[PlayerPreview] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GetClubPlayersResponseBody":
        return cls(players=[PlayerPreview.from_dict(item) for item in data["players"]])


@dataclass
class GetSearchResponseBody:
    """Body of ``GET /search``: players and clubs matching a name."""

    players: list[PlayerPreview] = field(default_factory=list)
    clubs: list[TeamPreview] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GetSearchResponseBody":
        data = require_object(data, "search body")
        return cls(
            players=[PlayerPreview.from_dict(item) for item in data.get("players", [])],
            clubs=[TeamPreview.from_dict(item) for item in data.get("clubs", [])],
        )


@dataclass
class GetPlayersResponseBody:
    """Body of ``GET /players/search``."""

    players: list[PlayerPreview] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GetPlayersResponseBody":
        return cls(players=[PlayerPreview.from_dict(item) for item in data["players"]])
