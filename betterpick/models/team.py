"""Club and league data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class TeamPreview:
    """
    Represents a Team with only the necessary information.

    Attributes:
        team_id: Unique identifier of the club.
        name: Club name.
        logo_url: URL of the club crest.
    """

    team_id: str
    name: str
    logo_url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TeamPreview":
        """Decode from the API's JSON object."""
        return cls(
            team_id=str(data["teamId"]),
            name=require_str(data, "name"),
            logo_url=require_str(data, "logoURL"),
        )


@dataclass(frozen=True)
class LeaguePreview:
    """A league as it appears in the league listing."""

    league_id: str
    name: str
    logo_url: str

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LeaguePreview":
        return cls(
            league_id=str(data["leagueId"]),
            name=require_str(data, "name"),
            logo_url=require_str(data, "logoURL"),
        )


@dataclass(frozen=True)
class League:
    """
    A league with its participating clubs.

    Attributes:
        league_id: Unique identifier of the league.
        name: League name.
        logo_url: URL of the league logo.
        clubs: Previews of every club in the league.
    """

    league_id: str
    name: str
    logo_url: str
    clubs: list[TeamPreview] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "League":
        return cls(
            league_id=str(data["leagueId"]),
            name=require_str(data, "name"),
            logo_url=require_str(data, "logoURL"),
            clubs=[TeamPreview.from_dict(club) for club in data.get("clubs", [])],
        )


def require_str(data: dict[str, Any], key: str) -> str:
    """Fetch a required string field, rejecting other JSON types."""
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string, got {type(value).__name__}")
    return value


def require_object(data: Any, what: str) -> dict[str, Any]:
    """Reject JSON values that are not objects."""
    if not isinstance(data, dict):
        raise TypeError(f"{what} must be an object, got {type(data).__name__}")
    return data
