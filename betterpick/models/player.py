"""Player data models for Betterpick."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .team import TeamPreview, require_object, require_str


# Overall ratings are reported on a 1-99 scale
MIN_OVERALL = 1
MAX_OVERALL = 99


class Position(Enum):
    """Football playing positions."""

    GK = "GK"
    CB = "CB"
    LB = "LB"
    RB = "RB"
    LWB = "LWB"
    RWB = "RWB"
    CDM = "CDM"
    CM = "CM"
    CAM = "CAM"
    LM = "LM"
    RM = "RM"
    LW = "LW"
    RW = "RW"
    CF = "CF"
    ST = "ST"


class PreferredFoot(Enum):
    """Player's stronger foot."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Nationality:
    """A nationality players can be filtered by."""

    name: str
    flag_url: Optional[str] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Nationality":
        return cls(name=require_str(data, "name"), flag_url=data.get("flagURL"))


def _parse_overall(value: Any) -> int:
    overall = int(value)
    if overall < MIN_OVERALL or overall > MAX_OVERALL:
        raise ValueError(f"overall must be between {MIN_OVERALL} and {MAX_OVERALL}, got {overall}")
    return overall


@dataclass
class PlayerPreview:
    """
    Represents a player in search results and club rosters.

    Attributes:
        id: Unique identifier for the player.
        name: Player's display name.
        overall: Overall rating (1-99).
        positions: Positions the player can play, best first.
        nationality: Country the player represents.
        club: The player's current club, if any.
        photo_url: URL of the player's photo.
    """

    id: str
    name: str
    overall: int
    positions: list[Position] = field(default_factory=list)
    nationality: Optional[str] = None
    club: Optional[TeamPreview] = None
    photo_url: Optional[str] = None

    @property
    def primary_position(self) -> Optional[Position]:
        """The first listed position."""
        return self.positions[0] if self.positions else None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlayerPreview":
        data = require_object(data, "player")
        club = data.get("club")
        return cls(
            id=str(data["id"]),
            name=require_str(data, "name"),
            overall=_parse_overall(data["overall"]),
            positions=[Position(p) for p in data.get("positions", [])],
            nationality=data.get("nationality"),
            club=TeamPreview.from_dict(club) if club else None,
            photo_url=data.get("photoURL"),
        )


@dataclass
class Player(PlayerPreview):
    """
    Full player detail from ``/players/{id}/full``.

    Attributes:
        full_name: Player's full legal name.
        age: Age in years.
        height_cm: Height in centimetres.
        weight_kg: Weight in kilograms.
        preferred_foot: Stronger foot.
        potential: Projected peak overall rating.
        value_eur: Market value in euros.
        wage_eur: Weekly wage in euros.
        attributes: Individual attribute ratings keyed by attribute name.
    """

    full_name: Optional[str] = None
    age: Optional[int] = None
    height_cm: Optional[int] = None
    weight_kg: Optional[int] = None
    preferred_foot: Optional[PreferredFoot] = None
    potential: Optional[int] = None
    value_eur: Optional[int] = None
    wage_eur: Optional[int] = None
    attributes: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if self.age is not None and self.age < 0:
            raise ValueError("age cannot be negative")
        if self.potential is not None and self.potential < self.overall:
            raise ValueError("potential cannot be lower than overall")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Player":
        preview = PlayerPreview.from_dict(data)
        foot = data.get("preferredFoot")
        attributes = require_object(data.get("attributes", {}), "attributes")
        potential = data.get("potential")
        return cls(
            id=preview.id,
            name=preview.name,
            overall=preview.overall,
            positions=preview.positions,
            nationality=preview.nationality,
            club=preview.club,
            photo_url=preview.photo_url,
            full_name=data.get("fullName"),
            age=data.get("age"),
            height_cm=data.get("height"),
            weight_kg=data.get("weight"),
            preferred_foot=PreferredFoot(require_str(data, "preferredFoot").lower()) if foot is not None else None,
            potential=_parse_overall(potential) if potential is not None else None,
            value_eur=data.get("value"),
            wage_eur=data.get("wage"),
            attributes={str(k): int(v) for k, v in attributes.items()},
        )
