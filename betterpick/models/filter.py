"""Player search filter criteria."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .player import MAX_OVERALL, Nationality, Position


# Default overall range shown on the discover screen
DEFAULT_MIN_OVERALL = 40
DEFAULT_MAX_OVERALL = MAX_OVERALL


class SortOrder(Enum):
    """Sort order for player search results."""

    OVERALL_DESCENDING = "desc"
    OVERALL_ASCENDING = "asc"

    @property
    def display_text(self) -> str:
        if self is SortOrder.OVERALL_DESCENDING:
            return "Highest overall first"
        return "Lowest overall first"


@dataclass
class PlayerFilterData:
    """
    Criteria for a filtered player search.

    Attributes:
        nationality: Only players of this nationality, or any if None.
        position: Only players who can play this position, or any if None.
        min_overall: Lowest overall rating included.
        max_overall: Highest overall rating included.
        sort_order: Order of the results.
    """

    nationality: Optional[Nationality] = None
    position: Optional[Position] = None
    min_overall: int = DEFAULT_MIN_OVERALL
    max_overall: int = DEFAULT_MAX_OVERALL
    sort_order: SortOrder = SortOrder.OVERALL_DESCENDING

    def __post_init__(self) -> None:
        if self.min_overall > self.max_overall:
            raise ValueError("min_overall cannot exceed max_overall")

    @classmethod
    def default(cls) -> "PlayerFilterData":
        """Filter with every criterion at its default."""
        return cls()

    @property
    def is_default(self) -> bool:
        return self == PlayerFilterData.default()

    def updated(self, **changes) -> "PlayerFilterData":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def parameters(self) -> dict[str, str]:
        """Query parameters for ``GET /players/search``, in a stable order."""
        params: dict[str, str] = {}
        if self.nationality is not None:
            params["nationality"] = self.nationality.name
        if self.position is not None:
            params["position"] = self.position.value
        params["minOverall"] = str(self.min_overall)
        params["maxOverall"] = str(self.max_overall)
        params["sort"] = self.sort_order.value
        return params
