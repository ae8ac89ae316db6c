"""View model behind the player filter table."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..models import Nationality, PlayerFilterData, Position, SortOrder
from .discover_player import DiscoverPlayerViewModel


ANY_TEXT = "Any"


class FilterSection(Enum):
    """Sections of the filter table, in display order."""

    SORT = "sort"
    PLAYER_INFO = "player_info"
    RESET = "reset"

    @property
    def header_text(self) -> Optional[str]:
        if self is FilterSection.SORT:
            return "Sort by"
        if self is FilterSection.PLAYER_INFO:
            return "Player info"
        return None


class PlayerInfoRow(Enum):
    """Rows of the player info section."""

    NATIONALITY = "nationality"
    POSITION = "position"
    OVERALL_RANGE = "overall_range"

    @property
    def title(self) -> str:
        if self is PlayerInfoRow.NATIONALITY:
            return "Nationality"
        if self is PlayerInfoRow.POSITION:
            return "Position"
        return "Overall"


@dataclass(frozen=True)
class SortCellData:
    text: str
    selected: bool


class PlayerFilterViewModel:
    """
    Table-shaped view of the discover screen's filter criteria.

    Edits are forwarded to the DiscoverPlayerViewModel, so each one starts a
    single new player search.
    """

    sections = list(FilterSection)
    sort_orders = list(SortOrder)
    player_info_rows = list(PlayerInfoRow)
    positions = list(Position)

    def __init__(self, discover_view_model: DiscoverPlayerViewModel) -> None:
        self.discover_view_model = discover_view_model

    @property
    def filter_data(self) -> PlayerFilterData:
        return self.discover_view_model.player_filter_data

    @property
    def nationalities(self) -> list[Nationality]:
        return self.discover_view_model.nationalities

    # Table structure

    def number_of_sections(self) -> int:
        return len(self.sections)

    def section(self, at: int) -> FilterSection:
        return self.sections[at]

    def number_of_rows_in(self, section: int) -> int:
        kind = self.section(section)
        if kind is FilterSection.SORT:
            return len(self.sort_orders)
        if kind is FilterSection.PLAYER_INFO:
            return len(self.player_info_rows)
        return 1

    def get_sort_section_data(self, row: int) -> SortCellData:
        order = self.sort_orders[row]
        return SortCellData(text=order.display_text, selected=order is self.filter_data.sort_order)

    def get_player_info_section_row(self, row: int) -> PlayerInfoRow:
        return self.player_info_rows[row]

    # Detail texts

    def detail_text_for_nationality(self) -> str:
        nationality = self.filter_data.nationality
        return nationality.name if nationality else ANY_TEXT

    def detail_text_for_position(self) -> str:
        position = self.filter_data.position
        return position.value if position else ANY_TEXT

    def detail_text_for_overall_range(self) -> str:
        return f"{self.filter_data.min_overall} - {self.filter_data.max_overall}"

    # Edits

    def select_sort_order(self, row: int) -> None:
        self.discover_view_model.update_filter(sort_order=self.sort_orders[row])

    def select_nationality(self, nationality: Optional[Nationality]) -> None:
        self.discover_view_model.update_filter(nationality=nationality)

    def select_position(self, position: Optional[Position]) -> None:
        self.discover_view_model.update_filter(position=position)

    def select_overall_range(self, min_overall: int, max_overall: int) -> None:
        self.discover_view_model.update_filter(min_overall=min_overall, max_overall=max_overall)

    def reset_filter_data(self) -> None:
        self.discover_view_model.reset_filter_data()
