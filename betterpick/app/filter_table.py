"""Table adapter mapping the filter view model onto list UI cells."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from ..discover import ANY_TEXT, FilterSection, PlayerFilterViewModel, PlayerInfoRow

logger = logging.getLogger(__name__)

# Cross-fade applied when the whole table reloads after a reset
RESET_TRANSITION_SECONDS = 0.4


@dataclass(frozen=True)
class IndexPath:
    section: int
    row: int


class CellStyle(Enum):
    DEFAULT = "default"
    VALUE = "value"
    CENTERED_ACTION = "centered_action"


class Accessory(Enum):
    NONE = "none"
    CHECKMARK = "checkmark"


class Transition(Enum):
    AUTOMATIC = "automatic"
    CROSS_DISSOLVE = "cross_dissolve"


@dataclass
class PickerControl:
    """
    Inline selection widget attached to a cell.

    Attributes:
        row: The player info row the picker edits.
        options: Option labels; index 0 is always "Any".
        selected_index: Index of the current choice.
    """

    row: PlayerInfoRow
    options: list[str] = field(default_factory=list)
    selected_index: int = 0


@dataclass
class Cell:
    """Display data for a single table row."""

    text: str = ""
    detail_text: Optional[str] = None
    style: CellStyle = CellStyle.DEFAULT
    accessory: Accessory = Accessory.NONE
    picker: Optional[PickerControl] = None
    is_first_responder: bool = False

    def become_first_responder(self) -> bool:
        """Open the attached picker. Returns False if there is none."""
        if self.picker is None:
            return False
        self.is_first_responder = True
        return True


class TableView(ABC):
    """The parts of a list UI the adapter drives."""

    @abstractmethod
    def reload_sections(self, sections: list[int], animation: Transition) -> None:
        pass

    @abstractmethod
    def reload_data(self, transition: Optional[Transition] = None, duration: float = 0.0) -> None:
        pass

    @abstractmethod
    def cell_for_row(self, index_path: IndexPath) -> Optional[Cell]:
        pass

    @abstractmethod
    def deselect_row(self, index_path: IndexPath, animated: bool = True) -> None:
        pass


class PlayerFilterTableAdapter:
    """
    Data source and delegate for the player filter table.

    Holds no filter state of its own; every change goes through the
    PlayerFilterViewModel.
    """

    def __init__(self, view_model: PlayerFilterViewModel) -> None:
        self.view_model = view_model
        self.last_selected_index_path: Optional[IndexPath] = None

    # Data source

    def number_of_sections(self) -> int:
        return self.view_model.number_of_sections()

    def number_of_rows_in_section(self, section: int) -> int:
        return self.view_model.number_of_rows_in(section)

    def title_for_header_in_section(self, section: int) -> Optional[str]:
        return self.view_model.section(section).header_text

    def cell_for_row_at(self, index_path: IndexPath) -> Cell:
        row = index_path.row
        kind = self.view_model.section(index_path.section)

        if kind is FilterSection.SORT:
            data = self.view_model.get_sort_section_data(row)
            return Cell(
                text=data.text,
                accessory=Accessory.CHECKMARK if data.selected else Accessory.NONE,
            )

        if kind is FilterSection.PLAYER_INFO:
            info_row = self.view_model.get_player_info_section_row(row)
            if info_row is PlayerInfoRow.NATIONALITY:
                return Cell(
                    text=info_row.title,
                    detail_text=self.view_model.detail_text_for_nationality(),
                    style=CellStyle.VALUE,
                    picker=self._nationality_picker(),
                )
            if info_row is PlayerInfoRow.POSITION:
                return Cell(
                    text=info_row.title,
                    detail_text=self.view_model.detail_text_for_position(),
                    style=CellStyle.VALUE,
                    picker=self._position_picker(),
                )
            return Cell(
                text=info_row.title,
                detail_text=self.view_model.detail_text_for_overall_range(),
                style=CellStyle.VALUE,
            )

        return Cell(text="Reset filters", style=CellStyle.CENTERED_ACTION)

    def _nationality_picker(self) -> PickerControl:
        nationalities = self.view_model.nationalities
        current = self.view_model.filter_data.nationality
        selected = nationalities.index(current) + 1 if current in nationalities else 0
        return PickerControl(
            row=PlayerInfoRow.NATIONALITY,
            options=[ANY_TEXT] + [n.name for n in nationalities],
            selected_index=selected,
        )

    def _position_picker(self) -> PickerControl:
        positions = self.view_model.positions
        current = self.view_model.filter_data.position
        selected = positions.index(current) + 1 if current is not None else 0
        return PickerControl(
            row=PlayerInfoRow.POSITION,
            options=[ANY_TEXT] + [p.value for p in positions],
            selected_index=selected,
        )

    # Delegate

    def did_select_row_at(self, table_view: TableView, index_path: IndexPath) -> None:
        section = index_path.section
        kind = self.view_model.section(section)

        if kind is FilterSection.SORT:
            self.view_model.select_sort_order(index_path.row)
            table_view.reload_sections([section], Transition.AUTOMATIC)
        elif kind is FilterSection.PLAYER_INFO:
            cell = table_view.cell_for_row(index_path)
            if cell is not None and cell.picker is not None:
                self.last_selected_index_path = index_path
                cell.become_first_responder()
        else:
            self.view_model.reset_filter_data()
            table_view.reload_data(Transition.CROSS_DISSOLVE, RESET_TRANSITION_SECONDS)

        table_view.deselect_row(index_path, animated=True)

    def did_pick(self, option_index: int) -> None:
        """
        Apply a choice made in the picker opened by the last row tap.

        Index 0 clears the criterion.
        """
        if self.last_selected_index_path is None:
            logger.debug("Picker choice %d with no open picker", option_index)
            return

        info_row = self.view_model.get_player_info_section_row(self.last_selected_index_path.row)
        if info_row is PlayerInfoRow.NATIONALITY:
            nationality = self.view_model.nationalities[option_index - 1] if option_index > 0 else None
            self.view_model.select_nationality(nationality)
        elif info_row is PlayerInfoRow.POSITION:
            position = self.view_model.positions[option_index - 1] if option_index > 0 else None
            self.view_model.select_position(position)
