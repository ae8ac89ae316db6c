"""Filter panel component rendering the filter table as Streamlit widgets."""

import logging
from typing import Optional

import streamlit as st

from ...discover import FilterSection
from ...models import MAX_OVERALL, MIN_OVERALL
from ..filter_table import Accessory, Cell, IndexPath, PlayerFilterTableAdapter, TableView, Transition

logger = logging.getLogger(__name__)

SORT_KEY = "filter_sort"
OVERALL_KEY = "filter_overall"
PICKER_KEY_PREFIX = "filter_picker_"


class StreamlitTableView(TableView):
    """
    TableView backed by Streamlit widgets.

    Widgets redraw on the rerun that follows every callback, so reloading
    only has to drop widget state that would shadow the new filter values.
    """

    def __init__(self, adapter: PlayerFilterTableAdapter) -> None:
        self.adapter = adapter

    def reload_sections(self, sections: list[int], animation: Transition) -> None:
        logger.debug("Reloading filter sections %s", sections)

    def reload_data(self, transition: Optional[Transition] = None, duration: float = 0.0) -> None:
        for key in list(st.session_state.keys()):
            if key in (SORT_KEY, OVERALL_KEY) or str(key).startswith(PICKER_KEY_PREFIX):
                del st.session_state[key]

    def cell_for_row(self, index_path: IndexPath) -> Optional[Cell]:
        return self.adapter.cell_for_row_at(index_path)

    def deselect_row(self, index_path: IndexPath, animated: bool = True) -> None:
        pass


def render_player_filter(adapter: PlayerFilterTableAdapter) -> None:
    """
    Render every section of the filter table.

    Args:
        adapter: Adapter over the discover screen's filter view model.
    """
    table_view = StreamlitTableView(adapter)

    for section in range(adapter.number_of_sections()):
        title = adapter.title_for_header_in_section(section)
        if title:
            st.subheader(title)

        kind = adapter.view_model.section(section)
        if kind is FilterSection.SORT:
            _render_sort_section(adapter, table_view, section)
        elif kind is FilterSection.PLAYER_INFO:
            for row in range(adapter.number_of_rows_in_section(section)):
                _render_player_info_row(adapter, table_view, IndexPath(section, row))
        else:
            index_path = IndexPath(section, 0)
            cell = adapter.cell_for_row_at(index_path)
            st.button(
                cell.text,
                key="filter_reset",
                on_click=adapter.did_select_row_at,
                args=(table_view, index_path),
                use_container_width=True,
            )


def _render_sort_section(adapter: PlayerFilterTableAdapter, table_view: TableView, section: int) -> None:
    rows = adapter.number_of_rows_in_section(section)
    cells = [adapter.cell_for_row_at(IndexPath(section, row)) for row in range(rows)]
    selected = next((i for i, cell in enumerate(cells) if cell.accessory is Accessory.CHECKMARK), 0)

    st.radio(
        "Sort order",
        options=list(range(rows)),
        index=selected,
        format_func=lambda i: cells[i].text,
        key=SORT_KEY,
        on_change=_on_sort_change,
        args=(adapter, table_view, section),
        label_visibility="collapsed",
    )


def _on_sort_change(adapter: PlayerFilterTableAdapter, table_view: TableView, section: int) -> None:
    adapter.did_select_row_at(table_view, IndexPath(section, st.session_state[SORT_KEY]))


def _render_player_info_row(
    adapter: PlayerFilterTableAdapter,
    table_view: TableView,
    index_path: IndexPath,
) -> None:
    cell = adapter.cell_for_row_at(index_path)

    # Overall range has no picker; it edits through a range slider
    if cell.picker is None:
        filter_data = adapter.view_model.filter_data
        st.slider(
            cell.text,
            min_value=MIN_OVERALL,
            max_value=MAX_OVERALL,
            value=(filter_data.min_overall, filter_data.max_overall),
            key=OVERALL_KEY,
            on_change=_on_overall_change,
            args=(adapter,),
        )
        return

    key = f"{PICKER_KEY_PREFIX}{cell.picker.row.value}"
    options = cell.picker.options
    st.selectbox(
        cell.text,
        options=list(range(len(options))),
        index=cell.picker.selected_index,
        format_func=lambda i: options[i],
        key=key,
        on_change=_on_pick,
        args=(adapter, table_view, index_path, key),
    )


def _on_pick(
    adapter: PlayerFilterTableAdapter,
    table_view: TableView,
    index_path: IndexPath,
    key: str,
) -> None:
    adapter.did_select_row_at(table_view, index_path)
    adapter.did_pick(st.session_state[key])


def _on_overall_change(adapter: PlayerFilterTableAdapter) -> None:
    min_overall, max_overall = st.session_state[OVERALL_KEY]
    adapter.view_model.select_overall_range(min_overall, max_overall)
