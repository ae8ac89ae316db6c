"""Discover page: filterable player search."""

import logging

import streamlit as st

from ...discover import DiscoverPlayerViewModel, PlayerFilterViewModel
from ...models import Nationality, PlayerPreview
from ...networking import BetterpickAPIManager, BetterpickError, wait_for
from ..components import render_player_detail, render_player_filter, render_player_list, render_player_row
from ..filter_table import PlayerFilterTableAdapter

logger = logging.getLogger(__name__)

# Seconds the page waits for a blocking API call
PAGE_TIMEOUT = 30.0


def _init_session_state() -> None:
    """Initialize session state variables."""
    if "api_manager" not in st.session_state:
        st.session_state.api_manager = BetterpickAPIManager()
    if "discover_view_model" not in st.session_state:
        manager = st.session_state.api_manager
        view_model = DiscoverPlayerViewModel(_load_nationalities(manager), api_manager=manager)
        view_model.start()
        st.session_state.discover_view_model = view_model
        st.session_state.filter_adapter = PlayerFilterTableAdapter(PlayerFilterViewModel(view_model))
    if "selected_player_id" not in st.session_state:
        st.session_state.selected_player_id = None


def _load_nationalities(manager: BetterpickAPIManager) -> list[Nationality]:
    """
    Fetch the nationality list for the filter picker.

    Returns:
        Nationalities, or an empty list if the API is unavailable.
    """
    result = wait_for(manager.nationalities, timeout=PAGE_TIMEOUT)
    if not result.is_success:
        logger.warning("Nationalities unavailable (%s); picker will only offer Any", result.error.value)
        return []
    return result.value.nationalities


def _select_player(player: PlayerPreview) -> None:
    st.session_state.selected_player_id = player.id


def _clear_player() -> None:
    st.session_state.selected_player_id = None


def _render_search() -> None:
    """Free-text search across players and clubs."""
    query = st.text_input("Search players and clubs", key="search_query")
    if not query:
        return

    try:
        body = wait_for(st.session_state.api_manager.search, query, timeout=PAGE_TIMEOUT).unwrap()
    except BetterpickError as e:
        st.error(str(e))
        return

    if not body.players and not body.clubs:
        st.info(f"Nothing found for '{query}'.")
        return

    for club in body.clubs:
        st.markdown(f"🏟️ **{club.name}**")
    for player in body.players:
        render_player_row(player, on_select=_select_player)


def _render_selected_player() -> None:
    player_id = st.session_state.selected_player_id
    try:
        player = wait_for(st.session_state.api_manager.player, player_id, timeout=PAGE_TIMEOUT).unwrap()
    except BetterpickError as e:
        st.error(f"Couldn't load player: {e}")
    else:
        render_player_detail(player)
    st.button("Back to results", on_click=_clear_player)


def render() -> None:
    """Render the discover page."""
    _init_session_state()

    st.title("Discover Players")

    with st.sidebar:
        st.header("Filters")
        render_player_filter(st.session_state.filter_adapter)

    if st.session_state.selected_player_id is not None:
        _render_selected_player()
        return

    _render_search()
    st.divider()
    render_player_list(st.session_state.discover_view_model, on_select=_select_player)
