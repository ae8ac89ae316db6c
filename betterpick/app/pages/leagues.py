"""Leagues page: browse leagues, their clubs and club rosters."""

import streamlit as st

from ...models import LeaguePreview, TeamPreview
from ...networking import BetterpickAPIManager, BetterpickError, wait_for
from ..components import render_player_row

# Seconds the page waits for a blocking API call
PAGE_TIMEOUT = 30.0


def _manager() -> BetterpickAPIManager:
    if "api_manager" not in st.session_state:
        st.session_state.api_manager = BetterpickAPIManager()
    return st.session_state.api_manager


def _load_leagues() -> list[LeaguePreview]:
    if "leagues" not in st.session_state:
        st.session_state.leagues = wait_for(_manager().leagues, timeout=PAGE_TIMEOUT).unwrap().leagues
    return st.session_state.leagues


def _refresh_leagues() -> None:
    st.session_state.pop("leagues", None)


def _render_club(club: TeamPreview) -> None:
    manager = _manager()
    # Header from /clubs/{id}, roster from /players/club/{id}
    detail = wait_for(manager.club, club.team_id, timeout=PAGE_TIMEOUT).unwrap()

    col1, col2 = st.columns([1, 5])
    with col1:
        st.image(detail.logo_url, width=64)
    with col2:
        st.header(detail.name)

    players = wait_for(manager.club_players, club.team_id, timeout=PAGE_TIMEOUT).unwrap().players
    if not players:
        st.info("No players listed for this club.")
        return
    for player in sorted(players, key=lambda p: p.overall, reverse=True):
        render_player_row(player)


def render() -> None:
    """Render the leagues page."""
    st.title("Leagues")
    st.button("Refresh", on_click=_refresh_leagues)

    try:
        leagues = _load_leagues()
        if not leagues:
            st.info("No leagues available.")
            return

        league_preview = st.selectbox("League", leagues, format_func=lambda league: league.name)
        league = wait_for(_manager().league, league_preview.league_id, timeout=PAGE_TIMEOUT).unwrap().league
        if not league.clubs:
            st.info("No clubs in this league.")
            return

        club = st.selectbox("Club", league.clubs, format_func=lambda c: c.name)
        _render_club(club)
    except BetterpickError as e:
        st.error(str(e))
