"""Player list component for the discover screen."""

from typing import Callable, Optional

import streamlit as st

from ...discover import DiscoverPlayerViewModel, FetchStatus
from ...models import PlayerPreview
from ...networking import ManagerResultError


ERROR_MESSAGES = {
    ManagerResultError.USER_NETWORK: "Can't reach Betterpick. Check your connection and try again.",
    ManagerResultError.SERVER: "Betterpick is having trouble right now. Please try again later.",
}


def render_player_list(
    view_model: DiscoverPlayerViewModel,
    on_select: Optional[Callable[[PlayerPreview], None]] = None,
) -> None:
    """
    Render the players of the discover view model, row by row.

    Args:
        view_model: View model holding the latest search result.
        on_select: Callback when a player's details are requested.
    """
    state = view_model.state

    if state.status is FetchStatus.FAILED:
        st.error(ERROR_MESSAGES[state.error])
        st.button("Retry", key="retry_players", on_click=view_model.start)
        return

    if not state.is_displaying:
        st.info("Loading players...")
        return

    count = view_model.number_of_players()
    if count == 0:
        st.info("No players match your filters.")
        return

    st.caption(f"{count} player{'s' if count != 1 else ''}")
    for row in range(count):
        render_player_row(view_model.player(at=row), on_select)


def render_player_row(
    player: PlayerPreview,
    on_select: Optional[Callable[[PlayerPreview], None]] = None,
) -> None:
    """Render a single player row."""
    cols = st.columns([1, 4, 1, 1])

    # Photo
    with cols[0]:
        if player.photo_url:
            st.image(player.photo_url, width=48)

    # Player info
    with cols[1]:
        st.markdown(f"**{player.name}**")
        details = [" / ".join(p.value for p in player.positions)]
        if player.nationality:
            details.append(player.nationality)
        if player.club:
            details.append(player.club.name)
        st.caption(" · ".join(d for d in details if d))

    # Overall
    with cols[2]:
        st.markdown(f"**{player.overall}**")

    # Details button
    with cols[3]:
        if on_select is not None:
            st.button("Details", key=f"details_{player.id}", on_click=on_select, args=(player,))

    st.divider()
