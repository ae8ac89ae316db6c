"""Player detail component."""

import streamlit as st

from ...models import Player


def render_player_detail(player: Player) -> None:
    """
    Render the full detail of a player.

    Args:
        player: Player fetched from ``/players/{id}/full``.
    """
    col1, col2 = st.columns([1, 3])

    with col1:
        if player.photo_url:
            st.image(player.photo_url, width=96)
        st.metric(label="Overall", value=player.overall)
        if player.potential is not None:
            st.metric(label="Potential", value=player.potential)

    with col2:
        st.subheader(player.full_name or player.name)
        facts = []
        if player.age is not None:
            facts.append(f"{player.age} years")
        if player.height_cm:
            facts.append(f"{player.height_cm} cm")
        if player.weight_kg:
            facts.append(f"{player.weight_kg} kg")
        if player.preferred_foot is not None:
            facts.append(f"{player.preferred_foot.value.capitalize()} foot")
        st.caption(" · ".join(facts))

        if player.club:
            st.markdown(f"**Club:** {player.club.name}")
        if player.value_eur is not None:
            st.markdown(f"**Value:** €{player.value_eur:,}")

    if player.attributes:
        with st.expander("Attributes", expanded=False):
            for name, rating in sorted(player.attributes.items()):
                st.progress(rating / 100, text=f"{name}: {rating}")
