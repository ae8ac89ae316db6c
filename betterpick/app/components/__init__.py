"""Reusable UI components for the Betterpick application."""

from .filter_panel import StreamlitTableView, render_player_filter
from .player_detail import render_player_detail
from .player_list import render_player_list, render_player_row

__all__ = [
    "StreamlitTableView",
    "render_player_filter",
    "render_player_detail",
    "render_player_list",
    "render_player_row",
]
