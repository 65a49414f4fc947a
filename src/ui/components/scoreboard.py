"""Scoreboard component — bankroll, wager and win tallies."""

from __future__ import annotations

import streamlit as st


def render_scoreboard(
    bankroll: int,
    current_bet: int,
    player_wins: int,
    house_wins: int,
) -> None:
    """Render the session scoreboard as four metrics."""
    cols = st.columns(4)
    cols[0].metric("Bankroll", f"${bankroll}")
    cols[1].metric("Current Bet", f"${current_bet}")
    cols[2].metric("Player Wins", player_wins)
    cols[3].metric("House Wins", house_wins)
