"""Turn control widgets — Bet, Roll, New Session."""

from __future__ import annotations

import streamlit as st


def render_turn_controls(
    bankroll: int,
    current_bet: int,
    game_active: bool,
) -> tuple[str | None, int]:
    """Render contextual betting and rolling controls.

    Returns:
        ``(action, amount)`` where action is ``"bet"``, ``"roll"``,
        ``"reset"`` or ``None`` if no action was taken.
    """
    amount = st.number_input(
        "Wager",
        min_value=0,
        max_value=max(bankroll, 0),
        value=min(10, bankroll),
        step=1,
        disabled=game_active or bankroll == 0,
    )

    cols = st.columns(3)
    with cols[0]:
        if st.button(
            "Place Bet",
            key="btn_bet",
            use_container_width=True,
            disabled=game_active or current_bet > 0,
        ):
            return "bet", int(amount)
    with cols[1]:
        roll_label = "Roll Again" if game_active else "Roll Dice"
        if st.button(
            roll_label,
            key="btn_roll",
            use_container_width=True,
            type="primary",
        ):
            return "roll", 0
    with cols[2]:
        if st.button("New Session", key="btn_reset", use_container_width=True):
            return "reset", 0

    return None, 0
