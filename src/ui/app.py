"""Craps — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config import configure_logging, get_settings
from src.engine import (
    ChangeRecorder,
    CrapsEngine,
    InvalidArgumentError,
    RoundOutcome,
    WeightedDiceProvider,
)
from src.ui.components import render_dice_tray, render_scoreboard, render_turn_controls


_RULES = """\
**Goal:** Grow your bankroll one pass-line bet at a time.

**Come-out roll:**
- **7 or 11** = Natural, you win
- **2, 3 or 12** = Craps, the house wins
- Anything else becomes **the point**

**Point phase:**
- Roll the point again = you win
- Roll a **7** first = seven-out, the house wins

**Payout:** a win returns your stake plus an equal amount.
"""

_OUTCOME_MESSAGES = {
    RoundOutcome.NATURAL: ("success", "Natural! You win."),
    RoundOutcome.CRAPS: ("error", "Craps. The house wins."),
    RoundOutcome.POINT_MADE: ("success", "Point made! You win."),
    RoundOutcome.SEVEN_OUT: ("error", "Seven-out. The house wins."),
}


def _new_session(engine: CrapsEngine, starting_bankroll: int) -> None:
    engine.reset_session()
    engine.set_bankroll(starting_bankroll)


def _get_engine() -> tuple[CrapsEngine, ChangeRecorder]:
    """One engine per browser session, funded from settings."""
    ss = st.session_state
    if "engine" not in ss:
        settings = get_settings()
        engine = CrapsEngine(dice=WeightedDiceProvider(seed=settings.dice_seed))
        recorder = ChangeRecorder()
        engine.add_change_listener(recorder)
        engine.set_bankroll(settings.starting_bankroll)
        ss["engine"] = engine
        ss["recorder"] = recorder
    return ss["engine"], ss["recorder"]


def _render_sidebar(recorder: ChangeRecorder) -> None:
    with st.sidebar:
        st.markdown("### Rules")
        st.markdown(_RULES)
        st.divider()
        st.markdown("### Change Log")
        for change in reversed(recorder.changes[-15:]):
            st.caption(f"`{change.name}`: {change.old_value} → {change.new_value}")


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Craps",
        page_icon="🎲",
        layout="centered",
    )
    configure_logging()

    engine, recorder = _get_engine()
    settings = get_settings()

    st.title("Craps")
    render_scoreboard(
        engine.bankroll,
        engine.current_bet,
        engine.player_wins,
        engine.house_wins,
    )
    render_dice_tray(engine.die1, engine.die2, engine.point)

    outcome = engine.last_outcome
    if outcome in _OUTCOME_MESSAGES and not engine.game_active:
        kind, message = _OUTCOME_MESSAGES[outcome]
        getattr(st, kind)(message)

    if not engine.can_continue_playing() and engine.current_bet == 0:
        st.warning("You're out of funds. Start a new session to keep playing.")

    action, amount = render_turn_controls(
        engine.bankroll, engine.current_bet, engine.game_active
    )

    if action == "bet":
        try:
            engine.place_bet(amount)
        except InvalidArgumentError as exc:
            st.error(str(exc))
        else:
            st.rerun()
    elif action == "roll":
        engine.roll()
        st.rerun()
    elif action == "reset":
        _new_session(engine, settings.starting_bankroll)
        recorder.clear()
        st.rerun()

    _render_sidebar(recorder)


if __name__ == "__main__":
    main()
