"""Dice tray component — renders the two craps dice."""

from __future__ import annotations

import streamlit as st

_PIPS = {1: "⚀", 2: "⚁", 3: "⚂", 4: "⚃", 5: "⚄", 6: "⚅"}


def render_dice_tray(die1: int, die2: int, point: int) -> None:
    """Render both dice and the current point marker.

    Args:
        die1: First die face, 0 before the first roll.
        die2: Second die face, 0 before the first roll.
        point: Current point, 0 when no point is established.
    """
    if not die1 or not die2:
        st.markdown(
            '<div class="dice-tray">'
            '<span style="font-style:italic;">Roll the dice to begin.</span>'
            "</div>",
            unsafe_allow_html=True,
        )
    else:
        html_parts = ['<div class="dice-tray" style="font-size:4rem;">']
        for val in (die1, die2):
            html_parts.append(f'<span class="die" title="{val}">{_PIPS[val]}</span> ')
        html_parts.append("</div>")
        st.markdown("".join(html_parts), unsafe_allow_html=True)
        st.caption(f"Total: {die1 + die2}")

    if point:
        st.info(f"Point is **{point}**. Roll it again before a 7.")
    else:
        st.caption("Come-out roll: 7 or 11 wins, 2, 3 or 12 loses.")
