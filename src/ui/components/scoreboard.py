"""Scoreboard component — final hand sizes and the winner indicator."""

from __future__ import annotations

import streamlit as st

from src.engine.base import MatchOutcome


def render_scoreboard(outcome: MatchOutcome) -> None:
    """Render the final standings.

    Args:
        outcome: Finished match outcome. Players are listed by tiles left,
            fewest first; pips left break ties.
    """
    html = ['<div class="scoreboard">']
    html.append('<div class="scoreboard-title">Final Standings</div>')

    ranked = sorted(
        outcome.hand_sizes,
        key=lambda name: (outcome.hand_sizes[name], outcome.hand_pips.get(name, 0)),
    )
    for name in ranked:
        is_winner = name == outcome.winner
        row_classes = ["player-row"]
        if is_winner:
            row_classes.append("active")

        indicator = "&#9733; " if is_winner else ""
        html.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{indicator}{name}</span>'
            f'<span class="score">{outcome.hand_sizes[name]} tiles '
            f'({outcome.hand_pips.get(name, 0)} pips)</span>'
            f"</div>"
        )

    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
