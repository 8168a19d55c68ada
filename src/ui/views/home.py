"""Home page — title, rules and the new match form."""

from __future__ import annotations

import random

import streamlit as st

from src.config import get_settings
from src.engine import InvalidPlayerCount, Match


def render_home_page() -> None:
    """Render the home / landing page."""
    st.title("Domino Duel")
    st.caption("Two bots, one double-six pack")

    _render_new_match_form()

    st.divider()

    with st.expander("Rules"):
        st.markdown(
            """
**Empty your hand before your opponent does!**

- The 28-tile double-six pack is shuffled and **7 tiles** are dealt to each player
- A random player opens with a random tile from their hand
- On your turn, play the **first tile in your hand** that matches an open end
- Tiles are turned over when needed so the matching halves touch
- Nothing to play? **Draw one tile** from the pack and pass the turn
- **Blocked:** the pack is empty and you still cannot play — nobody wins
"""
        )


def _render_new_match_form() -> None:
    ss = st.session_state
    settings = get_settings()

    with st.form("new_match"):
        col1, col2 = st.columns(2)
        with col1:
            first = st.text_input("Player 1", value="Alice", max_chars=30)
        with col2:
            second = st.text_input("Player 2", value="Bob", max_chars=30)

        use_seed = st.checkbox("Fixed seed", value=settings.seed is not None)
        seed = st.number_input(
            "Seed",
            min_value=0,
            value=settings.seed or 0,
            step=1,
        )
        submitted = st.form_submit_button("Start Match", type="primary", use_container_width=True)

    if not submitted:
        return

    try:
        match = Match(
            [first, second],
            tiles_per_hand=settings.tiles_per_hand,
            rng=random.Random(int(seed) if use_seed else None),
        )
    except InvalidPlayerCount:
        st.error("Two players are needed to play!")
        return
    except ValueError as exc:
        st.error(str(exc))
        return

    outcome = match.run()
    ss["events"] = match.events
    ss["outcome"] = outcome
    ss["page"] = "match"
    st.rerun()
