"""Match page — board replay, round history and final standings."""

from __future__ import annotations

import streamlit as st

from src.engine.base import ActionType, EndReason
from src.ui.components import render_board, render_event_log, render_scoreboard
from src.ui.text import format_action
from src.ui.themes.animations import render_blocked_banner, render_victory_animation


def render_match_page() -> None:
    """Render a finished match with a round slider to replay the board."""
    ss = st.session_state
    events = ss.get("events")
    outcome = ss.get("outcome")

    if not events or outcome is None:
        ss["page"] = "home"
        st.rerun()
        return

    if outcome.reason == EndReason.WINNER_BY_EMPTY_HAND:
        render_victory_animation(outcome.winner, outcome.rounds)
    else:
        render_blocked_banner()

    board_events = [
        i for i, e in enumerate(events) if e.action != ActionType.DEAL
    ]
    position = st.select_slider(
        "Replay",
        options=board_events,
        value=board_events[-1],
        format_func=lambda i: f"Round {events[i].round_number}",
    )
    event = events[position]

    col_board, col_score = st.columns([3, 1])
    with col_board:
        st.markdown(f"**{format_action(event)}**")
        render_board(event.board, last_played=event.tile if event.action == ActionType.PLAY else None)
        st.caption(f"Pack size: {event.pack_size}")
    with col_score:
        render_scoreboard(outcome)

    st.subheader("History")
    render_event_log(events)

    st.divider()
    if st.button("New Match", type="primary", use_container_width=True):
        for key in ("events", "outcome"):
            ss.pop(key, None)
        ss["page"] = "home"
        st.rerun()

