"""Event log component — round-by-round match history."""

from __future__ import annotations

import streamlit as st

from src.engine.base import ActionType, RoundEvent
from src.ui.text import format_event


def render_event_log(events: tuple[RoundEvent, ...], expanded: bool = False) -> None:
    """Render the match history, one expander per round after the opening."""
    setup = [e for e in events if e.action in (ActionType.DEAL, ActionType.OPENING)]
    rounds = [e for e in events if e.action not in (ActionType.DEAL, ActionType.OPENING)]

    with st.expander("Deal & opening", expanded=expanded):
        for event in setup:
            for line in format_event(event):
                st.markdown(f"- {line}")

    for event in rounds:
        lines = format_event(event)
        with st.expander(lines[0], expanded=expanded):
            for line in lines[1:]:
                st.markdown(f"- {line}")
