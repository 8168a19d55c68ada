"""Domino Duel — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st


_RULES = """\
**Goal:** Be the first to lay every tile in your hand!

**Turn:**
- Play the first tile in hand order that matches an open end
- Right end is tried before the left end
- No match? Draw one tile from the pack
- Pack empty and no match? Pass

**End of match:**
| Condition | Result |
|---|---|
| Hand empty | That player wins |
| Pack empty and a player passes | Blocked, no winner |
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        st.divider()
        st.markdown("### Rules")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Domino Duel",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )

    from src.config import configure_logging
    from src.ui.themes import load_css

    configure_logging()
    load_css()

    # Session state defaults
    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from src.ui.views.home import render_home_page
        render_home_page()
    elif page == "match":
        from src.ui.views.match import render_match_page
        render_match_page()
        _render_sidebar_rules()
    else:
        st.session_state["page"] = "home"
        st.rerun()


if __name__ == "__main__":
    main()
