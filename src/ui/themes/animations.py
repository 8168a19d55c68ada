"""CSS injection and HTML banner helpers for the table theme."""

import streamlit as st

_TABLE_CSS = """
.domino-chain { display: flex; flex-wrap: wrap; gap: 6px; padding: 12px 0; }
.domino { display: inline-flex; border: 2px solid #222; border-radius: 6px;
          background: #fdfbf3; font-weight: 700; font-family: monospace; }
.domino .half { padding: 4px 8px; }
.domino .half + .half { border-left: 2px solid #222; }
.domino.double { border-color: #8a6d1d; }
.domino.last-played { box-shadow: 0 0 8px 2px #e0b84a; }
.scoreboard { border: 1px solid #aaa; border-radius: 8px; padding: 8px 12px; }
.scoreboard-title { font-weight: 700; margin-bottom: 6px; }
.player-row { display: flex; justify-content: space-between; padding: 2px 0; }
.player-row.active { font-weight: 700; }
.victory-overlay, .blocked-overlay { text-align: center; padding: 16px; }
"""


def load_css() -> None:
    """Inject the table CSS theme into the Streamlit app."""
    st.markdown(f"<style>{_TABLE_CSS}</style>", unsafe_allow_html=True)


def render_victory_animation(name: str, rounds: int) -> None:
    """Render the victory banner."""
    st.markdown(
        '<div class="victory-overlay">'
        '<span class="crown">&#9813;</span>'
        f"<h1>{name} Wins!</h1>"
        f"<p>Every tile laid in {rounds} moves.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_blocked_banner() -> None:
    """Render the banner for a match that ended with no winner."""
    st.markdown(
        '<div class="blocked-overlay">'
        "<h2>Blocked!</h2>"
        "<p>The pack is empty and nobody can play.</p>"
        "</div>",
        unsafe_allow_html=True,
    )
