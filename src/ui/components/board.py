"""
Domino chain component.

Displays the tiles laid on the table, left to right, with the open ends.
"""

import streamlit as st

from src.engine.base import Tile


def tile_html(tile: Tile, highlight: bool = False) -> str:
    """HTML for a single tile face."""
    classes = "domino double" if tile.is_double else "domino"
    if highlight:
        classes += " last-played"
    return (
        f'<span class="{classes}">'
        f'<span class="half">{tile.half_a}</span>'
        f'<span class="half">{tile.half_b}</span>'
        "</span>"
    )


def render_board(tiles: tuple[Tile, ...], last_played: Tile | None = None) -> None:
    """
    Render the board chain.

    Args:
        tiles: Board snapshot, left to right
        last_played: Tile played this round, highlighted if present
    """
    if not tiles:
        st.info("The board is empty.")
        return

    left, right = tiles[0].half_a, tiles[-1].half_b
    st.markdown(f"**Open ends:** {left} | {right}")

    html = ['<div class="domino-chain">']
    for tile in tiles:
        html.append(tile_html(tile, highlight=last_played is not None and tile == last_played))
    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
