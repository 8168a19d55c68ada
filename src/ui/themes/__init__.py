"""Table theme for Domino Duel."""

from src.ui.themes.animations import (
    load_css,
    render_blocked_banner,
    render_victory_animation,
)

__all__ = [
    "load_css",
    "render_blocked_banner",
    "render_victory_animation",
]
