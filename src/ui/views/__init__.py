"""Page renderers for Domino Duel."""

from src.ui.views.home import render_home_page
from src.ui.views.match import render_match_page

__all__ = ["render_home_page", "render_match_page"]
