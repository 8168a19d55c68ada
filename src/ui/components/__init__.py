"""UI components for Domino Duel."""

from src.ui.components.board import render_board
from src.ui.components.event_log import render_event_log
from src.ui.components.scoreboard import render_scoreboard

__all__ = [
    "render_board",
    "render_event_log",
    "render_scoreboard",
]
