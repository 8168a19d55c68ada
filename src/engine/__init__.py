"""
Domino Duel Game Engine.

Pure Python game logic with zero UI/configuration dependencies.
Handles the pack, hands, tile matching on the board and the turn loop.
"""

from src.engine.base import (
    ActionType,
    BoardEnd,
    EndReason,
    MatchOutcome,
    MatchStatus,
    RoundEvent,
    Tile,
)
from src.engine.board import Board
from src.engine.errors import (
    DominoError,
    IndexOutOfRange,
    InvalidPlayerCount,
    InvariantViolation,
    TileNotFound,
)
from src.engine.hand import Hand, Player
from src.engine.match import Match, play_match
from src.engine.pack import Pack

__all__ = [
    # Data Classes
    "Tile",
    "RoundEvent",
    "MatchOutcome",
    # Enums
    "ActionType",
    "BoardEnd",
    "EndReason",
    "MatchStatus",
    # Components
    "Board",
    "Hand",
    "Pack",
    "Player",
    # Engine
    "Match",
    "play_match",
    # Errors
    "DominoError",
    "IndexOutOfRange",
    "InvalidPlayerCount",
    "InvariantViolation",
    "TileNotFound",
]
