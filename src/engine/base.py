"""
Domino Duel - Game Engine Base Classes

This module defines the foundational data structures and enums used throughout
the game engine. Tiles are the only mutable value here: a tile is turned over
in place when it is laid on the board. Events and outcomes are frozen
dataclasses holding snapshots, so they never change after they are emitted.
"""

from dataclasses import dataclass, field, replace
from enum import Enum, auto

from src.engine.validators import validate_half


class MatchStatus(Enum):
    """Lifecycle of a single match."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    FINISHED = "finished"


class EndReason(Enum):
    """Why a match finished."""
    WINNER_BY_EMPTY_HAND = "winner_by_empty_hand"
    BLOCKED = "blocked"


class ActionType(Enum):
    """What happened in a round."""
    DEAL = auto()
    OPENING = auto()
    PLAY = auto()
    DRAW = auto()
    PASS = auto()


class BoardEnd(Enum):
    """The two open extremities of the board."""
    LEFT = "left"
    RIGHT = "right"


@dataclass
class Tile:
    """
    A single double-six domino tile.

    Attributes:
        half_a: Left (first) half, faces the left end of the board
        half_b: Right (second) half, faces the right end of the board
        flipped: Whether the tile has been turned over an odd number of times
    """
    half_a: int
    half_b: int
    flipped: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        """Validate half values are within the double-six range."""
        validate_half(self.half_a)
        validate_half(self.half_b)

    def flip(self) -> None:
        """Turn the tile over: swap its halves and toggle the flag."""
        self.half_a, self.half_b = self.half_b, self.half_a
        self.flipped = not self.flipped

    @property
    def is_double(self) -> bool:
        """Returns True if both halves carry the same value."""
        return self.half_a == self.half_b

    @property
    def pips(self) -> int:
        """Total number of pips on the tile."""
        return self.half_a + self.half_b

    @property
    def halves(self) -> tuple[int, int]:
        return (self.half_a, self.half_b)

    def matches(self, value: int) -> bool:
        """Returns True if either half equals ``value``."""
        return self.half_a == value or self.half_b == value

    def copy(self) -> "Tile":
        """Detached copy, used for event snapshots."""
        return replace(self)

    def __str__(self) -> str:
        return f"<{self.half_a}:{self.half_b}>"


@dataclass(frozen=True)
class RoundEvent:
    """
    Structured record of one step of a match.

    Attributes:
        round_number: Round the event belongs to (0 for the deal)
        player: Name of the acting player
        action: What the player did
        tile: Tile dealt, placed, played or drawn (None for a pass)
        connected_to: Board tile the played tile attached to
        side: Board end the played tile attached to
        board: Snapshot of the board after the action, left to right
        hand_size: Acting player's hand size after the action
        pack_size: Tiles left in the pack after the action
        dealt: Tiles dealt to the player (DEAL events only)
        hand: Acting player's hand before the move (empty for DEAL and OPENING)
        playable: Tiles in that hand that matched an open end before the move
    """
    round_number: int
    player: str
    action: ActionType
    tile: Tile | None = None
    connected_to: Tile | None = None
    side: BoardEnd | None = None
    board: tuple[Tile, ...] = field(default_factory=tuple)
    hand_size: int = 0
    pack_size: int = 0
    dealt: tuple[Tile, ...] = field(default_factory=tuple)
    hand: tuple[Tile, ...] = field(default_factory=tuple)
    playable: tuple[Tile, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MatchOutcome:
    """
    Final result of a match.

    Attributes:
        reason: How the match ended
        winner: Name of the player who emptied their hand, None when blocked
        rounds: Number of the last round played
        hand_sizes: Tiles left in each player's hand, keyed by name
        hand_pips: Pips left in each player's hand, keyed by name
    """
    reason: EndReason
    winner: str | None
    rounds: int
    hand_sizes: dict[str, int] = field(default_factory=dict)
    hand_pips: dict[str, int] = field(default_factory=dict)

    @property
    def is_blocked(self) -> bool:
        return self.reason == EndReason.BLOCKED
