"""
Domino Duel - Pack

The shared draw pile. A full double-six set holds one tile for every
unordered pair of halves, 28 tiles in all. Tiles are drawn from the top of
the pile, which is the end of the underlying list.
"""

import random
from typing import Iterable, TYPE_CHECKING

from src.engine.base import Tile
from src.engine.validators import MAX_HALF, MIN_HALF

if TYPE_CHECKING:
    from src.engine.hand import Player


class Pack:
    """Depletable supply of tiles. Never regrows during a match."""

    def __init__(self, tiles: Iterable[Tile] = ()) -> None:
        self._tiles: list[Tile] = list(tiles)

    @classmethod
    def build_full_set(cls) -> "Pack":
        """Create an unshuffled pack from <0:0> to <6:6>."""
        return cls(
            Tile(i, j)
            for i in range(MIN_HALF, MAX_HALF + 1)
            for j in range(i, MAX_HALF + 1)
        )

    @classmethod
    def from_tiles(cls, tiles: Iterable[Tile]) -> "Pack":
        """Create a scripted pack. The last tile given is drawn first."""
        return cls(tiles)

    def shuffle(self, rng: random.Random | None = None) -> "Pack":
        """Shuffle in place and return the pack for chaining."""
        (rng or random).shuffle(self._tiles)
        return self

    def draw_one(self) -> Tile | None:
        """Take the top tile, or None if the pack is empty."""
        if not self._tiles:
            return None
        return self._tiles.pop()

    def deal_hand(self, player: "Player", count: int) -> tuple[Tile, ...]:
        """
        Move ``count`` tiles from the top of the pack into a player's hand.

        Args:
            player: Player receiving the tiles
            count: Number of tiles to deal

        Returns:
            The dealt tiles, in dealing order

        Raises:
            ValueError: If the pack holds fewer than ``count`` tiles
        """
        if count > len(self._tiles):
            raise ValueError(
                f"Cannot deal {count} tiles, only {len(self._tiles)} left in the pack."
            )

        dealt = []
        for _ in range(count):
            tile = self._tiles.pop()
            player.hand.add(tile)
            dealt.append(tile)
        return tuple(dealt)

    def remaining_count(self) -> int:
        return len(self._tiles)

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)
