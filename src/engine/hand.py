"""
Domino Duel - Hands and Players

A hand is an ordered, list-backed collection of tiles. Playability is a
read-only query: tiles are only turned over when the board places them.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from src.engine.base import Tile
from src.engine.errors import IndexOutOfRange, TileNotFound


class Hand:
    """Tiles held by one player, in the order they were received."""

    def __init__(self, tiles: Iterable[Tile] = ()) -> None:
        self._tiles: list[Tile] = list(tiles)

    def add(self, tile: Tile) -> None:
        self._tiles.append(tile)

    def remove(self, tile: Tile) -> Tile:
        """
        Remove the first tile equal to ``tile``.

        Args:
            tile: Tile to remove, compared by half values

        Returns:
            The removed tile instance from the hand

        Raises:
            TileNotFound: If no tile in the hand is equal to ``tile``
        """
        for index, held in enumerate(self._tiles):
            if held is tile or held == tile:
                return self._tiles.pop(index)
        raise TileNotFound(f"Tile {tile} is not in this hand.")

    def remove_at(self, index: int) -> Tile:
        """
        Remove the tile at a position.

        Raises:
            IndexOutOfRange: If index is negative or past the last tile
        """
        if not (0 <= index < len(self._tiles)):
            raise IndexOutOfRange(
                f"Hand index {index} is out of range. "
                f"Must be between 0 and {len(self._tiles) - 1}."
            )
        return self._tiles.pop(index)

    def playable_tiles(self, ends: tuple[int, int]) -> list[Tile]:
        """
        Tiles that can be laid against the given board ends.

        Args:
            ends: (left, right) open values of the board

        Returns:
            Every tile with a half equal to either end, in hand order
        """
        left, right = ends
        return [
            tile for tile in self._tiles
            if tile.matches(left) or tile.matches(right)
        ]

    def size(self) -> int:
        return len(self._tiles)

    def pips(self) -> int:
        """Total pips left in the hand."""
        return sum(tile.pips for tile in self._tiles)

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)


@dataclass
class Player:
    """A seated player and the hand they own exclusively."""
    name: str
    hand: Hand = field(default_factory=Hand)

    def __str__(self) -> str:
        return self.name
