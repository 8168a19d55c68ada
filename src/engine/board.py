"""
Domino Duel - Board

The chain of tiles laid on the table. Tiles are only ever added at the two
extremities, so the chain is kept in a deque. The open ends are cached and
recomputed after every insertion.

Invariant: for every adjacent pair (x, y) in the chain, x.half_b == y.half_a.
"""

from collections import deque
from typing import Iterator

from src.engine.base import BoardEnd, Tile
from src.engine.errors import InvariantViolation


class Board:
    """Two-ended sequence of tiles with cached open ends."""

    def __init__(self) -> None:
        self._tiles: deque[Tile] = deque()
        self._ends: tuple[int, int] | None = None

    def ends(self) -> tuple[int, int]:
        """
        Current (left, right) open values.

        Raises:
            InvariantViolation: If nothing has been placed yet
        """
        if self._ends is None:
            raise InvariantViolation("Board is empty, it has no open ends.")
        return self._ends

    def place_opening(self, tile: Tile) -> None:
        """Lay the first tile of the match as-is."""
        if self._tiles:
            raise InvariantViolation(
                f"Opening tile {tile} placed on a board that already holds {len(self._tiles)} tiles."
            )
        self._tiles.append(tile)
        self._refresh_ends()

    def match_tile(self, tile: Tile) -> Tile:
        """Attach a playable tile and return the board tile it connected to."""
        linked, _ = self.place_tile(tile)
        return linked

    def place_tile(self, tile: Tile) -> tuple[Tile, BoardEnd]:
        """
        Attach a playable tile to the board, turning it over if needed.

        The right end is tried before the left end, so a double laid against
        two equal ends always goes right. The tile is flipped at most once.

        Args:
            tile: A tile with at least one half equal to an open end

        Returns:
            Tuple of (board tile the new tile connected to, end it was added at)

        Raises:
            InvariantViolation: If the tile fits neither end
        """
        side = self._attach_side(tile)
        if side is None:
            tile.flip()
            side = self._attach_side(tile)
        if side is None:
            tile.flip()
            raise InvariantViolation(
                f"Tile {tile} cannot be matched against board ends {self.ends()}."
            )

        if side == BoardEnd.RIGHT:
            linked = self._tiles[-1]
            self.append_right(tile)
        else:
            linked = self._tiles[0]
            self.append_left(tile)
        return linked, side

    def _attach_side(self, tile: Tile) -> BoardEnd | None:
        left, right = self.ends()
        if tile.half_a == right:
            return BoardEnd.RIGHT
        if tile.half_b == left:
            return BoardEnd.LEFT
        return None

    def append_right(self, tile: Tile) -> None:
        self._tiles.append(tile)
        self._refresh_ends()

    def append_left(self, tile: Tile) -> None:
        self._tiles.appendleft(tile)
        self._refresh_ends()

    def _refresh_ends(self) -> None:
        self._ends = (self._tiles[0].half_a, self._tiles[-1].half_b)

    def is_consistent(self) -> bool:
        """Returns True if every pair of neighbouring halves match."""
        tiles = self._tiles
        return all(
            tiles[i].half_b == tiles[i + 1].half_a
            for i in range(len(tiles) - 1)
        )

    @property
    def is_empty(self) -> bool:
        return not self._tiles

    @property
    def tiles(self) -> tuple[Tile, ...]:
        return tuple(self._tiles)

    def snapshot(self) -> tuple[Tile, ...]:
        """Detached copies of the chain, left to right."""
        return tuple(tile.copy() for tile in self._tiles)

    def __len__(self) -> int:
        return len(self._tiles)

    def __iter__(self) -> Iterator[Tile]:
        return iter(self._tiles)
