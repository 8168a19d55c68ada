"""Builders for scripted packs and boards used across the test suite."""

from src.engine.base import Tile
from src.engine.board import Board
from src.engine.pack import Pack


def stacked_pack(*halves: tuple[int, int]) -> Pack:
    """Pack whose tiles are drawn in the order given."""
    return Pack.from_tiles(Tile(a, b) for a, b in reversed(halves))


def board_with(*halves: tuple[int, int]) -> Board:
    """Board laid left to right from already-oriented tiles."""
    board = Board()
    first, *rest = halves
    board.place_opening(Tile(*first))
    for a, b in rest:
        board.append_right(Tile(a, b))
    return board
