"""
Domino Duel - Test Configuration and Fixtures

Common fixtures and scripted packs for all test modules.
"""

import random

import pytest

from src.engine.match import Match
from tests.helpers import stacked_pack


# =============================================================================
# SCRIPTED MATCHES
# =============================================================================

@pytest.fixture
def winning_match() -> Match:
    """
    Two tiles per hand. Alice opens <1:1>, Bob draws the last tile,
    Alice plays <1:2> and empties her hand in round 3.
    """
    pack = stacked_pack(
        (1, 1), (1, 2),   # Alice
        (5, 5), (6, 6),   # Bob
        (4, 4),           # left in the pack
    )
    match = Match(["Alice", "Bob"], tiles_per_hand=2, pack=pack, shuffle=False)
    match.start(opening_player=0, opening_tile_index=0)
    return match


@pytest.fixture
def blocked_match() -> Match:
    """
    Two tiles per hand, nothing left in the pack. Alice opens <1:1> and
    Bob holds nothing with a 1.
    """
    pack = stacked_pack(
        (1, 1), (2, 3),   # Alice
        (5, 6), (4, 4),   # Bob
    )
    match = Match(["Alice", "Bob"], tiles_per_hand=2, pack=pack, shuffle=False)
    match.start(opening_player=0, opening_tile_index=0)
    return match


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)
