"""
Domino Duel - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive exceptions.
"""

from typing import Sequence

from src.engine.errors import InvalidPlayerCount

MIN_HALF = 0
MAX_HALF = 6
PLAYER_COUNT = 2
FULL_SET_SIZE = 28


def validate_half(value: int) -> int:
    """
    Validate a single tile half.

    Args:
        value: Half value to validate

    Returns:
        Validated value

    Raises:
        ValueError: If value is not an integer between 0 and 6
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"Half value must be an integer, got {type(value).__name__}.")

    if not (MIN_HALF <= value <= MAX_HALF):
        raise ValueError(
            f"Half value is {value}, must be between {MIN_HALF} and {MAX_HALF}."
        )

    return value


def validate_player_names(names: Sequence[str]) -> tuple[str, ...]:
    """
    Validate the names of the players seated at a match.

    Args:
        names: Player names in seating order

    Returns:
        Stripped names as a tuple

    Raises:
        InvalidPlayerCount: If there are not exactly two names
        ValueError: If a name is blank or both names are the same
    """
    names_tuple = tuple(names)

    if len(names_tuple) != PLAYER_COUNT:
        raise InvalidPlayerCount(
            f"Exactly {PLAYER_COUNT} players are required, got {len(names_tuple)}."
        )

    cleaned = []
    for i, name in enumerate(names_tuple):
        if not isinstance(name, str):
            raise ValueError(f"Player name at index {i} must be a string, got {type(name).__name__}.")
        if not name.strip():
            raise ValueError(f"Player name at index {i} cannot be blank.")
        cleaned.append(name.strip())

    if len(set(cleaned)) != len(cleaned):
        raise ValueError(f"Player names must be distinct, got {cleaned}.")

    return tuple(cleaned)


def validate_tiles_per_hand(count: int) -> int:
    """
    Validate the size of the opening hands.

    Args:
        count: Tiles dealt to each player

    Returns:
        Validated count

    Raises:
        ValueError: If both hands cannot be dealt from a full set
    """
    if not isinstance(count, int) or isinstance(count, bool):
        raise ValueError(f"Tiles per hand must be an integer, got {type(count).__name__}.")

    max_count = FULL_SET_SIZE // PLAYER_COUNT
    if not (1 <= count <= max_count):
        raise ValueError(f"Tiles per hand must be 1-{max_count}, got {count}.")

    return count
