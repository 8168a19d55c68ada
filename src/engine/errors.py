"""
Domino Duel - Engine Errors

Every error raised by the engine derives from DominoError and from the
built-in exception that best describes it, so callers can catch either.
None of these are recoverable at runtime: they signal a broken caller
contract or an invalid match setup.
"""


class DominoError(Exception):
    """Base class for all engine errors."""


class InvalidPlayerCount(DominoError, ValueError):
    """A match was set up with anything other than exactly two players."""


class TileNotFound(DominoError, LookupError):
    """A tile was removed from a hand that does not hold it."""


class IndexOutOfRange(DominoError, IndexError):
    """A hand position outside the hand was requested."""


class InvariantViolation(DominoError, RuntimeError):
    """The board was asked to do something its state cannot support."""
