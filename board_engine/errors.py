"""
Exceptions raised by the board engine.
"""


class GameError(Exception):
    """Base class for game engine errors."""


class InvalidMoveError(GameError, ValueError):
    """A move was rejected; the game state is unchanged."""


class HistoryInvariantError(GameError, RuntimeError):
    """
    The move histories and the board disagree.

    This is a bug in the engine, never a user mistake, so nothing in the
    engine catches it.
    """
