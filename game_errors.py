from __future__ import annotations


class GameError(Exception):
    """
    Base class for rejected farm operations.

    A GameError is always raised before the farm or field is changed, so
    the caller can report it and carry on with the same state.
    """

    message = "Game error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.message)


class InsufficientFunds(GameError):
    message = "Insufficient funds"


class MaxLevelReached(GameError):
    message = "Max level reached"


class OutOfBounds(GameError):
    message = "Out of bounds"


class AlreadyPlanted(GameError):
    message = "Already planted"


class AlreadyFarmed(GameError):
    message = "Already farmed"


class NotYetReady(GameError):
    message = "Not yet ready"


class TooManyFields(GameError):
    message = "Too many fields"


class SaveFileError(Exception):
    """Save file could not be written, read or understood."""
