"""
Errors raised by the game store and service.
"""

from game_engine.errors import GameError


class StoreError(GameError):
    """Base class for storage errors."""
    code = "STORE_ERROR"


class GameNotFound(StoreError):
    code = "GAME_NOT_FOUND"


class GameExists(StoreError):
    code = "GAME_EXISTS"


class InvalidGameId(StoreError):
    code = "INVALID_GAME_ID"


class RecordError(StoreError):
    """A stored record is malformed or contradicts its own board."""
    code = "RECORD_ERROR"
