"""
Errors raised by the game engine.

Every error is recoverable by the caller: a rejected operation never
changes the state it was given.

Usage:
    from game_engine.errors import MoveError

    try:
        state = apply_move(state, actor, row, col)
    except MoveError as e:
        print(f"Move rejected ({e.code}): {e.message}")
"""


class GameError(Exception):
    """
    Base class for all game errors.

    Attributes:
        code: Machine-readable error code.
        message: Human-readable description.
    """
    code = "GAME_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidConfiguration(GameError):
    """A game was created with two identical players."""
    code = "INVALID_CONFIGURATION"


class MoveError(GameError):
    """Base class for rejected moves."""
    code = "MOVE_ERROR"


class OutOfBounds(MoveError):
    code = "OUT_OF_BOUNDS"


class GameOver(MoveError):
    code = "GAME_OVER"


class UnknownPlayer(MoveError):
    code = "UNKNOWN_PLAYER"


class NotYourTurn(MoveError):
    code = "NOT_YOUR_TURN"


class CellOccupied(MoveError):
    code = "CELL_OCCUPIED"
