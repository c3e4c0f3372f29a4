"""
Game engine for two-player 3x3 games.
Handles game state, move rules, and outcome detection.
"""

__version__ = "1.0.0"

from .errors import (
    GameError,
    InvalidConfiguration,
    MoveError,
    OutOfBounds,
    GameOver,
    UnknownPlayer,
    NotYourTurn,
    CellOccupied,
)
from .game_state import (
    BOARD_SIZE,
    Board,
    Cell,
    GameState,
    Outcome,
    PlayerId,
    Turn,
    create_game,
    get_state,
)
from .win_checker import WINNING_LINES, evaluate, get_winning_line, get_completed_marks
from .move_validator import ValidationResult, apply_move, validate_move, get_valid_moves
