"""
Move validation and application for the 3x3 engine.

Checks run in a fixed order and the first failure wins:
bounds, game over, unknown player, turn, occupied cell.
"""

from typing import Optional, Tuple, List
from dataclasses import dataclass, replace

from .errors import (
    CellOccupied,
    GameOver,
    MoveError,
    NotYourTurn,
    OutOfBounds,
    UnknownPlayer,
)
from .game_state import BOARD_SIZE, Cell, GameState, PlayerId, Turn, place_mark
from .win_checker import evaluate


@dataclass(frozen=True)
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None

    @property
    def error_message(self) -> Optional[str]:
        return self.error.message if self.error is not None else None


def _in_bounds(value) -> bool:
    return (
        isinstance(value, int)
        and not isinstance(value, bool)
        and 0 <= value < BOARD_SIZE
    )


def _check(state: GameState, actor: PlayerId, row, col) -> Optional[MoveError]:
    if not (_in_bounds(row) and _in_bounds(col)):
        return OutOfBounds(
            f"Invalid position ({row}, {col}). Must be 0-{BOARD_SIZE - 1}."
        )

    if state.is_game_over:
        return GameOver("Game is already over")

    if actor not in state.players:
        return UnknownPlayer(f"{actor!r} is not playing this game")

    if actor != state.players[state.turn.slot]:
        return NotYourTurn(f"It is not {actor!r}'s turn")

    if state.board[row][col] is not Cell.EMPTY:
        return CellOccupied(
            f"Cell ({row}, {col}) is already occupied by {state.board[row][col].name}"
        )

    return None


def validate_move(
    state: GameState,
    actor: PlayerId,
    row: int,
    col: int
) -> ValidationResult:
    """
    Validate a move without applying it.

    Args:
        state: Current game state.
        actor: Player attempting the move.
        row: Row to mark (0-2).
        col: Column to mark (0-2).

    Returns:
        ValidationResult with is_valid and the error that would be raised.
    """
    error = _check(state, actor, row, col)
    if error is not None:
        return ValidationResult(is_valid=False, error=error)
    return ValidationResult(is_valid=True)


def apply_move(state: GameState, actor: PlayerId, row: int, col: int) -> GameState:
    """
    Apply a move and return the next state.

    The acting player's mark is placed, the outcome is recomputed from the
    new board, and the turn either flips or becomes ENDED.

    Raises:
        MoveError: The first failing check. The input state is untouched.
    """
    error = _check(state, actor, row, col)
    if error is not None:
        raise error

    board = place_mark(state.board, row, col, state.turn.mark)
    outcome = evaluate(board)
    turn = Turn.ENDED if outcome.is_terminal else state.turn.opposite()

    return replace(state, board=board, turn=turn, outcome=outcome)


def get_valid_moves(state: GameState) -> List[Tuple[int, int]]:
    """
    Get all cells the current player may mark.

    Returns:
        List of (row, col) positions; empty once the game is over.
    """
    if state.is_game_over:
        return []
    return state.get_empty_cells()
