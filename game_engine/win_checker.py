"""
Win checker for the 3x3 engine.
Decides whether a board is won, drawn, or still in progress.
"""

from typing import Optional, Set, Tuple

from .game_state import Board, Cell, Outcome


Line = Tuple[Tuple[int, int], Tuple[int, int], Tuple[int, int]]

# All possible winning lines (as (row, col) tuples)
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    ((0, 0), (0, 1), (0, 2)),
    ((1, 0), (1, 1), (1, 2)),
    ((2, 0), (2, 1), (2, 2)),
    # Columns
    ((0, 0), (1, 0), (2, 0)),
    ((0, 1), (1, 1), (2, 1)),
    ((0, 2), (1, 2), (2, 2)),
    # Diagonals
    ((0, 0), (1, 1), (2, 2)),
    ((0, 2), (1, 1), (2, 0)),
)

_WINNER_BY_MARK = {
    Cell.MARK_A: Outcome.WINNER_A,
    Cell.MARK_B: Outcome.WINNER_B,
}


def _check_line(board: Board, line: Line) -> Optional[Cell]:
    """
    Check if a single line is complete.

    Returns:
        The mark filling all three cells, or None.
    """
    first, second, third = (board[row][col] for row, col in line)
    if first is Cell.EMPTY:
        return None
    if first is second is third:
        return first
    return None


def evaluate(board: Board) -> Outcome:
    """
    Compute the outcome of a board.

    Every line is scanned before a full board is called a draw.

    Args:
        board: The 3x3 board.

    Returns:
        WINNER_A / WINNER_B if a line is complete, DRAW if the board
        is full, IN_PROGRESS otherwise.
    """
    for line in WINNING_LINES:
        mark = _check_line(board, line)
        if mark is not None:
            return _WINNER_BY_MARK[mark]

    if all(cell is not Cell.EMPTY for cells in board for cell in cells):
        return Outcome.DRAW

    return Outcome.IN_PROGRESS


def get_winning_line(board: Board) -> Optional[Line]:
    """
    Get the winning line if there is one.

    Returns:
        The first complete line as (row, col) pairs, or None.
    """
    for line in WINNING_LINES:
        if _check_line(board, line) is not None:
            return line
    return None


def get_completed_marks(board: Board) -> Set[Cell]:
    """Marks that fill at least one line. A legal game has at most one."""
    marks = {_check_line(board, line) for line in WINNING_LINES}
    marks.discard(None)
    return marks
