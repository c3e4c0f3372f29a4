"""
Game state for the 3x3 engine.
Holds the board, whose turn it is, and the derived outcome.

A GameState is an immutable value. Operations take a state and return a
new one; storing states between calls is the caller's job.
"""

from enum import Enum
from typing import Hashable, Optional, List, Tuple
from dataclasses import dataclass, field

from .errors import InvalidConfiguration


BOARD_SIZE = 3

# Opaque player identifier supplied by the caller (account, name, ...)
PlayerId = Hashable


class Cell(Enum):
    """Contents of one board cell."""
    EMPTY = 0
    MARK_A = 1
    MARK_B = 2


class Turn(Enum):
    """Whose move is next."""
    TURN_A = 0
    TURN_B = 1
    ENDED = 2

    def opposite(self) -> "Turn":
        """Get the other player's turn."""
        if self is Turn.ENDED:
            return Turn.ENDED
        return Turn.TURN_B if self is Turn.TURN_A else Turn.TURN_A

    @property
    def mark(self) -> Cell:
        """The mark placed by the player whose turn this is."""
        if self is Turn.ENDED:
            raise ValueError("No mark is placed once the game has ended")
        return Cell.MARK_A if self is Turn.TURN_A else Cell.MARK_B

    @property
    def slot(self) -> int:
        """Index into GameState.players for this turn."""
        if self is Turn.ENDED:
            raise ValueError("No player moves once the game has ended")
        return 0 if self is Turn.TURN_A else 1


class Outcome(Enum):
    """Result derived from the board."""
    IN_PROGRESS = 0
    WINNER_A = 1
    WINNER_B = 2
    DRAW = 3

    @property
    def is_terminal(self) -> bool:
        return self is not Outcome.IN_PROGRESS


Board = Tuple[Tuple[Cell, ...], ...]


def empty_board() -> Board:
    """A 3x3 board with every cell empty."""
    return tuple(
        tuple(Cell.EMPTY for _ in range(BOARD_SIZE))
        for _ in range(BOARD_SIZE)
    )


def place_mark(board: Board, row: int, col: int, mark: Cell) -> Board:
    """Return a copy of the board with one cell set."""
    return tuple(
        tuple(
            mark if (r, c) == (row, col) else cell
            for c, cell in enumerate(cells)
        )
        for r, cells in enumerate(board)
    )


@dataclass(frozen=True)
class GameState:
    """
    The complete state of one game.

    Tracks:
    - The two players (players[0] moves first, with MARK_A)
    - The 3x3 board
    - Whose turn it is (ENDED once the game is over)
    - The outcome, recomputed from the board after every move
    """

    players: Tuple[PlayerId, PlayerId]
    board: Board = field(default_factory=empty_board)
    turn: Turn = Turn.TURN_A
    outcome: Outcome = Outcome.IN_PROGRESS

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal or self.turn is Turn.ENDED

    @property
    def current_player(self) -> Optional[PlayerId]:
        """The player expected to move, or None once the game is over."""
        if self.is_game_over:
            return None
        return self.players[self.turn.slot]

    @property
    def winner(self) -> Optional[PlayerId]:
        """The winning player's identifier, if there is one."""
        if self.outcome is Outcome.WINNER_A:
            return self.players[0]
        if self.outcome is Outcome.WINNER_B:
            return self.players[1]
        return None

    @property
    def move_count(self) -> int:
        """Number of marks on the board."""
        return sum(
            1 for cells in self.board for cell in cells
            if cell is not Cell.EMPTY
        )

    def get_empty_cells(self) -> List[Tuple[int, int]]:
        """
        Get all empty cells on the board.

        Returns:
            List of (row, col) tuples, row-major.
        """
        empty = []
        for row in range(BOARD_SIZE):
            for col in range(BOARD_SIZE):
                if self.board[row][col] is Cell.EMPTY:
                    empty.append((row, col))
        return empty

    def mark_of(self, player: PlayerId) -> Optional[Cell]:
        """The mark a player places, or None for a stranger."""
        if player == self.players[0]:
            return Cell.MARK_A
        if player == self.players[1]:
            return Cell.MARK_B
        return None


def create_game(player_a: PlayerId, player_b: PlayerId) -> GameState:
    """
    Start a new game.

    Args:
        player_a: Identifier of the first mover.
        player_b: Identifier of the second mover.

    Returns:
        A fresh GameState with an empty board and TURN_A to move.

    Raises:
        InvalidConfiguration: If both identifiers are equal.
    """
    if player_a == player_b:
        raise InvalidConfiguration(
            f"A player cannot play against itself ({player_a!r})"
        )
    return GameState(players=(player_a, player_b))


def get_state(state: GameState) -> GameState:
    """Read-only view of a game. States are immutable, so this is the state itself."""
    return state
