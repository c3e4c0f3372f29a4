"""
Stored representation of a game.

A record holds, in this order:
    players  two player ids
    board    3x3 grid of "empty" | "a" | "b"
    turn     "a" | "b" | "ended"
    winner   player id or null

The token mapping lives here so the engine enums stay free of it.
"""

from typing import Literal, Optional, Tuple

from pydantic import BaseModel, ConfigDict, ValidationError

from game_engine import Cell, GameState, Outcome, Turn, evaluate, get_completed_marks
from .errors import RecordError


CellToken = Literal["empty", "a", "b"]
TurnToken = Literal["a", "b", "ended"]
Row = Tuple[CellToken, CellToken, CellToken]

CELL_TOKENS = {
    Cell.EMPTY: "empty",
    Cell.MARK_A: "a",
    Cell.MARK_B: "b",
}
TURN_TOKENS = {
    Turn.TURN_A: "a",
    Turn.TURN_B: "b",
    Turn.ENDED: "ended",
}
_CELLS_BY_TOKEN = {token: cell for cell, token in CELL_TOKENS.items()}
_TURNS_BY_TOKEN = {token: turn for turn, token in TURN_TOKENS.items()}


class GameRecord(BaseModel):
    """One game as stored or sent over the wire."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    players: Tuple[str, str]
    board: Tuple[Row, Row, Row]
    turn: TurnToken
    winner: Optional[str] = None


def to_record(state: GameState) -> GameRecord:
    """Convert a game state to its record."""
    try:
        return GameRecord(
            players=state.players,
            board=tuple(
                tuple(CELL_TOKENS[cell] for cell in row)
                for row in state.board
            ),
            turn=TURN_TOKENS[state.turn],
            winner=state.winner,
        )
    except ValidationError as e:
        raise RecordError(f"Game cannot be stored: {e}") from e


def from_record(record: GameRecord) -> GameState:
    """
    Rebuild a game state from its record.

    The outcome is recomputed from the board, and the stored turn and
    winner must agree with it.

    Raises:
        RecordError: If the record contradicts itself.
    """
    if record.players[0] == record.players[1]:
        raise RecordError(f"Record names the same player twice ({record.players[0]!r})")

    board = tuple(
        tuple(_CELLS_BY_TOKEN[token] for token in row)
        for row in record.board
    )
    turn = _TURNS_BY_TOKEN[record.turn]

    marks_a = sum(row.count(Cell.MARK_A) for row in board)
    marks_b = sum(row.count(Cell.MARK_B) for row in board)
    if marks_a - marks_b not in (0, 1):
        raise RecordError(
            f"Impossible mark counts: {marks_a} for a, {marks_b} for b"
        )

    if len(get_completed_marks(board)) > 1:
        raise RecordError("Both players hold a completed line")

    outcome = evaluate(board)
    if outcome.is_terminal:
        if turn is not Turn.ENDED:
            raise RecordError(f"Finished game recorded with turn {record.turn!r}")
    else:
        expected = Turn.TURN_A if marks_a == marks_b else Turn.TURN_B
        if turn is not expected:
            raise RecordError(
                f"Turn {record.turn!r} does not match the board "
                f"(expected {TURN_TOKENS[expected]!r})"
            )

    state = GameState(players=record.players, board=board, turn=turn, outcome=outcome)
    if record.winner != state.winner:
        raise RecordError(
            f"Recorded winner {record.winner!r} does not match the board "
            f"({state.winner!r})"
        )
    if outcome is Outcome.WINNER_A and marks_a == marks_b:
        raise RecordError("Player a cannot win after b has moved")
    if outcome is Outcome.WINNER_B and marks_a != marks_b:
        raise RecordError("Player b cannot win with a to move")
    return state


def dumps(state: GameState) -> str:
    """Encode a game state as JSON."""
    return to_record(state).model_dump_json()


def loads(text: str) -> GameState:
    """
    Decode a game state from JSON.

    Raises:
        RecordError: If the text is not a valid record.
    """
    try:
        record = GameRecord.model_validate_json(text)
    except ValidationError as e:
        raise RecordError(f"Malformed game record: {e}") from e
    return from_record(record)
