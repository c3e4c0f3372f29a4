"""
Shared pytest fixtures.

Game state fixtures are built fresh for every test.
"""

from typing import Callable, List, Tuple

import pytest

from game_engine import GameState, apply_move, create_game
from game_store import GameService, MemoryGameStore


P0 = "player0"
P1 = "player1"

# Scenario C: P0 completes row 0
ROW_WIN_MOVES = [(P0, 0, 0), (P1, 1, 0), (P0, 0, 1), (P1, 1, 1), (P0, 0, 2)]

# Full board, no line:
#   X O X
#   X O O
#   O X X
DRAW_MOVES = [
    (P0, 0, 0), (P1, 0, 1), (P0, 0, 2),
    (P1, 1, 1), (P0, 1, 0), (P1, 1, 2),
    (P0, 2, 1), (P1, 2, 0), (P0, 2, 2),
]


def play_moves(state: GameState, moves: List[Tuple[str, int, int]]) -> GameState:
    """Apply (actor, row, col) moves in order."""
    for actor, row, col in moves:
        state = apply_move(state, actor, row, col)
    return state


@pytest.fixture
def new_game() -> GameState:
    return create_game(P0, P1)


@pytest.fixture
def won_game(new_game) -> GameState:
    return play_moves(new_game, ROW_WIN_MOVES)


@pytest.fixture
def drawn_game(new_game) -> GameState:
    return play_moves(new_game, DRAW_MOVES)


@pytest.fixture
def play() -> Callable[[GameState, List[Tuple[str, int, int]]], GameState]:
    return play_moves


@pytest.fixture
def service() -> GameService:
    return GameService(MemoryGameStore())
