"""
Game service: runs engine operations against a keyed store.

Each game id has its own lock, held for the whole load -> apply -> save
cycle. Games with different ids never wait on each other.
"""

import logging
import threading
from contextlib import contextmanager
from typing import Dict, Iterator

from game_engine import GameState, MoveError, PlayerId, apply_move, create_game, get_state
from .errors import GameExists, GameNotFound
from .records import TURN_TOKENS
from .store import GameStore, MemoryGameStore, check_game_id


logger = logging.getLogger(__name__)


class GameService:
    """
    Hosts any number of independent games.

    Errors from the engine or the store are logged and re-raised
    unchanged; the stored game is only replaced after a move succeeds.
    """

    def __init__(self, store: GameStore = None):
        self.store = store if store is not None else MemoryGameStore()
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    @contextmanager
    def _locked(self, game_id: str) -> Iterator[None]:
        # Only called for ids that exist or are about to be stored, so the
        # lock table never outgrows the store.
        check_game_id(game_id)
        with self._locks_guard:
            lock = self._locks.setdefault(game_id, threading.Lock())
        with lock:
            yield

    def _require(self, game_id: str) -> None:
        if not self.store.exists(game_id):
            raise GameNotFound(f"No game with id {game_id!r}")

    def create(self, game_id: str, player_a: PlayerId, player_b: PlayerId) -> GameState:
        """
        Create and store a new game.

        Raises:
            GameExists: If the id is already in use.
            InvalidConfiguration: If both players are the same.
        """
        state = create_game(player_a, player_b)
        with self._locked(game_id):
            if self.store.exists(game_id):
                raise GameExists(f"Game {game_id!r} already exists")
            self.store.put(game_id, state)

        logger.info(
            "method=create game=%s owner=%s opponent=%s turn=%s",
            game_id, player_a, player_b, TURN_TOKENS[state.turn],
        )
        return state

    def move(self, game_id: str, actor: PlayerId, row: int, col: int) -> GameState:
        """
        Apply a move to a stored game and save the result.

        Raises:
            GameNotFound: If there is no such game.
            MoveError: If the engine rejects the move.
        """
        self._require(game_id)
        with self._locked(game_id):
            state = self.store.get(game_id)
            try:
                new_state = apply_move(state, actor, row, col)
            except MoveError as e:
                logger.warning(
                    "method=move game=%s actor=%s cell=(%s, %s) rejected: %s",
                    game_id, actor, row, col, e,
                )
                raise
            self.store.put(game_id, new_state)

        logger.info(
            "method=move game=%s actor=%s cell=(%s, %s) turn=%s outcome=%s",
            game_id, actor, row, col,
            TURN_TOKENS[new_state.turn], new_state.outcome.name.lower(),
        )
        return new_state

    def query(self, game_id: str) -> GameState:
        """Current state of a stored game."""
        self._require(game_id)
        with self._locked(game_id):
            state = self.store.get(game_id)
        logger.debug("method=query game=%s turn=%s", game_id, TURN_TOKENS[state.turn])
        return get_state(state)
