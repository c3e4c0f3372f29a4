"""
Keyed storage for games: game id -> GameState.

States are stored encoded, so a state read back is never the same object
a caller handed in.
"""

import logging
import os
import re
import tempfile
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Union

from game_engine import GameState
from .config import GameConfig
from .errors import GameNotFound, InvalidGameId
from .records import dumps, loads


logger = logging.getLogger(__name__)

_GAME_ID_RE = re.compile(GameConfig.GAME_ID_PATTERN)


def check_game_id(game_id: str) -> str:
    """Return the id if it is usable as a key and file name."""
    if not isinstance(game_id, str) or not _GAME_ID_RE.match(game_id):
        raise InvalidGameId(f"Invalid game id {game_id!r}")
    return game_id


class GameStore(ABC):
    """Interface for game storage."""

    @abstractmethod
    def get(self, game_id: str) -> GameState:
        """Load a game. Raises GameNotFound if it does not exist."""

    @abstractmethod
    def put(self, game_id: str, state: GameState) -> None:
        """Save a game, replacing any previous state."""

    @abstractmethod
    def exists(self, game_id: str) -> bool:
        ...

    @abstractmethod
    def delete(self, game_id: str) -> None:
        """Remove a game. Raises GameNotFound if it does not exist."""

    @abstractmethod
    def list_ids(self) -> List[str]:
        """All stored game ids, sorted."""


class MemoryGameStore(GameStore):
    """Games kept in a dict for the lifetime of the process."""

    def __init__(self):
        self._records: Dict[str, str] = {}

    def get(self, game_id: str) -> GameState:
        check_game_id(game_id)
        try:
            text = self._records[game_id]
        except KeyError:
            raise GameNotFound(f"No game with id {game_id!r}") from None
        return loads(text)

    def put(self, game_id: str, state: GameState) -> None:
        check_game_id(game_id)
        self._records[game_id] = dumps(state)

    def exists(self, game_id: str) -> bool:
        check_game_id(game_id)
        return game_id in self._records

    def delete(self, game_id: str) -> None:
        check_game_id(game_id)
        if self._records.pop(game_id, None) is None:
            raise GameNotFound(f"No game with id {game_id!r}")

    def list_ids(self) -> List[str]:
        return sorted(self._records)


class JsonFileGameStore(GameStore):
    """
    One JSON file per game in a directory.

    Files are written to a temporary name and moved into place, so a
    reader never sees a half-written record.
    """

    def __init__(self, directory: Union[str, Path]):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, game_id: str) -> Path:
        return self.directory / f"{check_game_id(game_id)}{GameConfig.RECORD_SUFFIX}"

    def get(self, game_id: str) -> GameState:
        path = self._path(game_id)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError:
            raise GameNotFound(f"No game with id {game_id!r}") from None
        return loads(text)

    def put(self, game_id: str, state: GameState) -> None:
        path = self._path(game_id)
        text = dumps(state)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.directory, prefix=f".{game_id}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.replace(tmp_name, path)
        except OSError:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("Wrote %s", path)

    def exists(self, game_id: str) -> bool:
        return self._path(game_id).is_file()

    def delete(self, game_id: str) -> None:
        path = self._path(game_id)
        try:
            path.unlink()
        except FileNotFoundError:
            raise GameNotFound(f"No game with id {game_id!r}") from None

    def list_ids(self) -> List[str]:
        suffix = GameConfig.RECORD_SUFFIX
        return sorted(
            p.name[:-len(suffix)]
            for p in self.directory.glob(f"*{suffix}")
            if _GAME_ID_RE.match(p.name[:-len(suffix)])
        )
