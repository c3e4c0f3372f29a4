"""
Storage and hosting for engine games.
Handles records, keyed stores, and the per-game service.
"""

from .config import GameConfig
from .errors import StoreError, GameNotFound, GameExists, InvalidGameId, RecordError
from .records import GameRecord, to_record, from_record, dumps, loads
from .store import GameStore, MemoryGameStore, JsonFileGameStore
from .service import GameService
