"""
Configuration for the game store and console.
Change these values based on your setup!
"""

import logging


class GameConfig:
    """
    Configuration class for hosting games.
    Command-line flags in main.py override these values.
    """

    # ==================== STORAGE SETTINGS ====================
    # Directory for JSON game files (None keeps games in memory only)
    STORE_DIR = None

    # Game id used by the console when none is given
    DEFAULT_GAME_ID = "default"

    # Allowed game ids (also used as file names)
    GAME_ID_PATTERN = r"^[A-Za-z0-9_-]+$"

    # Suffix of stored game files
    RECORD_SUFFIX = ".json"

    # ==================== LOGGING SETTINGS ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

    # ==================== CONSOLE SETTINGS ====================
    QUIT_COMMAND = "q"
