"""
Game configuration for sliding-window TicTacToe.
All the tunable values for the board, the expiry rule, and the AI opponent.
"""

from enum import Enum


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = "easy"        # Mostly random, sometimes blocks
    MEDIUM = "medium"    # Win, block, center, random
    HARD = "hard"        # Expiry-aware threat analysis

    @classmethod
    def from_name(cls, name: str) -> "Difficulty":
        """
        Parse a difficulty from its name (case-insensitive).

        Raises:
            ValueError: If the name is not a known difficulty.
        """
        try:
            return cls(name.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty '{name}'. Choose one of: {choices}") from None


class GameMode(Enum):
    """Who is sitting at the board."""
    TWO_PLAYER = "two-player"
    SINGLE_PLAYER = "single-player"   # Human plays X, AI plays O

    @classmethod
    def from_name(cls, name: str) -> "GameMode":
        """Parse a mode from its name, accepting '_' in place of '-'."""
        try:
            return cls(name.strip().lower().replace("_", "-"))
        except ValueError:
            choices = ", ".join(m.value for m in cls)
            raise ValueError(f"Unknown game mode '{name}'. Choose one of: {choices}") from None


class GameConfig:
    """
    Configuration class for game settings.
    Values match the original browser game.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3
    BOARD_CELLS = BOARD_SIZE * BOARD_SIZE   # 9 cells, indices 0-8 row-major
    CENTER_INDEX = 4

    # ==================== EXPIRY RULE ====================
    # A player never holds more than this many pieces
    MAX_PIECES = 3

    # ==================== AI SETTINGS ====================
    # Chance that the easy AI bothers to block an open X line
    EASY_BLOCK_PROBABILITY = 0.33

    # Pause before the AI plays, so the human can see the board (seconds)
    AI_MOVE_DELAY_SECONDS = 0.7

    # ==================== MOVE TIMER ====================
    # Hard difficulty only: the human must move within this window or lose
    MOVE_TIME_LIMIT_SECONDS = 3.0
    TIMEOUT_REASON = "Time's up! O wins!"

    # ==================== DEFAULTS ====================
    DEFAULT_MODE = GameMode.TWO_PLAYER
    DEFAULT_DIFFICULTY = Difficulty.EASY
