"""
Board engine for sliding-window TicTacToe.
Handles the board, the piece-expiry rule, win detection, and turn state.
"""

from .board import Board, Player, empty_board, format_board
from .config import Difficulty, GameConfig, GameMode
from .errors import GameError, HistoryInvariantError, InvalidMoveError
from .game_state import GameState, MoveResult
from .move_clock import MoveClock
from .move_validator import MoveValidator, ValidationResult, get_available_cells
from .win_checker import WINNING_LINES, WinChecker
