"""
AI engine for sliding-window TicTacToe.
Chooses moves for the automated opponent at three difficulty levels.
"""

from .ai_player import AIPlayer, compute_ai_move
from .threats import find_valid_threats, find_winning_or_blocking_move
