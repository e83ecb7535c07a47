"""
AI player for sliding-window TicTacToe.
Rule-based strategies at three difficulty levels; no game-tree search.
"""

import logging
from typing import Dict, List, Optional, Sequence

import numpy as np

from board_engine.board import Board, Player
from board_engine.config import Difficulty, GameConfig
from board_engine.game_state import GameState
from board_engine.move_validator import get_available_cells
from .threats import (
    board_after_removal,
    find_valid_threats,
    find_winning_or_blocking_move,
)

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays sliding-window TicTacToe.

    - EASY: random moves, blocking an open line about a third of the time
    - MEDIUM: win, block, center, random
    - HARD: like medium, but knows the opponent's oldest piece is about to
      vanish and ignores threats that depend on it

    The AI never mutates the board or histories it is given. All randomness
    comes from the injected numpy Generator, so a seeded generator makes
    every decision reproducible.
    """

    def __init__(
        self,
        player: Player = Player.O,
        difficulty: Difficulty = GameConfig.DEFAULT_DIFFICULTY,
        rng: Optional[np.random.Generator] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: O)
            difficulty: Strategy tier.
            rng: Random source for the random fallbacks.
        """
        self.player = player
        self.opponent = player.opposite()
        self.difficulty = difficulty
        self.rng = rng if rng is not None else np.random.default_rng()

        # Why the last move was chosen (for logging and debugging)
        self.last_reason: Optional[str] = None

    def choose_move(
        self,
        board: Board,
        histories: Dict[Player, Sequence[int]]
    ) -> Optional[int]:
        """
        Pick a cell for the AI.

        Args:
            board: Current board (not modified).
            histories: Each player's live pieces, oldest first (not modified).

        Returns:
            Cell index, or None if the board is full.
        """
        self.last_reason = None
        if not get_available_cells(board):
            self.last_reason = "no-move"
            return None

        if self.difficulty == Difficulty.HARD:
            move = self._hard_move(board, histories)
        elif self.difficulty == Difficulty.MEDIUM:
            move = self._medium_move(board)
        else:
            move = self._easy_move(board)

        logger.debug("AI (%s, %s) plays %s: %s",
                     self.player.value, self.difficulty.value, move, self.last_reason)
        return move

    def get_best_move(self, game_state: GameState) -> Optional[int]:
        """Pick a move for a live game, or None if it is not our turn."""
        if not game_state.game_active:
            return None

        if game_state.current_player != self.player:
            logger.warning("It's not %s's turn!", self.player.value)
            return None

        return self.choose_move(list(game_state.board), game_state.snapshot_histories())

    def _easy_move(self, board: Board) -> Optional[int]:
        if self.rng.random() < GameConfig.EASY_BLOCK_PROBABILITY:
            block = find_winning_or_blocking_move(board, self.opponent)
            if block is not None:
                self.last_reason = "block"
                return block
        return self._random_move(board)

    def _medium_move(self, board: Board) -> Optional[int]:
        win = find_winning_or_blocking_move(board, self.player)
        if win is not None:
            self.last_reason = "win"
            return win

        block = find_winning_or_blocking_move(board, self.opponent)
        if block is not None:
            self.last_reason = "block"
            return block

        if board[GameConfig.CENTER_INDEX] is None:
            self.last_reason = "center"
            return GameConfig.CENTER_INDEX

        return self._random_move(board)

    def _hard_move(
        self,
        board: Board,
        histories: Dict[Player, Sequence[int]]
    ) -> Optional[int]:
        # Priority 1: win now
        win = find_winning_or_blocking_move(board, self.player)
        if win is not None:
            self.last_reason = "win"
            return win

        # Priority 2: the opponent holds a full set, so our move removes
        # their oldest piece
        expiring = self._expiring_piece(histories)
        if expiring is not None:
            threat = find_valid_threats(board, self.opponent, expiring)
            if threat is not None:
                self.last_reason = "block-real-threat"
                return threat

            future = board_after_removal(board, expiring)
            setup = find_winning_or_blocking_move(future, self.player)
            if setup is not None and board[setup] is None:
                self.last_reason = "expiry-setup"
                return setup

        # Priority 3: standard block. Lines through the expiring piece were
        # already ruled out above.
        block = find_winning_or_blocking_move(board, self.opponent, ignore_index=expiring)
        if block is not None:
            self.last_reason = "block"
            return block

        # Priority 4: center
        if board[GameConfig.CENTER_INDEX] is None:
            self.last_reason = "center"
            return GameConfig.CENTER_INDEX

        # Priority 5: anything
        return self._random_move(board)

    def _expiring_piece(self, histories: Dict[Player, Sequence[int]]) -> Optional[int]:
        """The opponent's oldest piece if it goes on our next move, else None."""
        opponent_history = histories.get(self.opponent, ())
        if len(opponent_history) == GameConfig.MAX_PIECES:
            return opponent_history[0]
        return None

    def _random_move(self, board: Board) -> Optional[int]:
        """Uniform choice among the empty cells."""
        available: List[int] = get_available_cells(board)
        if not available:
            return None
        self.last_reason = "random"
        return available[int(self.rng.integers(len(available)))]


def compute_ai_move(
    board: Board,
    histories: Dict[Player, Sequence[int]],
    difficulty: Difficulty,
    rng: Optional[np.random.Generator] = None
) -> Optional[int]:
    """
    Choose O's move for a board/history snapshot.

    Pure: the inputs are not modified, and the same inputs with an equally
    seeded rng always give the same answer.

    Returns:
        Cell index, or None when the board is full.
    """
    return AIPlayer(Player.O, difficulty, rng).choose_move(board, histories)


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    # X threatens the top row; medium should block at 2 rather than take center
    board = [Player.X, Player.X, None, Player.O, None, None, None, None, None]
    histories = {Player.X: [0, 1], Player.O: [3]}
    move = compute_ai_move(board, histories, Difficulty.MEDIUM, np.random.default_rng(0))
    print(f"Medium AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"

    # X's threat through 2 and 5 depends on its oldest piece (2); hard ignores it
    board = [Player.O, None, Player.X, None, None, Player.X, Player.X, Player.O, None]
    histories = {Player.X: [2, 5, 6], Player.O: [0, 7]}
    move = compute_ai_move(board, histories, Difficulty.HARD, np.random.default_rng(0))
    print(f"Hard AI's move: {move}")
    assert move == 4, f"Expected 4, got {move}"

    print("\nAIPlayer test done!")
