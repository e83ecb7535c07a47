"""
Game session for sliding-window TicTacToe.

Ties together the board engine and the AI opponent:
- Mode (two players, or human X against the AI's O) and difficulty
- Applying human moves and AI moves in turn
- Restarting whenever the mode or difficulty changes
- Deciding when the hard-difficulty move timer applies

The session never sleeps or starts timers. A front end owns the clock,
asks start_move_clock() for a deadline, and calls timeout() when it passes.
"""

import logging
from typing import Callable, Optional

import numpy as np

from ai_engine import AIPlayer
from board_engine import (
    Difficulty,
    GameConfig,
    GameMode,
    GameState,
    InvalidMoveError,
    MoveClock,
    MoveResult,
    Player,
)

logger = logging.getLogger(__name__)


class GameSession:
    """
    One seat at the board, across any number of restarts.
    """

    def __init__(
        self,
        mode: GameMode = GameConfig.DEFAULT_MODE,
        difficulty: Difficulty = GameConfig.DEFAULT_DIFFICULTY,
        rng: Optional[np.random.Generator] = None,
        clock: Optional[Callable[[], float]] = None
    ):
        """
        Args:
            mode: Two-player or single-player.
            difficulty: AI strength in single-player mode.
            rng: Random source for the AI.
            clock: Time source for move clocks (default time.monotonic).
        """
        self.mode = mode
        self.difficulty = difficulty
        self.clock = clock
        self.state = GameState()
        self.ai = AIPlayer(Player.O, difficulty, rng)

    @property
    def single_player(self) -> bool:
        return self.mode == GameMode.SINGLE_PLAYER

    def restart(self) -> GameState:
        """Start a fresh game with the current settings."""
        logger.info("New game: %s, %s", self.mode.value, self.difficulty.value)
        return self.state.restart()

    def set_mode(self, mode: GameMode) -> GameState:
        """Switch mode. Always starts a new game."""
        self.mode = mode
        return self.restart()

    def set_difficulty(self, difficulty: Difficulty) -> GameState:
        """Switch difficulty. Always starts a new game."""
        self.difficulty = difficulty
        self.ai.difficulty = difficulty
        return self.restart()

    def is_ai_turn(self) -> bool:
        return (
            self.single_player
            and self.state.game_active
            and self.state.current_player == self.ai.player
        )

    def play_human_move(self, index: int) -> MoveResult:
        """
        Apply a move for whoever's turn it is.

        Raises:
            InvalidMoveError: If the move is illegal or the AI is to move.
        """
        if self.is_ai_turn():
            raise InvalidMoveError("Wait for the computer to move")
        return self.state.apply_move(index, self.state.current_player)

    def play_ai_move(self) -> Optional[MoveResult]:
        """
        Let the AI take its turn.

        Returns:
            The move result, or None if it is not the AI's turn or there is
            nowhere to play.
        """
        if not self.is_ai_turn():
            return None

        move = self.ai.choose_move(list(self.state.board), self.state.snapshot_histories())
        if move is None:
            logger.info("AI has no legal move")
            return None
        return self.state.apply_move(move, self.ai.player)

    def move_timer_applies(self) -> bool:
        """
        The human has a time limit only on hard, in single-player mode,
        on X's turn, after X's first move.
        """
        return (
            self.single_player
            and self.difficulty == Difficulty.HARD
            and self.state.game_active
            and self.state.current_player == Player.X
            and len(self.state.histories[Player.X]) > 0
        )

    def start_move_clock(self) -> Optional[MoveClock]:
        """A started clock for the human's move, or None if untimed."""
        if not self.move_timer_applies():
            return None
        return MoveClock(GameConfig.MOVE_TIME_LIMIT_SECONDS, self.clock).start()

    def timeout(self) -> MoveResult:
        """The human ran out of time: O wins."""
        return self.state.force_end(GameConfig.TIMEOUT_REASON, winner=Player.O)

    def status_message(self) -> str:
        """One line of status text for the front end."""
        state = self.state
        if state.game_active:
            return f"{state.current_player.value}'s Turn"
        if state.end_reason is not None:
            return state.end_reason
        if state.winner is not None:
            return f"Player {state.winner.value} has won!"
        if state.is_draw:
            return "Game ended in a draw!"
        return "Game over"
