"""
Console front end for sliding-window TicTacToe.

Each player keeps at most three pieces: once a player has held three,
every move by the opponent removes that player's oldest piece.

Run this script to play against a friend or the computer!
"""

import argparse
import logging
import sys
import time
from typing import Optional

import numpy as np

from board_engine import (
    Difficulty,
    GameConfig,
    GameMode,
    InvalidMoveError,
    MoveResult,
    format_board,
)
from game_session import GameSession


class ConsoleGame:
    """
    Text-mode game loop.

    Game flow:
    1. Show the board and whose turn it is
    2. Read a cell number (or r to restart, q to quit)
    3. In single-player mode, pause briefly and let the computer answer
    4. Repeat until someone wins or the player quits
    """

    def __init__(self, session: GameSession, ai_delay: float = GameConfig.AI_MOVE_DELAY_SECONDS):
        self.session = session
        self.ai_delay = ai_delay
        self.is_running = False

    def run(self):
        """Play until the user quits."""
        print("\n" + "=" * 60)
        print("   Sliding-Window TicTacToe")
        print(f"   Mode: {self.session.mode.value}")
        if self.session.single_player:
            print(f"   Difficulty: {self.session.difficulty.value}")
        print("=" * 60)
        print("Enter a cell number (0-8), 'r' to restart, 'q' to quit.\n")

        self.is_running = True
        while self.is_running:
            self._show()

            if not self.session.state.game_active:
                self._prompt_after_game()
                continue

            if self.session.is_ai_turn():
                self._computer_move()
            else:
                self._human_move()

    def _show(self):
        print(format_board(self.session.state.board))
        print(f"\n{self.session.status_message()}")

    def _human_move(self):
        clock = self.session.start_move_clock()
        if clock is not None:
            print(f"Time left: {clock.seconds_left()}")

        command = self._read("> ")
        if command is None or command == "q":
            self.is_running = False
            return
        if command == "r":
            self.session.restart()
            return

        if clock is not None and clock.expired():
            self.session.timeout()
            return

        try:
            index = int(command)
        except ValueError:
            print(f"'{command}' is not a cell number.")
            return

        try:
            result = self.session.play_human_move(index)
        except InvalidMoveError as e:
            print(f"Invalid move: {e}")
            return
        self._report(result)

    def _computer_move(self):
        print("Computer is thinking...")
        if self.ai_delay > 0:
            time.sleep(self.ai_delay)

        result = self.session.play_ai_move()
        if result is None:
            return
        print(f"Computer plays {self.session.state.histories[self.session.ai.player][-1]}")
        self._report(result)

    def _report(self, result: MoveResult):
        if result.removed_index is not None:
            print(f"Piece at {result.removed_index} expired.")
        if result.winning_line is not None:
            print(f"Winning line: {result.winning_line}")

    def _prompt_after_game(self):
        command = self._read("Play again? [r]estart / [q]uit: ")
        if command == "r":
            self.session.restart()
        elif command is None or command == "q":
            self.is_running = False

    def _read(self, prompt: str) -> Optional[str]:
        try:
            return input(prompt).strip().lower()
        except EOFError:
            return None


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Sliding-window TicTacToe")
    parser.add_argument(
        "--mode",
        type=GameMode.from_name,
        default=GameConfig.DEFAULT_MODE,
        help="two-player or single-player (you play X against the computer)"
    )
    parser.add_argument(
        "--difficulty",
        type=Difficulty.from_name,
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="easy, medium or hard (single-player only)"
    )
    parser.add_argument("--seed", type=int, help="Seed for the computer's random moves")
    parser.add_argument(
        "--ai-delay",
        type=float,
        default=GameConfig.AI_MOVE_DELAY_SECONDS,
        help="Seconds to pause before the computer moves"
    )
    parser.add_argument("--verbose", action="store_true", help="Log engine decisions")

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    session = GameSession(
        mode=args.mode,
        difficulty=args.difficulty,
        rng=np.random.default_rng(args.seed),
    )

    try:
        ConsoleGame(session, ai_delay=args.ai_delay).run()
    except KeyboardInterrupt:
        print("\nInterrupted by user")

    print("Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
