"""
Game state management for sliding-window TicTacToe.
Tracks the board, current player, and the order pieces were placed in.

Each player keeps at most three pieces on the board. Once a player has
held three pieces, every move by the opponent removes that player's
oldest surviving piece.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .board import Board, Player, empty_board, format_board
from .config import GameConfig
from .errors import HistoryInvariantError, InvalidMoveError
from .move_validator import MoveValidator, get_available_cells
from .win_checker import Line, WinChecker

logger = logging.getLogger(__name__)


def _empty_histories() -> Dict[Player, List[int]]:
    return {Player.X: [], Player.O: []}


def _cleared_flags() -> Dict[Player, bool]:
    return {Player.X: False, Player.O: False}


@dataclass
class MoveResult:
    """
    What a caller needs to redraw after a move.
    """
    board: Board                        # Copy of the board after the move
    removed_index: Optional[int]        # Cell vacated by the expiry rule
    winning_line: Optional[Line]        # Set when the move won the game
    game_active: bool
    winner: Optional[Player] = None


@dataclass
class GameState:
    """
    The complete state of one sliding-window TicTacToe game.

    Tracks:
    - The 9-cell board (row-major, None means empty)
    - Each player's live pieces, oldest first
    - Which players' pieces have started expiring
    - Current player and game status (ongoing, won, drawn, forced end)
    """

    board: Board = field(default_factory=empty_board)

    # Indices each player currently occupies, oldest first
    histories: Dict[Player, List[int]] = field(default_factory=_empty_histories)

    # Set the first time a player holds MAX_PIECES; from then on every
    # opponent move removes that player's oldest piece
    expiry_active: Dict[Player, bool] = field(default_factory=_cleared_flags)

    current_player: Player = Player.X
    game_active: bool = True

    # Game result
    winner: Optional[Player] = None
    winning_line: Optional[Line] = None
    is_draw: bool = False
    end_reason: Optional[str] = None

    def __post_init__(self):
        self._validator = MoveValidator()
        self._win_checker = WinChecker()

    def apply_move(self, index: int, player: Player) -> MoveResult:
        """
        Place a piece, apply the expiry rule, and check for a win.

        Args:
            index: Cell to play (0-8).
            player: The player placing the piece; must be the current player.

        Returns:
            MoveResult describing the board after the move.

        Raises:
            InvalidMoveError: If the move breaks the rules. Nothing changes.
        """
        result = self._validator.validate_move(self, index, player)
        if not result.is_valid:
            raise InvalidMoveError(result.error_message)

        self.board[index] = player
        history = self.histories[player]
        history.append(index)
        logger.debug("%s placed at %d (history %s)", player.value, index, history)

        if len(history) == GameConfig.MAX_PIECES and not self.expiry_active[player]:
            self.expiry_active[player] = True
            logger.debug("%s now holds %d pieces; its pieces start expiring",
                         player.value, GameConfig.MAX_PIECES)

        # Expire the opponent's oldest piece before looking for a win
        removed_index = None
        opponent = player.opposite()
        if self.expiry_active[opponent] and self.histories[opponent]:
            removed_index = self.histories[opponent].pop(0)
            self.board[removed_index] = None
            logger.debug("Removed %s's oldest piece at %d", opponent.value, removed_index)

        self.check_invariants()

        winning_line = self.check_win()

        if self.game_active:
            self.current_player = opponent

        return MoveResult(
            board=list(self.board),
            removed_index=removed_index,
            winning_line=winning_line,
            game_active=self.game_active,
            winner=self.winner,
        )

    def check_win(self) -> Optional[Line]:
        """
        Scan the winning lines in declared order.

        Returns:
            The first complete line, or None. A win ends the game, and so
            does a full board with no line (a draw).
        """
        line = self._win_checker.get_winning_line(self.board)
        if line is not None:
            self.winner = self.board[line[0]]
            self.winning_line = line
            self.game_active = False
            logger.info("Player %s has won on line %s", self.winner.value, line)
        elif not self.get_empty_cells():
            self.is_draw = True
            self.game_active = False
            logger.info("Board is full with no winner; draw")
        return line

    def force_end(self, reason: str, winner: Optional[Player] = None) -> MoveResult:
        """
        End the game from outside the move flow (e.g. a move timer ran out).

        The reason is an opaque label for display. A game that is already
        over keeps its first outcome.
        """
        if self.game_active:
            self.game_active = False
            self.end_reason = reason
            self.winner = winner
            logger.info("Game ended: %s", reason)
        return MoveResult(
            board=list(self.board),
            removed_index=None,
            winning_line=self.winning_line,
            game_active=False,
            winner=self.winner,
        )

    def restart(self) -> "GameState":
        """Reset everything for a new game. Returns self."""
        self.board = empty_board()
        self.histories = _empty_histories()
        self.expiry_active = _cleared_flags()
        self.current_player = Player.X
        self.game_active = True
        self.winner = None
        self.winning_line = None
        self.is_draw = False
        self.end_reason = None
        logger.debug("Game restarted")
        return self

    def check_invariants(self):
        """
        Make sure the histories match the board.

        Raises:
            HistoryInvariantError: If a history is too long, points at a
                cell the player does not own, or disagrees with the
                player's piece count.
        """
        for player, history in self.histories.items():
            if len(history) > GameConfig.MAX_PIECES:
                raise HistoryInvariantError(
                    f"{player.value} has {len(history)} recorded moves (max {GameConfig.MAX_PIECES})"
                )
            for index in history:
                if self.board[index] != player:
                    raise HistoryInvariantError(
                        f"{player.value}'s history lists cell {index}, which it does not occupy"
                    )
            on_board = sum(1 for cell in self.board if cell == player)
            if on_board != len(history):
                raise HistoryInvariantError(
                    f"{player.value} has {on_board} pieces on the board but {len(history)} in history"
                )

    def get_empty_cells(self) -> List[int]:
        """Get all empty cell indices."""
        return get_available_cells(self.board)

    def snapshot_histories(self) -> Dict[Player, List[int]]:
        """Copy of the histories, safe to hand to the AI."""
        return {player: list(history) for player, history in self.histories.items()}

    def copy(self) -> "GameState":
        """Create a deep copy of the game state."""
        return GameState(
            board=list(self.board),
            histories=self.snapshot_histories(),
            expiry_active=dict(self.expiry_active),
            current_player=self.current_player,
            game_active=self.game_active,
            winner=self.winner,
            winning_line=self.winning_line,
            is_draw=self.is_draw,
            end_reason=self.end_reason,
        )

    def print_board(self):
        """Print the board to console."""
        print()
        print(format_board(self.board))

        if not self.game_active:
            if self.winner:
                print(f"\nPlayer {self.winner.value} has won!")
            elif self.is_draw:
                print("\nIt's a DRAW!")
            else:
                print(f"\n{self.end_reason}")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")


# Quick demo
if __name__ == "__main__":
    print("Playing a short game...")

    game = GameState()

    # X reaches three pieces on move 5; O's third move then removes X's 0
    for index in [0, 1, 4, 3, 7, 8]:
        player = game.current_player
        result = game.apply_move(index, player)
        print(f"\n{player.value} plays {index}, removed: {result.removed_index}")
        game.print_board()
