"""
Move validator for sliding-window TicTacToe.
Validates that moves follow the rules.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .board import Board, Player
from .config import GameConfig

if TYPE_CHECKING:
    from .game_state import GameState


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def get_available_cells(board: Board) -> List[int]:
    """
    Get the indices of all empty cells, in ascending order.

    Pure helper: never touches the board it is given.
    """
    return [index for index, cell in enumerate(board) if cell is None]


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a board cell (0-8)
    3. Can only place on empty cells
    4. Only the player whose turn it is may move
    """

    def validate_move(
        self,
        game_state: "GameState",
        index: int,
        player: Player
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place the piece on (0-8).
            player: Who is placing the piece.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if not game_state.game_active:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # bool is an int subclass, but True is not a cell
        if isinstance(index, bool) or not isinstance(index, int):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index!r}. Must be an integer."
            )

        if not 0 <= index < GameConfig.BOARD_CELLS:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid position {index}. Must be 0-{GameConfig.BOARD_CELLS - 1}."
            )

        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        if not isinstance(player, Player):
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown player {player!r}. Must be X or O."
            )

        if player != game_state.current_player:
            return ValidationResult(
                is_valid=False,
                error_message=f"It is {game_state.current_player.value}'s turn, not {player.value}'s"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: "GameState") -> List[int]:
        """
        Get all valid moves for the current player.

        Returns:
            List of cell indices; empty once the game is over.
        """
        if not game_state.game_active:
            return []
        return get_available_cells(game_state.board)
