"""
Board primitives shared by the game state, the win checker and the AI.
"""

from enum import Enum
from typing import List, Optional

from .config import GameConfig


class Player(Enum):
    """The two players in the game. X always moves first."""
    X = "X"
    O = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.O if self == Player.X else Player.X


# None means the cell is empty
Board = List[Optional[Player]]


def empty_board() -> Board:
    """A fresh board with every cell empty."""
    return [None] * GameConfig.BOARD_CELLS


def format_board(board: Board) -> str:
    """
    Render the board as three lines of text.
    Empty cells show their index so a console player knows what to type.
    """
    rows = []
    for row in range(GameConfig.BOARD_SIZE):
        cells = []
        for col in range(GameConfig.BOARD_SIZE):
            index = row * GameConfig.BOARD_SIZE + col
            piece = board[index]
            cells.append(piece.value if piece is not None else str(index))
        rows.append(" " + " | ".join(cells))
    return "\n---+---+---\n".join(rows)
