"""
Line analysis for the AI opponent.

The board is encoded as a small numpy array (X = 1, O = -1, empty = 0) so
every winning line can be scored in one vectorised pass.
"""

from typing import Optional

import numpy as np

from board_engine.board import Board, Player
from board_engine.win_checker import WINNING_LINES

# (8, 3) index array, rows in the same order as WINNING_LINES
LINES = np.array(WINNING_LINES, dtype=np.intp)

PLAYER_CODES = {Player.X: 1, Player.O: -1}


def encode_board(board: Board) -> np.ndarray:
    """Encode the board as an int8 array of player codes."""
    return np.array(
        [PLAYER_CODES[cell] if cell is not None else 0 for cell in board],
        dtype=np.int8,
    )


def two_in_a_row_lines(board: Board, player: Player) -> np.ndarray:
    """
    Boolean mask over WINNING_LINES: True where the line holds exactly two
    of player's pieces and one empty cell.
    """
    values = encode_board(board)[LINES]
    owned = (values == PLAYER_CODES[player]).sum(axis=1)
    empty = (values == 0).sum(axis=1)
    return (owned == 2) & (empty == 1)


def find_winning_or_blocking_move(
    board: Board,
    player: Player,
    ignore_index: Optional[int] = None
) -> Optional[int]:
    """
    Find the cell that completes one of player's 2-in-a-rows.

    Called with the AI's own player this is a winning move; called with the
    opponent it is the cell to block.

    Args:
        board: The board to search.
        player: Whose 2-in-a-rows to look for.
        ignore_index: Skip any line passing through this cell.

    Returns:
        The empty cell of the first matching line (declared line order),
        or None.
    """
    candidates = two_in_a_row_lines(board, player)
    if ignore_index is not None:
        candidates &= ~(LINES == ignore_index).any(axis=1)

    matches = np.flatnonzero(candidates)
    if matches.size == 0:
        return None

    line = LINES[matches[0]]
    for index in line:
        if board[index] is None:
            return int(index)
    return None


def find_valid_threats(board: Board, player: Player, oldest_index: int) -> Optional[int]:
    """
    Find a real threat from player and return the cell that blocks it.

    A line running through the player's oldest piece is not a real threat:
    that piece disappears on the AI's move, before the player can complete
    the line.
    """
    return find_winning_or_blocking_move(board, player, ignore_index=oldest_index)


def board_after_removal(board: Board, index: int) -> Board:
    """Copy of the board with one cell cleared."""
    future = list(board)
    future[index] = None
    return future
