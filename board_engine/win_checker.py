"""
Win checker for sliding-window TicTacToe.
Checks if a player has won or if the board is a dead draw.
"""

from typing import Optional, Sequence, Tuple

from .board import Board, Player


Line = Tuple[int, int, int]

# All possible winning lines, as board indices. The order matters: when two
# lines complete at once, the first one listed is the one reported.
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 pieces of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The 9-cell board.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Line]:
        """
        Get the first completed line in declared order, or None.
        """
        for line in self.WINNING_LINES:
            if self._check_line(board, line):
                return line
        return None

    def _check_line(self, board: Sequence[Optional[Player]], line: Line) -> bool:
        a, b, c = line
        return board[a] is not None and board[a] == board[b] == board[c]

    def check_draw(self, board: Board) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when all cells are filled and nobody has a line.
        Under the expiry rule a real game never fills the board, so this
        only fires for positions built by hand.
        """
        if self.get_winning_line(board) is not None:
            return False
        return all(cell is not None for cell in board)
