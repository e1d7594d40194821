"""
Board for TicTacToe.
Holds the 3x3 grid and answers questions about it.
"""

from enum import Enum
from typing import Optional, List

import numpy as np

from .config import GameConfig


class Mark(Enum):
    """What a cell can hold."""
    X = "X"
    O = "O"
    EMPTY = GameConfig.EMPTY_CELL

    @property
    def is_player(self) -> bool:
        """True for X and O."""
        return self != Mark.EMPTY

    def opposite(self) -> "Mark":
        """Get the other player's mark."""
        if self == Mark.EMPTY:
            raise ValueError("EMPTY has no opposite")
        return Mark.O if self == Mark.X else Mark.X


class MoveError(Enum):
    """Why a move was rejected."""
    OUT_OF_RANGE = "out_of_range"      # Row or column outside 0-2
    CELL_OCCUPIED = "cell_occupied"    # Somebody already played there
    NOT_STARTED = "not_started"        # Session not started yet
    GAME_OVER = "game_over"            # Session already won or drawn


# All possible winning lines (as list of (row, col) tuples)
WINNING_LINES = [
    # Rows
    [(0, 0), (0, 1), (0, 2)],
    [(1, 0), (1, 1), (1, 2)],
    [(2, 0), (2, 1), (2, 2)],
    # Columns
    [(0, 0), (1, 0), (2, 0)],
    [(0, 1), (1, 1), (2, 1)],
    [(0, 2), (1, 2), (2, 2)],
    # Diagonals
    [(0, 0), (1, 1), (2, 2)],
    [(0, 2), (1, 1), (2, 0)],
]

# Shape (8, 3, 2) so all lines can be gathered from the grid in one go
_LINE_INDEX = np.array(WINNING_LINES)


class Board:
    """
    The 3x3 TicTacToe grid.

    Cells are stored as single characters in a numpy array
    (" " for empty, otherwise the player's mark). A cell that holds a
    mark is never overwritten by apply_move(); only reset() clears it.
    """

    SIZE = GameConfig.BOARD_SIZE

    def __init__(self):
        self.grid = np.full((self.SIZE, self.SIZE), Mark.EMPTY.value, dtype="<U1")

    def _in_range(self, row, col) -> bool:
        for value in (row, col):
            # bool is an int subclass but never a coordinate
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                return False
            if not 0 <= value < self.SIZE:
                return False
        return True

    def check_move(self, row: int, col: int) -> Optional[MoveError]:
        """
        Check whether a mark could be placed at (row, col).

        Returns:
            The MoveError that would reject the move, or None if it is legal.
        """
        if not self._in_range(row, col):
            return MoveError.OUT_OF_RANGE
        if self.grid[row, col] != Mark.EMPTY.value:
            return MoveError.CELL_OCCUPIED
        return None

    def apply_move(self, row: int, col: int, player: Mark) -> bool:
        """
        Place a player's mark.

        Args:
            row: Row index (0-2).
            col: Column index (0-2).
            player: Mark.X or Mark.O.

        Returns:
            True if the mark was placed, False if the move was rejected
            (the board is left untouched in that case).
        """
        if not isinstance(player, Mark) or not player.is_player:
            raise ValueError(f"Not a player mark: {player!r}")

        if self.check_move(row, col) is not None:
            return False

        self.grid[row, col] = player.value
        return True

    def is_full(self) -> bool:
        """True if no empty cell is left."""
        return not bool(np.any(self.grid == Mark.EMPTY.value))

    def is_winner(self, player: Mark) -> bool:
        """True if player owns any whole row, column or diagonal."""
        if not isinstance(player, Mark):
            raise ValueError(f"Not a mark: {player!r}")
        if not player.is_player:
            return False
        lines = self.grid[_LINE_INDEX[..., 0], _LINE_INDEX[..., 1]]
        return bool(np.any(np.all(lines == player.value, axis=1)))

    def reset(self):
        """Clear every cell."""
        self.grid.fill(Mark.EMPTY.value)

    def get_cell(self, row: int, col: int) -> Mark:
        """
        Get the mark at (row, col).

        Raises:
            IndexError: if row or col is outside 0-2.
        """
        if not self._in_range(row, col):
            raise IndexError(f"Cell ({row}, {col}) is off the board")
        return Mark(str(self.grid[row, col]))

    def to_rows(self) -> List[List[str]]:
        """The grid as plain nested lists of cell characters."""
        return self.grid.tolist()

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.grid, other.grid))

    def __repr__(self):
        return f"Board({self.to_rows()!r})"
