"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a draw.
"""

from enum import Enum
from typing import Optional, List, Tuple
from dataclasses import dataclass

from .board import Board, Mark, WINNING_LINES


class GameStatus(Enum):
    """Where a session is in its lifecycle."""
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WIN = "win"
    DRAW = "draw"

    @property
    def is_terminal(self) -> bool:
        return self in (GameStatus.WIN, GameStatus.DRAW)


@dataclass(frozen=True)
class GameResult:
    """Outcome of the board after a move."""
    status: GameStatus
    winner: Optional[Mark] = None   # Only set when status is WIN


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def evaluate(self, board: Board, player: Mark) -> GameResult:
        """
        Evaluate the board for the player who just moved.

        Only the mover can have completed a line with their move, so the
        other player is not checked.

        Args:
            board: The game board.
            player: The player who just moved.

        Returns:
            WIN for player, DRAW if the board is full, otherwise IN_PROGRESS.
        """
        if board.is_winner(player):
            return GameResult(GameStatus.WIN, winner=player)
        if board.is_full():
            return GameResult(GameStatus.DRAW)
        return GameResult(GameStatus.IN_PROGRESS)

    def get_winning_line(self, board: Board, player: Mark) -> Optional[List[Tuple[int, int]]]:
        """
        Get the line player won with, if there is one.

        Returns:
            The winning line as list of (row, col), or None.
        """
        for line in self.WINNING_LINES:
            if all(board.get_cell(row, col) == player for row, col in line):
                return line
        return None
