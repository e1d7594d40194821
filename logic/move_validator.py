"""
Move validator for TicTacToe.
Validates that moves follow the rules and explains rejections.
"""

from typing import Optional
from dataclasses import dataclass

from .board import Board, MoveError
from .win_checker import GameStatus


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error: Optional[MoveError] = None
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must be in progress
    2. Row and column must both be 0-2
    3. Can only place on empty cells
    """

    def validate_move(
        self,
        board: Board,
        row: int,
        col: int,
        status: GameStatus = GameStatus.IN_PROGRESS
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            row: Row to place the mark (0-2).
            col: Column to place the mark (0-2).
            status: Current session status.

        Returns:
            ValidationResult with is_valid, error and error_message.
        """
        if status == GameStatus.NOT_STARTED:
            return ValidationResult(
                is_valid=False,
                error=MoveError.NOT_STARTED,
                error_message="Game has not started yet!"
            )

        if status.is_terminal:
            return ValidationResult(
                is_valid=False,
                error=MoveError.GAME_OVER,
                error_message="Game is already over!"
            )

        error = board.check_move(row, col)

        if error == MoveError.OUT_OF_RANGE:
            return ValidationResult(
                is_valid=False,
                error=error,
                error_message=f"Invalid position ({row}, {col}). Must be 0-{board.SIZE - 1}."
            )

        if error == MoveError.CELL_OCCUPIED:
            return ValidationResult(
                is_valid=False,
                error=error,
                error_message=f"Cell ({row}, {col}) is already occupied by {board.get_cell(row, col).value}"
            )

        return ValidationResult(is_valid=True)
