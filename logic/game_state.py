"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, the move history and the result.
"""

from typing import Optional, List
from dataclasses import dataclass, field

from .board import Board, Mark
from .config import GameConfig
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker, GameStatus, GameResult


@dataclass(frozen=True)
class Move:
    """
    A move in the game.
    """
    player: Mark            # Who made the move
    row: int                # Row (0-2)
    col: int                # Column (0-2)
    move_number: int        # Which move this is in the game (0-8)


@dataclass
class GameState:
    """
    One TicTacToe session.

    Lifecycle: NOT_STARTED -> IN_PROGRESS -> WIN or DRAW.
    start() (or reset()) begins a session; every accepted move is
    re-evaluated, and WIN / DRAW are final until the next reset().
    """

    board: Board = field(default_factory=Board)
    current_player: Mark = Mark(GameConfig.FIRST_PLAYER)
    status: GameStatus = GameStatus.NOT_STARTED
    winner: Optional[Mark] = None
    moves: List[Move] = field(default_factory=list)

    validator: MoveValidator = field(default_factory=MoveValidator, repr=False)
    win_checker: WinChecker = field(default_factory=WinChecker, repr=False)

    def start(self):
        """Clear the board and hand the first move to X."""
        self.board.reset()
        self.current_player = Mark(GameConfig.FIRST_PLAYER)
        self.status = GameStatus.IN_PROGRESS
        self.winner = None
        self.moves = []

    def reset(self):
        """Throw away the current session and start a new one."""
        self.start()

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def result(self) -> GameResult:
        """The current outcome, derived from status and winner."""
        return GameResult(self.status, winner=self.winner)

    def make_move(self, row: int, col: int) -> ValidationResult:
        """
        Play the current player's mark at (row, col).

        Args:
            row: Row index (0-2).
            col: Column index (0-2).

        Returns:
            ValidationResult. On rejection nothing changes and the same
            player is still to move.
        """
        validation = self.validator.validate_move(self.board, row, col, self.status)
        if not validation.is_valid:
            return validation

        player = self.current_player
        self.board.apply_move(row, col, player)
        self.moves.append(Move(
            player=player,
            row=row,
            col=col,
            move_number=len(self.moves)
        ))

        outcome = self.win_checker.evaluate(self.board, player)
        self.status = outcome.status
        self.winner = outcome.winner

        # The winner stays as current_player so callers can announce them
        if self.status == GameStatus.IN_PROGRESS:
            self.current_player = player.opposite()

        return validation

    def get_winning_line(self):
        """The line the winner completed, or None."""
        if self.winner is None:
            return None
        return self.win_checker.get_winning_line(self.board, self.winner)
