"""
TicTacToe console UI.
Everything the player sees and types goes through here.

Shows:
- The board (cells separated by '|', rows by '-----')
- A prompt naming the player to move
- Why a move was rejected
- The final result
"""

import sys
from typing import Optional, Tuple, TextIO

from logic.board import Board, Mark
from logic.config import GameConfig
from logic.game_state import GameState
from logic.move_validator import ValidationResult
from logic.win_checker import GameStatus


def render_board(board: Board) -> str:
    """
    Render the grid as text.

    Example:
        X|O|X
        -----
         |X|
        -----
        O| |
    """
    rows = [GameConfig.CELL_SEPARATOR.join(row) for row in board.to_rows()]
    return ("\n" + GameConfig.ROW_DIVIDER + "\n").join(rows)


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse "row col" typed by the player.

    Raises:
        ValueError: if the text is not exactly two integers.
    """
    parts = text.split()
    if len(parts) != 2:
        raise ValueError("Please enter exactly two numbers: row and column.")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise ValueError("Row and column must be whole numbers.") from None


def _is_integer(token: str) -> bool:
    try:
        int(token)
    except ValueError:
        return False
    return True


class ConsoleUI:
    """
    Text front end for a game.

    Streams are injectable so the whole game can be driven from a string.
    """

    def __init__(self, input_stream: Optional[TextIO] = None, output_stream: Optional[TextIO] = None):
        self.input_stream = input_stream or sys.stdin
        self.output_stream = output_stream or sys.stdout

    def show(self, text: str = ""):
        print(text, file=self.output_stream)

    def show_welcome(self):
        self.show(GameConfig.WELCOME_MESSAGE)

    def show_board(self, board: Board):
        self.show()
        self.show(render_board(board))
        self.show()

    def read_move(self, player: Mark) -> Tuple[int, int]:
        """
        Prompt player until they type two integers.

        The two numbers may be split across lines ("1", Enter, "2", Enter)
        the same way they may share one. A non-number, or more than two
        numbers entered together, is rejected and the player is asked again.

        Returns:
            (row, col) as typed. Range and occupancy are not checked here.

        Raises:
            EOFError: if the input runs out.
        """
        tokens = []
        prompt = True
        while True:
            if prompt:
                self.output_stream.write(GameConfig.PROMPT_TEMPLATE.format(mark=player.value))
                self.output_stream.flush()
                prompt = False

            line = self.input_stream.readline()
            if not line:
                raise EOFError("No more input")

            tokens.extend(line.split())
            # Wait for the column on the next line
            if len(tokens) < 2 and all(_is_integer(token) for token in tokens):
                continue

            try:
                return parse_move(" ".join(tokens))
            except ValueError as e:
                self.show(f"{GameConfig.INVALID_MOVE_MESSAGE} {e}")
                tokens = []
                prompt = True

    def show_invalid_move(self, validation: ValidationResult):
        self.show(GameConfig.INVALID_MOVE_MESSAGE)
        if validation.error_message:
            self.show(validation.error_message)

    def show_result(self, game_state: GameState):
        """Print the final board and who won."""
        self.show_board(game_state.board)

        if game_state.status == GameStatus.WIN:
            self.show(GameConfig.WIN_TEMPLATE.format(mark=game_state.winner.value))
        elif game_state.status == GameStatus.DRAW:
            self.show(GameConfig.DRAW_MESSAGE)
