"""
Main script for console TicTacToe.

This script ties together:
- Logic (board, move validation, win checking, session state)
- UI (console rendering and input)

Two players share one terminal and take turns typing "row col".
"""

import sys
from typing import Optional

from logic.game_state import GameState
from ui import ConsoleUI


class TicTacToeGame:
    """
    Runs one game session in the console.

    Game flow:
    1. Show the board
    2. Ask the current player for a move, re-asking until it is accepted
    3. Stop on a win or a full board, otherwise pass the turn
    """

    def __init__(self, ui: Optional[ConsoleUI] = None):
        self.ui = ui or ConsoleUI()
        self.game_state = GameState()

    def start(self) -> GameState:
        """
        Play a whole game.

        Returns:
            The finished game state.

        Raises:
            EOFError: if input runs out before the game ends.
        """
        self.ui.show_welcome()
        self.game_state.start()

        while not self.game_state.is_game_over:
            self.ui.show_board(self.game_state.board)
            self._play_turn()

        self.ui.show_result(self.game_state)
        return self.game_state

    def _play_turn(self):
        """Keep asking the current player until one move is accepted."""
        while True:
            row, col = self.ui.read_move(self.game_state.current_player)
            validation = self.game_state.make_move(row, col)
            if validation.is_valid:
                return
            self.ui.show_invalid_move(validation)


def main() -> int:
    """Main entry point."""
    game = TicTacToeGame()

    try:
        game.start()
    except (EOFError, KeyboardInterrupt):
        print("\n\nGame interrupted before it finished.")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
