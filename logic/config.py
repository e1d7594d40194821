"""
Game configuration for TicTacToe.
All the fixed settings for the board and the console display.
"""


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3; these values are not meant to be changed at runtime.
    """

    # ==================== BOARD SETTINGS ====================
    BOARD_SIZE = 3

    # Character stored in a cell nobody has played yet
    EMPTY_CELL = " "

    # Player marks
    PLAYER_MARKS = ("X", "O")
    FIRST_PLAYER = "X"  # X always opens a new game

    # ==================== DISPLAY SETTINGS ====================
    CELL_SEPARATOR = "|"
    ROW_DIVIDER = "-----"

    WELCOME_MESSAGE = "Welcome to Tic-Tac-Toe!"
    PROMPT_TEMPLATE = "Player {mark}, enter your move (row and column, e.g., 1 2): "
    INVALID_MOVE_MESSAGE = "Invalid move. Try again."
    WIN_TEMPLATE = "Player {mark} wins!"
    DRAW_MESSAGE = "It's a draw!"
