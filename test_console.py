"""
Tests for the console front end and the full game loop.
Run with pytest, or directly: python test_console.py
"""

import io
import sys

import pytest

import main
from logic.board import Board, Mark
from logic.win_checker import GameStatus
from ui import ConsoleUI, render_board, parse_move


def play(script):
    """Run a whole game on scripted input; return (game_state, output)."""
    output = io.StringIO()
    ui = ConsoleUI(input_stream=io.StringIO(script), output_stream=output)
    game = main.TicTacToeGame(ui)
    state = game.start()
    return state, output.getvalue()


# ==================== RENDERING / PARSING ====================

def test_render_empty_board():
    assert render_board(Board()) == " | | \n-----\n | | \n-----\n | | "


def test_render_board_with_marks():
    board = Board()
    board.apply_move(0, 0, Mark.X)
    board.apply_move(1, 1, Mark.O)
    board.apply_move(2, 2, Mark.X)
    assert render_board(board).splitlines() == [
        "X| | ",
        "-----",
        " |O| ",
        "-----",
        " | |X",
    ]


def test_parse_move():
    assert parse_move("1 2\n") == (1, 2)
    assert parse_move("  0\t0 ") == (0, 0)
    # Range is the board's job, not the parser's
    assert parse_move("-1 7") == (-1, 7)


@pytest.mark.parametrize("text", ["", "1", "1 2 3", "a b", "1 x", "1.5 2"])
def test_parse_move_rejects_malformed_input(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_read_move_reprompts_on_garbage():
    output = io.StringIO()
    ui = ConsoleUI(input_stream=io.StringIO("hello there\n1 2 3\n2 1\n"), output_stream=output)

    assert ui.read_move(Mark.O) == (2, 1)

    text = output.getvalue()
    assert text.count("Player O, enter your move (row and column, e.g., 1 2): ") == 3
    assert text.count("Invalid move. Try again.") == 2
    assert "exactly two numbers" in text
    assert "whole numbers" in text


def test_read_move_takes_numbers_split_across_lines():
    output = io.StringIO()
    ui = ConsoleUI(input_stream=io.StringIO("1\n2\n0 0\n"), output_stream=output)

    assert ui.read_move(Mark.X) == (1, 2)

    text = output.getvalue()
    assert text.count("enter your move") == 1
    assert "Invalid move" not in text
    # The next move starts fresh on the following line
    assert ui.read_move(Mark.O) == (0, 0)


def test_read_move_skips_blank_lines():
    ui = ConsoleUI(input_stream=io.StringIO("\n2\n\n   \n0\n"), output_stream=io.StringIO())
    assert ui.read_move(Mark.X) == (2, 0)


def test_read_move_rejects_word_after_split_number():
    output = io.StringIO()
    ui = ConsoleUI(input_stream=io.StringIO("1\nabc\n1 1\n"), output_stream=output)

    assert ui.read_move(Mark.X) == (1, 1)
    assert output.getvalue().count("Invalid move. Try again.") == 1


def test_read_move_raises_on_eof():
    ui = ConsoleUI(input_stream=io.StringIO(""), output_stream=io.StringIO())
    with pytest.raises(EOFError):
        ui.read_move(Mark.X)


# ==================== FULL GAMES ====================

def test_x_wins_after_fifth_move():
    state, output = play("0 0\n1 0\n0 1\n1 1\n0 2\n")

    assert state.status == GameStatus.WIN
    assert state.winner == Mark.X
    assert len(state.moves) == 5
    assert output.startswith("Welcome to Tic-Tac-Toe!\n")
    assert output.rstrip("\n").endswith("Player X wins!")
    assert "X|X|X\n-----\nO|O| \n-----\n | | " in output
    assert "It's a draw!" not in output


def test_input_after_win_is_ignored():
    state, output = play("0 0\n1 0\n0 1\n1 1\n0 2\n2 2\n")
    assert state.board.get_cell(2, 2) == Mark.EMPTY
    assert output.count("enter your move") == 5


def test_draw_game():
    moves = ["0 0", "0 1", "0 2", "1 1", "1 0", "1 2", "2 1", "2 0", "2 2"]
    state, output = play("\n".join(moves) + "\n")

    assert state.status == GameStatus.DRAW
    assert output.rstrip("\n").endswith("It's a draw!")
    assert "wins!" not in output


def test_invalid_moves_reprompt_same_player():
    script = "\n".join([
        "0 0",      # X
        "0 0",      # O, occupied
        "3 1",      # O, out of range
        "one two",  # O, not numbers
        "1 1",      # O
        "0 1", "2 2", "0 2",
    ]) + "\n"
    state, output = play(script)

    assert state.winner == Mark.X
    assert state.moves[1].player == Mark.O
    assert (state.moves[1].row, state.moves[1].col) == (1, 1)
    assert output.count("Invalid move. Try again.") == 3
    assert "already occupied by X" in output
    assert "Invalid position (3, 1)" in output
    assert output.count("Player O, enter your move") == 5


def test_o_can_win():
    state, output = play("0 0\n0 2\n1 0\n1 1\n2 2\n2 0\n")
    assert state.winner == Mark.O
    assert output.rstrip("\n").endswith("Player O wins!")


def test_game_with_one_number_per_line():
    state, output = play("0\n0\n1\n0\n0\n1\n1\n1\n0\n2\n")
    assert state.winner == Mark.X
    assert output.count("enter your move") == 5
    assert "Invalid move" not in output


def test_game_raises_when_input_runs_out():
    with pytest.raises(EOFError):
        play("0 0\n1 1\n")


# ==================== ENTRY POINT ====================

def test_main_exit_codes(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0 0\n1 0\n0 1\n1 1\n0 2\n"))
    assert main.main() == 0
    assert "Player X wins!" in capsys.readouterr().out

    monkeypatch.setattr(sys, "stdin", io.StringIO("0 0\n"))
    assert main.main() == 1
    assert "interrupted" in capsys.readouterr().out


def run_all_tests():
    """Run the tests that need no pytest fixtures."""
    print("=" * 60)
    print("   TicTacToe - Console Tests")
    print("=" * 60)

    tests = [
        test_render_empty_board,
        test_render_board_with_marks,
        test_parse_move,
        test_read_move_reprompts_on_garbage,
        test_read_move_takes_numbers_split_across_lines,
        test_read_move_skips_blank_lines,
        test_read_move_rejects_word_after_split_number,
        test_x_wins_after_fifth_move,
        test_input_after_win_is_ignored,
        test_draw_game,
        test_invalid_moves_reprompt_same_player,
        test_o_can_win,
        test_game_with_one_number_per_line,
    ]

    failed = 0
    for test in tests:
        try:
            test()
            print(f"  ✓ {test.__name__}")
        except AssertionError as e:
            failed += 1
            print(f"  ✗ {test.__name__}: {e}")

    print("=" * 60)
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(run_all_tests())
