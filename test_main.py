"""
Tests for the console game loop in main.py.
Games are driven by a scripted list of input lines.
"""

import builtins

import pytest

from main import ConsoleGame, main
from tictactoe.marks import Mark
from tictactoe.outcome import Draw, InProgress, Winner

HEADER = "  0 1 2"


def scripted(*lines):
    """Input function returning each line in turn, then EOF."""
    remaining = iter(lines)

    def read_line():
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError
    return read_line


def test_row_win_game(capsys):
    game = ConsoleGame(
        first_player=Mark.X,
        input_func=scripted("0,0", "1,0", "0,1", "1,1", "0,2"),
    )

    outcome = game.start()

    assert outcome == Winner(Mark.X)
    lines = capsys.readouterr().out.splitlines()
    assert lines[-5:] == [
        HEADER,
        "0 X X X ",
        "1 O O . ",
        "2 . . . ",
        "Player X wins!",
    ]


def test_draw_game(capsys):
    moves = ["0,0", "0,2", "0,1", "1,0", "1,2", "1,1", "2,0", "2,1", "2,2"]
    game = ConsoleGame(first_player=Mark.X, input_func=scripted(*moves))

    assert game.start() == Draw()
    assert capsys.readouterr().out.endswith("Game ends in draw\n")
    assert game.board.get_empty_cells() == []


def test_o_moves_first_by_default(capsys):
    game = ConsoleGame(input_func=scripted("1,1"))

    with pytest.raises(EOFError):
        game.start()

    out = capsys.readouterr().out
    assert out.startswith(
        HEADER + "\n"
        "0 . . . \n"
        "1 . . . \n"
        "2 . . . \n"
        'Player O. Make your move by entering the "row,col" of the square you want to play\n'
    )
    assert game.board.get(1, 1) is Mark.O
    assert game.current_player is Mark.X


def test_bad_input_does_not_consume_turn(capsys):
    game = ConsoleGame(
        first_player=Mark.X,
        input_func=scripted("a,b", "1,2,3", "0,0", "0,0", "5,1", "1,1"),
    )

    with pytest.raises(EOFError):
        game.start()

    out = capsys.readouterr().out
    assert "Invalid number\n" in out
    assert "Invalid number of inputs\n" in out
    assert "This square is already filled\n" in out
    assert "Invalid coordinates\n" in out

    # Parse errors re-read without re-prompting; rejected moves re-prompt
    assert out.count("Player X. Make") == 2
    assert out.count("Player O. Make") == 3
    assert out.count(HEADER) == 5

    assert game.board.get(0, 0) is Mark.X
    assert game.board.get(1, 1) is Mark.O
    assert len(game.board.get_empty_cells()) == 7
    assert game.current_player is Mark.X


def test_huge_number_is_reported_and_read_again(capsys):
    game = ConsoleGame(
        first_player=Mark.X,
        input_func=scripted("1" * 5000 + ",1", "99999999999999999999999,0", "1,1"),
    )

    with pytest.raises(EOFError):
        game.start()

    out = capsys.readouterr().out
    assert out.count("Invalid number\n") == 2
    assert "Invalid coordinates" not in out
    assert out.count("Player X. Make") == 1
    assert game.board.get(1, 1) is Mark.X
    assert game.current_player is Mark.O


def test_game_stops_when_won():
    # Extra lines after the winning move are never read
    game = ConsoleGame(
        first_player=Mark.O,
        input_func=scripted("0,0", "1,0", "1,1", "2,0", "2,2", "9,9"),
    )
    assert game.start() == Winner(Mark.O)


def test_in_progress_result_is_fatal():
    game = ConsoleGame()
    game.outcome = InProgress()
    with pytest.raises(AssertionError):
        game._show_game_result()


def test_empty_first_player_is_rejected():
    with pytest.raises(ValueError):
        ConsoleGame(first_player=Mark.EMPTY)


def test_main_plays_a_game(monkeypatch, capsys):
    monkeypatch.setattr(
        builtins, "input", scripted("0,0", "1,0", "0,1", "1,1", "0,2")
    )

    assert main(["--first", "x"]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "Player X wins!"


def test_main_reports_closed_input(monkeypatch, capsys):
    monkeypatch.setattr(builtins, "input", scripted("1,1"))

    assert main([]) == 1
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["Game interrupted by user.", "Goodbye!"]


def test_main_rejects_unknown_first_player(capsys):
    with pytest.raises(SystemExit) as exc_info:
        main(["--first", "Z"])
    assert exc_info.value.code == 2
