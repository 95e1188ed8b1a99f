"""Scripted console sessions through run_game() and main()."""

import pytest

from mnk import config
from mnk import main as main_mod
from mnk.game.controller import run_game
from mnk.game.state import ONGOING, new_game
from mnk.ui.colors import FG_RED, FG_YELLOW, RESET, REVERSE, c, mark
from mnk.ui.render import board_lines


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


def scripted(lines):
    it = iter(lines)

    def read(prompt):
        try:
            return next(it)
        except StopIteration:
            raise EOFError from None

    return read


def test_board_lines_empty():
    lines = board_lines(new_game(2, 3, 3).grid)
    assert lines == [
        "  0   1   2 ",
        " --- --- ---",
        " |   |   |   | 0",
        " --- --- ---",
        " |   |   |   | 1",
        " --- --- ---",
    ]


def test_board_lines_marks():
    state = new_game(2, 2, 2)
    state.play(0, 1)
    state.play(1, 0)
    lines = board_lines(state.grid)
    assert lines[2] == " |   | X | 0"
    assert lines[4] == " | O |   | 1"


def test_win_session(capsys):
    state = new_game(3, 3, 3)
    outcome = run_game(state, scripted(["0,0", "1,0", "0,1", "1,1", "0,2", "q"]))

    assert outcome.winner == "X"
    out = capsys.readouterr().out
    assert "Congrats! Player X has won!" in out
    assert "Game quit." in out


def test_bad_input_reprompts(capsys):
    state = new_game(3, 3, 3)
    outcome = run_game(state, scripted(["hello", "5,5", "undo", "1,1", "1,1"]))

    assert outcome == ONGOING
    assert state.move_count == 1
    out = capsys.readouterr().out
    assert "Please input in format of" in out
    assert "Illegal input (5, 5)" in out
    assert "Nothing to undo." in out
    assert "Cell (1, 1) is not empty." in out


def test_finished_game_accepts_undo():
    state = new_game(1, 2, 2)
    outcome = run_game(state, scripted(["0,0", "0,1", "0,0", "undo", "undo"]))

    assert outcome == ONGOING
    assert state.move_count == 0
    assert state.active_player == "X"


def test_draw_session(capsys):
    state = new_game(1, 2, 3)
    outcome = run_game(state, scripted(["0,0", "0,1"]))

    assert outcome.status == "draw"
    assert "Draw." in capsys.readouterr().out


def test_main_rejects_bad_board(capsys):
    with pytest.raises(SystemExit) as exc:
        main_mod.main(["--rows", "0"])
    assert exc.value.code == 2
    assert "at least 1x1" in capsys.readouterr().err


def test_main_builds_game_from_flags(monkeypatch):
    seen = {}

    def fake_run_game(state):
        seen["dims"] = (state.rows, state.cols, state.k)
        return state.outcome

    monkeypatch.setattr(main_mod, "run_game", fake_run_game)
    monkeypatch.setattr(config, "USE_COLOR", True)

    assert main_mod.main(["--rows", "4", "--cols", "5", "-k", "4", "--no-color"]) == 0
    assert seen["dims"] == (4, 5, 4)
    assert config.USE_COLOR is False


def test_colored_marks(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", True)
    assert mark("X") == f"{FG_RED}X{RESET}"
    assert mark("O", highlight=True) == f"{FG_YELLOW}{REVERSE}O{RESET}"
    assert c("plain") == "plain"


def test_winning_run_highlighted(monkeypatch):
    monkeypatch.setattr(config, "USE_COLOR", True)
    state = new_game(1, 3, 3)
    grid = state.grid.with_move(0, 0, "X").with_move(0, 1, "X").with_move(0, 2, "X")
    lines = board_lines(grid, highlight=[(0, 0), (0, 1), (0, 2)])
    assert lines[2].count(REVERSE) == 3
