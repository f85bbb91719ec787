"""Tests for the typer CLI."""

import pytest
from typer.testing import CliRunner

from connectfour.cli.main import app


runner = CliRunner()

NAMES = ["--player1", "Alice", "--player2", "Bob"]


def test_replay_horizontal_win():
    result = runner.invoke(app, ["replay", "0,0,1,1,2,2,3", *NAMES])
    assert result.exit_code == 0, result.output
    assert "Game over at (5, 3) after 7 moves" in result.output
    assert result.output.strip().endswith("Alice won!")


def test_replay_in_progress_uses_default_names():
    result = runner.invoke(app, ["replay", "3"])
    assert result.exit_code == 0, result.output
    assert "In progress: Player 2 to move" in result.output
    assert "| X |" in result.output


def test_replay_default_players_have_distinct_pieces():
    """Both default names start with P, so pieces fall back to X and O."""
    result = runner.invoke(app, ["replay", "0,1"])
    assert result.exit_code == 0, result.output
    assert "| X | O |   |   |   |   |   |" in result.output
    assert "In progress: Player 1 to move" in result.output


def test_replay_reports_ignored_moves():
    result = runner.invoke(app, ["replay", "0,0,0,0,0", "--width", "4", "--height", "4", *NAMES])
    assert result.exit_code == 0, result.output
    assert "Column 0 ignored: column full" in result.output


def test_replay_matrix():
    result = runner.invoke(app, ["replay", "0,1", "--matrix", *NAMES])
    assert result.exit_code == 0, result.output
    assert " 1 -1  0" in result.output


def test_replay_rejects_non_integer_moves():
    result = runner.invoke(app, ["replay", "0,x,1", *NAMES])
    assert result.exit_code == 2


def test_invalid_dimension_exits_with_error():
    result = runner.invoke(app, ["replay", "0", "--width", "3", *NAMES])
    assert result.exit_code == 1
    assert "at least 4x4" in result.output


@pytest.mark.parametrize(
    "args",
    [
        ["--player1", "Sam", "--player2", "Sam"],
        ["--player1", "  ", "--player2", "Bob"],
        [*NAMES, "--color1", "plaid"],
    ],
)
def test_setup_validation(args):
    result = runner.invoke(app, ["replay", "0", *args])
    assert result.exit_code == 2


def test_defaults_from_environment(monkeypatch):
    monkeypatch.setenv("GAME_WIDTH", "4")
    monkeypatch.setenv("GAME_HEIGHT", "4")
    monkeypatch.setenv("PLAYERS_FIRST_NAME", "Ada")
    result = runner.invoke(app, ["replay", "0,1,0,1,0,1,0"])
    assert result.exit_code == 0, result.output
    assert "  0   1   2   3\n" in result.output
    assert "Ada won!" in result.output


def test_play_until_win():
    result = runner.invoke(app, ["play", *NAMES], input="0\n1\n0\n1\n0\n1\n0\nn\n")
    assert result.exit_code == 0, result.output
    assert "Alice won!" in result.output
    assert "Current player: Bob" in result.output


def test_play_handles_bad_input_and_quit():
    result = runner.invoke(app, ["play", *NAMES], input="abc\n9\nq\n")
    assert result.exit_code == 0, result.output
    assert "Enter a number 0-6" in result.output
    assert "Column 9 ignored: column out of range" in result.output
    assert "Game quit." in result.output


def test_play_quits_on_end_of_input():
    result = runner.invoke(app, ["play", *NAMES], input="0\n")
    assert result.exit_code == 0, result.output
    assert "Game quit." in result.output


def test_log_level_option():
    result = runner.invoke(app, ["--log-level", "debug", "replay", "0", *NAMES])
    assert result.exit_code == 0, result.output


def test_play_again_starts_fresh_board():
    moves = "0\n1\n0\n1\n0\n1\n0\n"
    result = runner.invoke(app, ["play", *NAMES], input=moves + "y\n" + moves + "n\n")
    assert result.exit_code == 0, result.output
    assert result.output.count("Alice won!") == 2
    assert result.output.count("CONNECT 4") == 2
    assert "Game quit." not in result.output
