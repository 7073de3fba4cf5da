"""
Tests for the command-line front end
"""

import pytest

from dropfour.interfaces.cli import SimpleCLI, main, describe_state, parse_moves
from dropfour.game.state import GameState
from dropfour.utils import Player


def feed_input(monkeypatch, answers):
    """Make input() return the given answers in order, then end of file"""
    answers = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(answers)
        except StopIteration:
            raise EOFError
    monkeypatch.setattr("builtins.input", fake_input)


class TestHelpers:

    def test_describe_turn(self):
        assert describe_state(GameState.initial()) == "Player 1's turn (X)"

    def test_describe_win(self):
        state = GameState(current_player=Player.TWO, winner=Player.TWO, game_over=True)
        assert describe_state(state) == "Player 2 (O) wins!"

    def test_describe_draw(self):
        assert describe_state(GameState(game_over=True)) == "It's a draw!"

    def test_parse_moves(self):
        assert parse_moves("3, 3,4,") == [3, 3, 4]

    def test_parse_moves_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_moves("3,x")


class TestReplay:

    def test_replay_to_a_win(self, capsys):
        assert main(["replay", "--moves", "3,0,3,0,3,0,3"]) == 0
        out = capsys.readouterr().out
        assert "Player 1 (X) wins!" in out

    def test_replay_reports_ignored_moves(self, capsys):
        assert main(["replay", "--moves", "0,0,0,0,0,0,0,9"]) == 0
        out = capsys.readouterr().out
        assert "Move 7 (column 0) ignored: That column is full." in out
        assert "Move 8 (column 9) ignored" in out
        assert "Player 1's turn (X)" in out

    def test_replay_bad_moves(self, capsys):
        assert main(["replay", "--moves", "1,two"]) == 1
        assert "Error parsing moves" in capsys.readouterr().out


class TestPlay:

    def test_two_players_until_win(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["3", "0", "3", "0", "3", "0", "3"])
        assert main(["play"]) == 0
        out = capsys.readouterr().out
        assert "Player 1 (X) wins!" in out
        assert "Game over!" in out

    def test_bad_input_and_full_column(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["abc", "9"] + ["1"] * 7 + ["q"])
        cli = SimpleCLI()
        assert cli.run(["play"]) == 0
        out = capsys.readouterr().out
        assert "Invalid input" in out
        assert "Column must be between 0 and 6." in out
        assert "That column is full." in out
        assert "Quitting game." in out
        assert cli.engine.state.piece_count() == 6

    def test_restart(self, monkeypatch, capsys):
        feed_input(monkeypatch, ["2", "2", "r", "q"])
        cli = SimpleCLI()
        cli.run(["play"])
        assert "Game restarted." in capsys.readouterr().out
        assert cli.engine.state == GameState.initial()

    def test_end_of_input_quits(self, monkeypatch, capsys):
        feed_input(monkeypatch, [])
        assert main(["play"]) == 0
        assert "Quitting game." in capsys.readouterr().out


class TestBenchmark:

    def test_benchmark_runs(self, capsys):
        assert main(["benchmark", "--iterations", "5", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Played 5 games" in out
        assert "draws:" in out

    def test_benchmark_rejects_zero(self, capsys):
        assert main(["benchmark", "--iterations", "0"]) == 1


def test_no_command(capsys):
    assert main([]) == 1
    assert "Please specify a command" in capsys.readouterr().out


def test_debug_flags(tmp_path):
    from dropfour.debug import debug, DebugLevel
    log_file = tmp_path / "dropfour.log"

    main(["--debug", "--log-file", str(log_file), "replay", "--moves", "3"])

    assert debug.level == DebugLevel.DEBUG
    assert "[engine]" in log_file.read_text()
