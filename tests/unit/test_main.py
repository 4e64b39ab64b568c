"""
Unit tests for the command line front end.
"""
import argparse
import io
import logging
import sys

import pytest
from minefield import CellState

import main


class TestExecute:
    """Test single command lines."""

    @pytest.fixture
    def session(self, make_session):
        return make_session(".*.", "*..")

    def test_reveal_command(self, session) -> None:
        """'r COL ROW' reveals a cell without deciding the game."""
        assert main.execute(session, "r 0 0") == ""
        assert session.cell_view(0, 0).state == CellState.REVEALED
        assert session.cell_view(2, 0).state == CellState.COVERED

    def test_flag_command(self, session) -> None:
        """'f COL ROW' toggles a flag."""
        main.execute(session, "f 2 1")
        assert session.cell_view(2, 1).state == CellState.FLAGGED

    def test_loss_message(self, session) -> None:
        """Hitting a mine is reported."""
        assert "LOST" in main.execute(session, "r 1 0")

    def test_win_message(self, make_session) -> None:
        """Clearing the board is reported."""
        assert "WIN" in main.execute(make_session(".*"), "R 0 0")

    def test_new_game_command(self, session) -> None:
        """'n' starts a new game."""
        main.execute(session, "f 0 0")
        assert main.execute(session, "n") == "New game"
        assert session.board.count_states(CellState.COVERED) == 6

    def test_quit_command(self, session) -> None:
        """'q' ends the loop."""
        assert main.execute(session, "q") is None

    @pytest.mark.parametrize("line", ["x", "r 1", "r a b", "f 1 2 3"])
    def test_bad_input_shows_help(self, session, line: str) -> None:
        """Malformed commands show the help text."""
        assert main.execute(session, line) == main.HELP_TEXT

    def test_off_board_is_rejected(self, session) -> None:
        """Off-board coordinates never reach the engine."""
        assert "off the board" in main.execute(session, "r 5 0")

    def test_blank_line_is_ignored(self, session) -> None:
        """Empty input does nothing."""
        assert main.execute(session, "   ") == ""


class TestPlay:
    """Test the interactive loop."""

    def test_play_until_quit(self, capsys) -> None:
        """The loop renders the board and stops on 'q'."""
        args = argparse.Namespace(seed=5)
        main.play(args, stdin=io.StringIO("f 0 0\nq\nf 1 1\n"))
        output = capsys.readouterr().out
        assert output.startswith(main.HELP_TEXT)
        assert "F . ." in output
        assert output.count("\n. . .") >= 1


class TestDemo:
    """Test the random agent demo."""

    def test_demo_reports_final_score(self, capsys) -> None:
        """One game runs to a result and a final tally."""
        args = argparse.Namespace(games=1, max_steps=50, delay=0.0, seed=1)
        main.demo(args)
        output = capsys.readouterr().out
        assert "=== Game 1/1 |" in output
        assert "Result: " in output
        lines = output.strip().split("\n")
        assert lines[-1].startswith("=== Final: ")
        assert lines[-1].endswith("/1 wins ===")


class TestMain:
    """Test argument parsing and dispatch."""

    @pytest.fixture
    def log_calls(self, monkeypatch) -> list:
        """Record logging setup instead of touching the root logger."""
        calls = []
        monkeypatch.setattr(
            main.logging, "basicConfig", lambda **kwargs: calls.append(kwargs)
        )
        return calls

    def test_no_command_prints_help(
        self, monkeypatch, capsys, log_calls
    ) -> None:
        """Without a subcommand the usage is shown."""
        monkeypatch.setattr(sys, "argv", ["main.py"])
        main.main()
        output = capsys.readouterr().out
        assert "usage:" in output
        assert "play" in output and "demo" in output
        assert log_calls[0]["level"] == logging.WARNING

    def test_verbose_demo(self, monkeypatch, capsys, log_calls) -> None:
        """--verbose enables debug logging and demo runs."""
        monkeypatch.setattr(
            sys,
            "argv",
            ["main.py", "--verbose", "demo", "--games", "2",
             "--max-steps", "20", "--seed", "3"],
        )
        main.main()
        output = capsys.readouterr().out
        assert "=== Game 2/2 |" in output
        assert "/2 wins ===" in output
        assert log_calls[0]["level"] == logging.DEBUG

    def test_play_reads_stdin(self, monkeypatch, capsys, log_calls) -> None:
        """The play subcommand reads commands from standard input."""
        monkeypatch.setattr(sys, "argv", ["main.py", "play", "--seed", "4"])
        monkeypatch.setattr(sys, "stdin", io.StringIO("f 1 0\nq\n"))
        main.main()
        output = capsys.readouterr().out
        assert output.startswith(main.HELP_TEXT)
        assert ". F ." in output
