"""
Unit tests for the command-line entry point.
"""
import argparse
from typing import Callable, Iterable

import pytest
from minefield import BoardConfig
from minefield.cli import main, play


def _reader(lines: Iterable[str]) -> Callable[[str], str]:
    """Fake ``input`` that returns ``lines`` then raises EOFError."""
    pending = iter(lines)

    def read(prompt: str) -> str:
        try:
            return next(pending)
        except StopIteration:
            raise EOFError from None

    return read


class TestPlay:
    """Test the interactive game loop."""

    def test_uncover_on_empty_board_wins(self, capsys: pytest.CaptureFixture) -> None:
        play(argparse.Namespace(seed=0), BoardConfig(3, 3, 0), _reader(["u 1 1"]))
        assert "WIN" in capsys.readouterr().out

    def test_quit_stops_game(self, capsys: pytest.CaptureFixture) -> None:
        play(argparse.Namespace(seed=0), BoardConfig(3, 3, 1), _reader(["q"]))
        out = capsys.readouterr().out
        assert "WIN" not in out
        assert "LOST" not in out

    def test_bad_commands_print_help(self, capsys: pytest.CaptureFixture) -> None:
        play(
            argparse.Namespace(seed=0),
            BoardConfig(3, 3, 1),
            _reader(["", "x 1 1", "u one 1", "u 5 5", "m 0 0"]),
        )
        out = capsys.readouterr().out
        assert out.count("Commands:") == 3
        assert "Coordinates must be within 0-2, 0-2" in out
        assert "F" in out

    def test_end_of_input_stops_game(self, capsys: pytest.CaptureFixture) -> None:
        play(argparse.Namespace(seed=0), BoardConfig(3, 3, 1), _reader([]))
        assert "Mines remaining: 1" in capsys.readouterr().out


class TestMain:
    """Test argument parsing and commands."""

    def test_demo_reports_results(self, capsys: pytest.CaptureFixture) -> None:
        main(["demo", "--games", "2", "--seed", "3"])
        out = capsys.readouterr().out
        assert "Game 1/2" in out
        assert "Game 2/2" in out
        assert "=== Final:" in out

    def test_demo_custom_board(self, capsys: pytest.CaptureFixture) -> None:
        main(["demo", "--games", "1", "--width", "4", "--height", "4", "--mines", "0"])
        assert "1/1 wins" in capsys.readouterr().out

    def test_partial_custom_board_is_rejected(self) -> None:
        with pytest.raises(SystemExit):
            main(["play", "--width", "3"])

    def test_invalid_custom_board_is_rejected(
        self, capsys: pytest.CaptureFixture
    ) -> None:
        with pytest.raises(SystemExit):
            main(["play", "--width", "2", "--height", "2", "--mines", "4"])
        assert "Too many mines" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture) -> None:
        main([])
        assert "usage" in capsys.readouterr().out
