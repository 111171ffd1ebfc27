"""
Tests for the command-line interface.
"""

import pytest

from shellgame.cli import main


class TestSimulate:

    def test_simulate_prints_outcome(self, capsys):
        assert main(["--seed", "3", "simulate", "--guess", "a"]) == 0

        out = capsys.readouterr().out
        assert "Guessed place a:" in out
        assert ("win" in out) or ("lose" in out)

    def test_no_swaps_keeps_ball_in_middle(self, capsys):
        main(["--min-swaps", "0", "--max-swaps", "0", "simulate", "--guess", "b"])

        out = capsys.readouterr().out
        assert "Swaps: 0" in out
        assert "Ticks: 0" in out
        assert "Guessed place b: win" in out

    def test_single_swap_moves_ball(self, capsys):
        main(["--min-swaps", "1", "--max-swaps", "1", "--seed", "5", "simulate", "--show"])

        out = capsys.readouterr().out
        assert "Swaps: 1" in out
        assert "Shuffling..." in out

    def test_invalid_config_exits(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--min-swaps", "5", "--max-swaps", "2", "simulate"])
        assert exc.value.code == 2


class TestHelp:

    def test_no_command_prints_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1
        assert "shellgame" in capsys.readouterr().out
