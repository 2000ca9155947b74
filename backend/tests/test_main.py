"""
Tests for main.py - the headless tick driver and CLI.
"""

import json
import os
import random
import sys
from unittest.mock import Mock

import pytest

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from gridsnake import main
from gridsnake.domain.position import Direction
from gridsnake.main import run_simulation
from gridsnake.players import GreedyPlayer, RandomPlayer
from gridsnake.players.base import Player


class AlwaysUp(Player):
    name = "always-up"

    def get_move(self, game_state):
        return Direction.UP


class TestRunSimulation:
    """Tests for run_simulation."""

    def test_stops_at_max_ticks(self):
        """An endless open-board loop stops at the tick cap."""
        result = run_simulation(player=AlwaysUp(), max_ticks=25, rng=random.Random(0))
        assert result["ticks"] == 25
        assert result["is_game_over"] is False
        assert result["length"] == 3

    def test_summary_keys(self):
        """The summary carries the final game facts."""
        result = run_simulation(max_ticks=5, rng=random.Random(0))
        assert set(result) == {"score", "level", "ticks", "length", "is_game_over", "speed"}

    def test_greedy_player_scores(self):
        """The greedy policy reaches the first food on level 1."""
        result = run_simulation(player=GreedyPlayer(), max_ticks=40, rng=random.Random(3))
        assert result["score"] >= 1
        assert result["length"] > 3

    def test_stops_on_game_over(self):
        """A game over ends the run before the cap."""
        player = Mock(spec=Player)
        player.name = "mock"
        player.get_move.return_value = Direction.RIGHT
        result = run_simulation(player=player, level=2, max_ticks=100, rng=random.Random(0))
        # Level 2 has a barrier at x=10 on the starting row
        assert result["is_game_over"] is True
        assert result["ticks"] == 5

    def test_realtime_sleeps_current_speed(self):
        """Realtime mode sleeps the state's tick interval."""
        sleep = Mock()
        run_simulation(player=AlwaysUp(), max_ticks=3, realtime=True, sleep=sleep)
        assert sleep.call_count == 3
        sleep.assert_called_with(0.15)

    def test_show_board_prints(self, capsys):
        """show_board prints one board per tick."""
        run_simulation(player=AlwaysUp(), max_ticks=2, show_board=True)
        out = capsys.readouterr().out
        assert out.count("H") == 2


class TestMain:
    """Tests for the CLI entry point."""

    def test_main_prints_summary(self, monkeypatch, capsys):
        """main runs a game and prints the JSON summary."""
        monkeypatch.delenv("SNAKE_MAX_TICKS", raising=False)
        result = main.main(["--player", "random", "--max-ticks", "10", "--seed", "4"])
        out = capsys.readouterr().out
        assert "Simulation Result Summary" in out
        payload = json.loads(out.split("Simulation Result Summary:")[1])
        assert payload == result
        assert result["ticks"] <= 10

    def test_main_uses_env_defaults(self, monkeypatch):
        """SNAKE_* variables supply defaults for missing flags."""
        monkeypatch.setenv("SNAKE_MAX_TICKS", "3")
        monkeypatch.setenv("SNAKE_PLAYER", "greedy")
        captured = {}

        def fake_run(**kwargs):
            captured.update(kwargs)
            return {"ticks": 0}

        monkeypatch.setattr(main, "run_simulation", fake_run)
        main.main([])
        assert captured["max_ticks"] == 3
        assert isinstance(captured["player"], GreedyPlayer)

    def test_main_random_player_gets_seeded_rng(self, monkeypatch):
        """--seed feeds the same random source to the player and the engine."""
        captured = {}

        def fake_run(**kwargs):
            captured.update(kwargs)
            return {}

        monkeypatch.setattr(main, "run_simulation", fake_run)
        main.main(["--player", "random", "--seed", "9"])
        assert isinstance(captured["player"], RandomPlayer)
        assert captured["player"].rng is captured["rng"]

    def test_main_rejects_level_zero(self):
        """--level below 1 is a usage error."""
        with pytest.raises(SystemExit):
            main.main(["--level", "0"])

    def test_main_rejects_unknown_player_from_env(self, monkeypatch, capsys):
        """A bad SNAKE_PLAYER is a usage error, not a traceback."""
        monkeypatch.setenv("SNAKE_PLAYER", "llm")
        monkeypatch.setattr(main, "run_simulation", Mock())
        with pytest.raises(SystemExit) as excinfo:
            main.main([])
        assert excinfo.value.code == 2
        assert "Unknown player 'llm'" in capsys.readouterr().err
        main.run_simulation.assert_not_called()

    @pytest.mark.parametrize("argv,env", [
        (["--log-level", "loud"], None),
        ([], "verbose"),
    ])
    def test_main_rejects_unknown_log_level(self, monkeypatch, capsys, argv, env):
        """Unknown log levels from flags or SNAKE_LOG_LEVEL are usage errors."""
        if env is not None:
            monkeypatch.setenv("SNAKE_LOG_LEVEL", env)
        monkeypatch.setattr(main, "run_simulation", Mock())
        with pytest.raises(SystemExit) as excinfo:
            main.main(argv)
        assert excinfo.value.code == 2
        assert "Unknown log level" in capsys.readouterr().err
        main.run_simulation.assert_not_called()


class TestPackageLayout:
    """Tests for the installed module names."""

    def test_modules_live_under_one_package(self):
        """Every module is namespaced under gridsnake."""
        import gridsnake.config
        import gridsnake.domain
        import gridsnake.engine
        import gridsnake.players

        for module in (main, gridsnake.config, gridsnake.domain, gridsnake.engine, gridsnake.players):
            assert module.__name__.startswith("gridsnake.")
