"""
Tests for GameConfig validation and environment loading.
"""

import pytest
from pydantic import ValidationError

from shellgame.config import GameConfig


class TestGameConfig:

    def test_defaults(self):
        config = GameConfig()

        assert (config.min_swaps, config.max_swaps) == (3, 6)
        assert config.speed == 5.0
        assert config.epsilon == 1.0
        assert config.seed is None

    def test_min_above_max_rejected(self):
        with pytest.raises(ValidationError):
            GameConfig(min_swaps=7, max_swaps=6)

    @pytest.mark.parametrize("field,value", [
        ("speed", 0),
        ("epsilon", 1.5),
        ("epsilon", 0),
        ("min_swaps", -1),
        ("max_reactions", 0),
    ])
    def test_out_of_range_rejected(self, field, value):
        with pytest.raises(ValidationError):
            GameConfig(**{field: value})

    def test_frozen(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.speed = 1.0


class TestFromEnv:

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("SHELLGAME_MIN_SWAPS", "1")
        monkeypatch.setenv("SHELLGAME_MAX_SWAPS", "10")
        monkeypatch.setenv("SHELLGAME_SPEED", "2.5")
        monkeypatch.setenv("SHELLGAME_SEED", "42")

        config = GameConfig.from_env()

        assert (config.min_swaps, config.max_swaps) == (1, 10)
        assert config.speed == 2.5
        assert config.seed == 42

    def test_overrides_win(self, monkeypatch):
        monkeypatch.setenv("SHELLGAME_MAX_SWAPS", "10")

        config = GameConfig.from_env(max_swaps=4, seed=None)

        assert config.max_swaps == 4
        assert config.seed is None

    def test_empty_environment_gives_defaults(self):
        assert GameConfig.from_env() == GameConfig()

    def test_invalid_environment_rejected(self, monkeypatch):
        monkeypatch.setenv("SHELLGAME_SPEED", "fast")
        with pytest.raises(ValidationError):
            GameConfig.from_env()
