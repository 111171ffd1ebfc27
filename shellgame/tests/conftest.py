"""
Pytest fixtures for Shell Game tests.
"""

import pytest

from shellgame.config import GameConfig
from shellgame.engine_core.state import GameState, initial_state
from shellgame.engine_core.shuffle_planner import ShufflePlanner
from shellgame.session import GameLoop, Session


class FixedPlanner(ShufflePlanner):
    """Planner that always returns the same plan."""

    def __init__(self, shuffles):
        super().__init__()
        self.shuffles = tuple(shuffles)

    def plan(self):
        return self.shuffles


def compose_swaps(shuffles, layout=None):
    """Expected place -> shell id after applying the swaps in order."""
    layout = dict(layout or {"a": 1, "b": 2, "c": 3})
    for first, second in shuffles:
        layout[first], layout[second] = layout[second], layout[first]
    return layout


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep SHELLGAME_* settings from the outer environment out of tests."""
    for name in (
        "SHELLGAME_MIN_SWAPS",
        "SHELLGAME_MAX_SWAPS",
        "SHELLGAME_SPEED",
        "SHELLGAME_EPSILON",
        "SHELLGAME_SEED",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fresh_state() -> GameState:
    """The canonical initial state."""
    return initial_state()


@pytest.fixture
def config() -> GameConfig:
    """A seeded config for reproducible shuffles."""
    return GameConfig(seed=1234)


@pytest.fixture
def session(config) -> Session:
    return Session.create(config)


@pytest.fixture
def loop(session) -> GameLoop:
    return GameLoop(session)


@pytest.fixture
def make_loop():
    """Factory for a loop that shuffles with a fixed plan."""
    def _make(shuffles, **config_values) -> GameLoop:
        session = Session.create(GameConfig(**config_values))
        return GameLoop(session, planner=FixedPlanner(shuffles))
    return _make
