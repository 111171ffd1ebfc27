"""
Shuffle Planner - Builds the randomized swap plan for one shuffle.

A plan is N independent draws from the three unordered place pairs, with N
drawn uniformly from the configured inclusive range. Repeated pairs are
allowed; swapping the same two places twice just puts them back.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import random

from .state import GameState, Shell, Swap
from .action import StartShuffle

logger = logging.getLogger(__name__)


SWAP_OPTIONS: tuple[Swap, ...] = (
    ("a", "b"),
    ("b", "c"),
    ("a", "c"),
)


@dataclass
class ShufflePlanner:
    """
    Draws swap plans from a seedable random source.

    Pass a seeded `random.Random` (or `seed`) for reproducible games.
    """
    min_swaps: int = 3
    max_swaps: int = 6
    rng: random.Random = field(default_factory=random.Random)

    @classmethod
    def from_config(cls, config) -> ShufflePlanner:
        """Create a planner from a GameConfig."""
        return cls(
            min_swaps=config.min_swaps,
            max_swaps=config.max_swaps,
            rng=random.Random(config.seed),
        )

    def plan(self) -> tuple[Swap, ...]:
        """Draw a swap count, then that many independent swaps."""
        count = self.rng.randint(self.min_swaps, self.max_swaps)
        return tuple(self.rng.choice(SWAP_OPTIONS) for _ in range(count))

    def start_shuffle(self, state: GameState) -> StartShuffle:
        """Close every shell and queue a fresh plan."""
        shuffles = self.plan()
        logger.info("Planned %d swaps", len(shuffles))
        return StartShuffle(shells=close_all(state.shells), shuffles=shuffles)


def close_all(shells: dict[int, Shell]) -> dict[int, Shell]:
    """Return a copy of the shells with every shell closed."""
    return {shell_id: shell.closed() for shell_id, shell in shells.items()}
