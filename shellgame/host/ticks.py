"""
Tick source - The monotonically increasing frame counter.

A real host bumps the counter once per display refresh. Headless hosts
and tests can drive the loop as fast as they like with advance().
"""

from __future__ import annotations
from typing import Callable, Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from ..engine_core.state import GameState
    from ..session.game_loop import GameLoop


class TickSource:
    """Counts frames, starting after `start`."""

    def __init__(self, start: int = 0):
        self.tick = start

    def next(self) -> int:
        self.tick += 1
        return self.tick

    def __iter__(self) -> Iterator[int]:
        while True:
            yield self.next()


def advance(
    loop: GameLoop,
    until: Callable[[GameState], bool],
    ticks: TickSource | None = None,
    max_ticks: int = 100_000,
) -> int:
    """
    Feed ticks to the loop until `until(state)` holds.

    Returns the number of ticks used. Raises RuntimeError if the
    condition does not hold within `max_ticks`.
    """
    ticks = ticks or TickSource(start=loop.last_tick or 0)
    used = 0
    while not until(loop.state):
        if used >= max_ticks:
            raise RuntimeError(f"Condition not reached within {max_ticks} ticks")
        loop.on_tick(ticks.next())
        used += 1
    return used
