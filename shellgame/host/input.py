"""
Pointer input - Turns clicks into game loop calls.

Each shell is hit-tested as a 50x50 box anchored at its current
position. The first shell (in id order) whose box strictly contains the
point wins.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import logging

from ..engine_core.state import Shell, Stage

if TYPE_CHECKING:
    from ..session.game_loop import GameLoop

logger = logging.getLogger(__name__)


SHELL_SIZE = 50


def hit_test(x: float, y: float, shells: dict[int, Shell], size: float = SHELL_SIZE) -> int | None:
    """Return the id of the shell under (x, y), or None."""
    for shell in sorted(shells.values(), key=lambda s: s.id):
        left, top = shell.position.x, shell.position.y
        if left < x < left + size and top < y < top + size:
            return shell.id
    return None


class PointerInput:
    """
    Routes clicks by stage.

    idle: start shuffling. guessing: guess the shell under the pointer.
    showing_result: start over. Clicks while shuffling are ignored.
    """

    def __init__(self, loop: GameLoop):
        self.loop = loop

    def click(self, x: float, y: float) -> bool:
        """Handle a click. Returns True if it changed the game."""
        state = self.loop.state

        if state.stage == Stage.IDLE:
            return self.loop.start()

        if state.stage == Stage.SHOWING_RESULT:
            self.loop.reset()
            return True

        if state.stage == Stage.GUESSING:
            shell_id = hit_test(x, y, state.shells)
            if shell_id is None:
                logger.debug("Click at (%s, %s) missed every shell", x, y)
                return False
            return self.loop.guess(shell_id)

        return False
