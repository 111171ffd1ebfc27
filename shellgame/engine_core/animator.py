"""
Position Animator - Moves shells toward their places, one step per tick.

Speed is a fixed distance per tick, not per second: the tick is the
engine's only unit of time.
"""

from __future__ import annotations
from dataclasses import dataclass

from .state import GameState, Shell, SwapStatus, Vec2
from .action import Action, RenderMove, StopSwapping


def step_towards(position: Vec2, target: Vec2, speed: float, epsilon: float = 1.0) -> Vec2:
    """
    Advance `position` one step of length `speed` toward `target`.

    Lands exactly on the target when it is closer than `epsilon` or
    within reach of a single step, so a shell never overshoots.
    """
    dx = target.x - position.x
    dy = target.y - position.y
    distance = position.distance_to(target)

    if distance < epsilon or distance <= speed:
        return target

    return Vec2(
        x=position.x + (speed / distance) * dx,
        y=position.y + (speed / distance) * dy,
    )


@dataclass
class PositionAnimator:
    """Computes one tick of swap animation."""
    speed: float = 5.0
    epsilon: float = 1.0

    @classmethod
    def from_config(cls, config) -> PositionAnimator:
        return cls(speed=config.speed, epsilon=config.epsilon)

    def frame(self, state: GameState) -> dict[int, Shell]:
        """
        Patch of the shells that move this tick.

        Every shell is stepped from the same snapshot; shells already on
        their place are left out.
        """
        patch: dict[int, Shell] = {}
        for shell in state.shells.values():
            target = state.target_of(shell)
            if shell.position == target:
                continue
            patch[shell.id] = shell.moved_to(
                step_towards(shell.position, target, self.speed, self.epsilon)
            )
        return patch

    def tick(self, state: GameState) -> Action | None:
        """
        The action for one animation tick.

        RenderMove while anything moves, StopSwapping once nothing does,
        None when no swap is animating.
        """
        if state.shuffle.status != SwapStatus.SWAPPING:
            return None

        patch = self.frame(state)
        if not patch:
            return StopSwapping()
        return RenderMove(shells=patch)
