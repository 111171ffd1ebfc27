"""
Game Loop - The reactive orchestrator.

The loop:
1. Host calls start() on a click while idle
2. Entering shuffling plans the swaps and queues them
3. Every tick moves the shells one step; the swap sub-machine
   advances through the plan as each swap finishes
4. With the plan exhausted the stage becomes guessing
5. Host calls guess(shell_id); the guessed shell and the ball's
   shell are both opened and the stage becomes showing_result
6. Host calls reset() to start over

The loop is the only component that knows *when* to act. It reads the
session's state and submits actions; it never builds state itself.
"""

from __future__ import annotations
import logging

from ..engine_core.state import GameState, Stage
from ..engine_core.action import (
    Action,
    ChangeStage,
    OpenShell,
    Reset,
    SaveGuess,
)
from ..engine_core.animator import PositionAnimator
from ..engine_core.errors import ReactionLimitError, UnknownShellError
from ..engine_core.shuffle_planner import ShufflePlanner
from ..engine_core.swap import next_swap_action
from .manager import Session

logger = logging.getLogger(__name__)


class GameLoop:
    """
    The main game loop driver.

    Usage:
        session = Session.create(GameConfig(seed=7))
        loop = GameLoop(session)

        loop.start()
        for tick in TickSource():
            loop.on_tick(tick)
            if loop.state.stage == Stage.GUESSING:
                break

        loop.guess(shell_id)
        print(loop.state.outcome)
    """

    def __init__(
        self,
        session: Session,
        planner: ShufflePlanner | None = None,
        animator: PositionAnimator | None = None,
    ):
        self.session = session
        self.planner = planner or ShufflePlanner.from_config(session.config)
        self.animator = animator or PositionAnimator.from_config(session.config)
        self._observed_stage = session.game_state.stage
        self._last_tick: int | None = None
        self.planned_swaps = 0

    @property
    def state(self) -> GameState:
        return self.session.game_state

    @property
    def last_tick(self) -> int | None:
        return self._last_tick

    # =========================================================================
    # External inputs
    # =========================================================================

    def start(self) -> bool:
        """Begin shuffling. Only meaningful while idle."""
        if self.state.stage != Stage.IDLE:
            logger.debug("Ignoring start during %s", self.state.stage.value)
            return False

        logger.info("Starting game")
        self._dispatch(ChangeStage(Stage.SHUFFLING))
        self.react()
        return True

    def guess(self, shell_id: int) -> bool:
        """
        Resolve the player's guess.

        Only meaningful while guessing. An id that is not a shell is a
        caller error.
        """
        if self.state.stage != Stage.GUESSING:
            logger.debug("Ignoring guess during %s", self.state.stage.value)
            return False
        if shell_id not in self.state.shells:
            raise UnknownShellError(shell_id)

        self._dispatch(SaveGuess(shell_id))
        self._dispatch(OpenShell(shell_id))
        self._dispatch(ChangeStage(Stage.SHOWING_RESULT))
        self.react()
        logger.info(
            "Guessed shell %d, ball under %d: %s",
            shell_id,
            self.state.ball.position,
            self.state.outcome.value,
        )
        return True

    def reset(self) -> None:
        """Replace the state with a fresh game, aborting any shuffle."""
        logger.info("Resetting game from %s", self.state.stage.value)
        self._dispatch(Reset())
        self.react()

    def on_tick(self, tick: int) -> bool:
        """
        Run one animation step for a new tick value.

        Repeated or stale tick values are ignored. Returns True if the
        tick was processed.
        """
        if self._last_tick is not None and tick <= self._last_tick:
            return False
        self._last_tick = tick

        action = self.animator.tick(self.state)
        if action is not None:
            self._dispatch(action)
        self.react()
        return True

    # =========================================================================
    # Reactions
    # =========================================================================

    def react(self) -> None:
        """
        Issue actions until the state needs nothing more until the next
        tick or input.
        """
        limit = self.session.config.max_reactions
        for _ in range(limit):
            action = self._next_reaction()
            if action is None:
                return
            self._dispatch(action)
        raise ReactionLimitError(limit)

    def _next_reaction(self) -> Action | None:
        state = self.state
        if state.stage != self._observed_stage:
            self._observed_stage = state.stage
            action = self._on_enter(state)
            if action is not None:
                return action
        return next_swap_action(state)

    def _on_enter(self, state: GameState) -> Action | None:
        """Stage entry handlers."""
        if state.stage == Stage.SHUFFLING:
            action = self.planner.start_shuffle(state)
            self.planned_swaps = len(action.shuffles)
            return action
        if state.stage == Stage.SHOWING_RESULT:
            # Reveal the winner regardless of the guess
            return OpenShell(state.ball.position)
        return None

    def _dispatch(self, action: Action) -> None:
        self.session.dispatch(action)
