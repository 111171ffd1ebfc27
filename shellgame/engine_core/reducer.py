"""
Reducer - Applies actions to game state.

The reducer is the single point of state mutation.
All state changes must go through apply_action().

Design principles:
- Pure function: (state, action) -> new_state
- Never modifies the input state; a failed action leaves it untouched
- Unknown actions, stages and shell ids raise immediately
"""

from __future__ import annotations
from dataclasses import dataclass
import logging

from .state import GameState, Shell, ShuffleState, Stage, SwapStatus, initial_state
from .action import (
    Action,
    ChangeStage,
    OpenShell,
    RenderMove,
    Reset,
    SaveGuess,
    StartNextSwap,
    StartShuffle,
    StartSwapping,
    StopSwapping,
)
from .errors import UnknownActionError, UnknownShellError, UnknownStageError

logger = logging.getLogger(__name__)


@dataclass
class Reducer:
    """
    Reducer applies actions to game state.

    Stateless - all state is in GameState.
    """

    def apply(self, state: GameState, action: Action) -> GameState:
        """
        Apply an action to the game state.

        Returns the new state. Raises a ContractViolation subclass if the
        action is not one the engine understands.
        """
        handler = self._get_handler(action)
        if handler is None:
            raise UnknownActionError(action)

        new_state = handler(state, action)
        logger.debug(
            "%s: stage=%s swap=%s queued=%d",
            action.action_type.value,
            new_state.stage.value,
            new_state.shuffle.status.value,
            len(new_state.shuffle.shuffles),
        )
        return new_state

    def _get_handler(self, action: object):
        """Get the handler function for an action."""
        handlers = {
            Reset: self._handle_reset,
            ChangeStage: self._handle_change_stage,
            StartShuffle: self._handle_start_shuffle,
            OpenShell: self._handle_open_shell,
            StartSwapping: self._handle_start_swapping,
            StopSwapping: self._handle_stop_swapping,
            StartNextSwap: self._handle_start_next_swap,
            RenderMove: self._handle_render_move,
            SaveGuess: self._handle_save_guess,
        }
        return handlers.get(type(action))

    def _handle_reset(self, state: GameState, action: Reset) -> GameState:
        return initial_state()

    def _handle_change_stage(self, state: GameState, action: ChangeStage) -> GameState:
        stage = action.stage
        if not isinstance(stage, Stage):
            try:
                stage = Stage(stage)
            except ValueError:
                raise UnknownStageError(action.stage) from None
        return state._copy_with(stage=stage)

    def _handle_start_shuffle(self, state: GameState, action: StartShuffle) -> GameState:
        """Replace shells wholesale and queue the plan."""
        mismatched = set(action.shells) ^ set(state.shells)
        if mismatched:
            raise UnknownShellError(min(mismatched))
        _check_patch(action.shells)

        return state._copy_with(
            shells=dict(action.shells),
            shuffle=ShuffleState(
                status=SwapStatus.READY,
                shuffles=tuple(action.shuffles),
            ),
        )

    def _handle_open_shell(self, state: GameState, action: OpenShell) -> GameState:
        shell = state.shells.get(action.shell_id)
        if shell is None:
            raise UnknownShellError(action.shell_id)

        return state._copy_with(
            shells={**state.shells, shell.id: shell.opened()},
        )

    def _handle_start_swapping(self, state: GameState, action: StartSwapping) -> GameState:
        return state._copy_with(
            shuffle=ShuffleState(
                status=SwapStatus.SWAPPING,
                shuffles=tuple(action.shuffles),
            ),
            shells=_merge(state, action.shells),
        )

    def _handle_stop_swapping(self, state: GameState, action: StopSwapping) -> GameState:
        return state._copy_with(
            shuffle=ShuffleState(
                status=SwapStatus.FINISHED,
                shuffles=state.shuffle.shuffles,
            ),
        )

    def _handle_start_next_swap(self, state: GameState, action: StartNextSwap) -> GameState:
        return state._copy_with(
            shuffle=ShuffleState(
                status=SwapStatus.READY,
                shuffles=state.shuffle.shuffles,
            ),
        )

    def _handle_render_move(self, state: GameState, action: RenderMove) -> GameState:
        if not action.shells:
            return state
        return state._copy_with(shells=_merge(state, action.shells))

    def _handle_save_guess(self, state: GameState, action: SaveGuess) -> GameState:
        if action.shell_id not in state.shells:
            raise UnknownShellError(action.shell_id)
        return state._copy_with(guess=action.shell_id)


def _check_patch(patch: dict[int, Shell]) -> None:
    """Every entry must be keyed by its own shell id."""
    for shell_id, shell in patch.items():
        if shell.id != shell_id:
            raise UnknownShellError(shell_id)


def _merge(state: GameState, patch: dict[int, Shell]) -> dict[int, Shell]:
    """Merge a shell patch over the current shells."""
    for shell_id in patch:
        if shell_id not in state.shells:
            raise UnknownShellError(shell_id)
    _check_patch(patch)
    return {**state.shells, **patch}


_default_reducer = Reducer()


def apply_action(state: GameState, action: Action) -> GameState:
    """
    Convenience function to apply an action.

    Uses a shared stateless Reducer.
    """
    return _default_reducer.apply(state, action)
