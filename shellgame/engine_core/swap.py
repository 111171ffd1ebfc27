"""
Swap Sub-Machine - Runs the shuffle plan one swap at a time.

    ready ──pop head, exchange places──▶ swapping
    swapping ──animator reports no movement──▶ finished
    finished ──queue not empty──▶ ready

When the queue is empty and no swap is in flight, the stage moves on
to guessing.

Shells are found by the place they occupy, never by id: after a few
swaps shell 1 can be anywhere.
"""

from __future__ import annotations

from .state import GameState, Stage, Swap, SwapStatus
from .action import Action, ChangeStage, StartNextSwap, StartSwapping
from .errors import SwapConsistencyError


def begin_swap(state: GameState) -> StartSwapping:
    """
    Pop the head of the queue and exchange the places of its two residents.

    Raises SwapConsistencyError if either place is empty.
    """
    swap: Swap = state.shuffle.shuffles[0]
    first, second = swap

    first_shell = state.shell_at(first)
    if first_shell is None:
        raise SwapConsistencyError(swap, first)
    second_shell = state.shell_at(second)
    if second_shell is None:
        raise SwapConsistencyError(swap, second)

    return StartSwapping(
        shells={
            first_shell.id: first_shell.placed_at(second),
            second_shell.id: second_shell.placed_at(first),
        },
        shuffles=state.shuffle.shuffles[1:],
    )


def next_swap_action(state: GameState) -> Action | None:
    """
    Decide the sub-machine's next action for this state, if any.

    Returns None while a swap is animating or when there is nothing to do.
    """
    shuffle = state.shuffle

    if shuffle.has_queued:
        if shuffle.status == SwapStatus.READY:
            return begin_swap(state)
        if shuffle.status == SwapStatus.FINISHED:
            return StartNextSwap()
        return None

    if state.stage == Stage.SHUFFLING and shuffle.status != SwapStatus.SWAPPING:
        return ChangeStage(Stage.GUESSING)

    return None
