"""
Action System - The closed set of transitions the reducer understands.

Each action is its own frozen dataclass carrying exactly the payload it
needs; `Action` is the union of all of them. The `action_type` tag is kept
for logging and dispatch.

All state changes flow through actions.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Union

from .state import Shell, Stage, Swap


class ActionType(Enum):
    """Types of actions in the system."""
    RESET = "reset"
    CHANGE_STAGE = "change_stage"
    START_SHUFFLE = "start_shuffle"
    OPEN_SHELL = "open_shell"
    START_SWAPPING = "start_swapping"
    STOP_SWAPPING = "stop_swapping"
    START_NEXT_SWAP = "start_next_swap"
    RENDER_MOVE = "render_move"
    SAVE_GUESS = "save_guess"


@dataclass(frozen=True)
class Reset:
    """Replace the whole state with the canonical initial state."""
    action_type: ClassVar[ActionType] = ActionType.RESET


@dataclass(frozen=True)
class ChangeStage:
    stage: Stage
    action_type: ClassVar[ActionType] = ActionType.CHANGE_STAGE


@dataclass(frozen=True)
class StartShuffle:
    """Replace the shells wholesale and queue a fresh swap plan."""
    shells: dict[int, Shell]
    shuffles: tuple[Swap, ...]
    action_type: ClassVar[ActionType] = ActionType.START_SHUFFLE


@dataclass(frozen=True)
class OpenShell:
    shell_id: int
    action_type: ClassVar[ActionType] = ActionType.OPEN_SHELL


@dataclass(frozen=True)
class StartSwapping:
    """Begin animating a swap; `shells` holds the two re-placed shells."""
    shells: dict[int, Shell]
    shuffles: tuple[Swap, ...]
    action_type: ClassVar[ActionType] = ActionType.START_SWAPPING


@dataclass(frozen=True)
class StopSwapping:
    action_type: ClassVar[ActionType] = ActionType.STOP_SWAPPING


@dataclass(frozen=True)
class StartNextSwap:
    action_type: ClassVar[ActionType] = ActionType.START_NEXT_SWAP


@dataclass(frozen=True)
class RenderMove:
    """Merge one tick's interpolated positions into the shells."""
    shells: dict[int, Shell] = field(default_factory=dict)
    action_type: ClassVar[ActionType] = ActionType.RENDER_MOVE


@dataclass(frozen=True)
class SaveGuess:
    shell_id: int
    action_type: ClassVar[ActionType] = ActionType.SAVE_GUESS


Action = Union[
    Reset,
    ChangeStage,
    StartShuffle,
    OpenShell,
    StartSwapping,
    StopSwapping,
    StartNextSwap,
    RenderMove,
    SaveGuess,
]

ACTION_TYPES: tuple[type, ...] = (
    Reset,
    ChangeStage,
    StartShuffle,
    OpenShell,
    StartSwapping,
    StopSwapping,
    StartNextSwap,
    RenderMove,
    SaveGuess,
)
