"""
Engine Core - Deterministic game state management and swap animation.

The engine is the runtime that:
1. Holds the GameState model
2. Applies actions via the reducer
3. Plans shuffles
4. Sequences swaps one at a time
5. Interpolates shell positions per tick
"""

from .state import (
    Ball,
    GameState,
    Outcome,
    Place,
    Shell,
    ShellStatus,
    ShuffleState,
    Stage,
    SwapStatus,
    Vec2,
    initial_state,
)
from .action import (
    Action,
    ActionType,
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
from .reducer import Reducer, apply_action
from .shuffle_planner import ShufflePlanner, SWAP_OPTIONS
from .swap import begin_swap, next_swap_action
from .animator import PositionAnimator, step_towards
from .errors import (
    ContractViolation,
    ReactionLimitError,
    ShellGameError,
    SwapConsistencyError,
    UnknownActionError,
    UnknownShellError,
    UnknownStageError,
)

__all__ = [
    "Ball",
    "GameState",
    "Outcome",
    "Place",
    "Shell",
    "ShellStatus",
    "ShuffleState",
    "Stage",
    "SwapStatus",
    "Vec2",
    "initial_state",
    "Action",
    "ActionType",
    "ChangeStage",
    "OpenShell",
    "RenderMove",
    "Reset",
    "SaveGuess",
    "StartNextSwap",
    "StartShuffle",
    "StartSwapping",
    "StopSwapping",
    "Reducer",
    "apply_action",
    "ShufflePlanner",
    "SWAP_OPTIONS",
    "begin_swap",
    "next_swap_action",
    "PositionAnimator",
    "step_towards",
    "ContractViolation",
    "ReactionLimitError",
    "ShellGameError",
    "SwapConsistencyError",
    "UnknownActionError",
    "UnknownShellError",
    "UnknownStageError",
]
