"""
Engine errors.

Every error here is a contract violation: it means a caller or an internal
invariant is broken, never a condition the player can trigger. They are
raised immediately and never retried.
"""


class ShellGameError(Exception):
    """Base class for engine errors."""


class ContractViolation(ShellGameError):
    """A caller broke the engine's contract."""


class UnknownActionError(ContractViolation, TypeError):
    """The reducer received something that is not a known action."""

    def __init__(self, action: object):
        super().__init__(f"Unknown action: {action!r}")
        self.action = action


class UnknownStageError(ContractViolation, ValueError):
    """A stage change was requested with an unrecognized stage value."""

    def __init__(self, stage: object):
        super().__init__(f"Unknown stage: {stage!r}")
        self.stage = stage


class UnknownShellError(ContractViolation, KeyError):
    """An action referenced a shell id that is not in the state."""

    def __init__(self, shell_id: object):
        super().__init__(shell_id)
        self.shell_id = shell_id

    def __str__(self) -> str:
        return f"Unknown shell: {self.shell_id!r}"


class SwapConsistencyError(ContractViolation, RuntimeError):
    """A swap referenced a place that has no resident shell."""

    def __init__(self, swap: tuple[str, str], place_id: str):
        super().__init__(f"No shell at place {place_id!r} for swap {swap!r}")
        self.swap = swap
        self.place_id = place_id


class ReactionLimitError(ContractViolation, RuntimeError):
    """The orchestrator kept issuing actions without settling."""

    def __init__(self, limit: int):
        super().__init__(f"Orchestrator did not settle after {limit} reactions")
        self.limit = limit
