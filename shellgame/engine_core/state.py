"""
Game State - The immutable snapshot the engine operates on.

Design principles:
- Immutable: entities are frozen, every transition returns a new GameState
- Identity-stable: a shell's id never changes, only its place/position/status
- The ball is tracked by shell id, so swapping places never touches it
"""

from __future__ import annotations
from dataclasses import dataclass, field, replace
from enum import Enum
import math


class Stage(Enum):
    """High-level game stages."""
    IDLE = "idle"
    SHUFFLING = "shuffling"
    GUESSING = "guessing"
    SHOWING_RESULT = "showing_result"


class ShellStatus(Enum):
    """Whether a shell currently shows what is underneath."""
    OPEN = "open"
    CLOSED = "closed"


class SwapStatus(Enum):
    """Progress of the in-flight swap."""
    READY = "ready"  # A swap is queued but not started
    SWAPPING = "swapping"  # Positions are being interpolated
    FINISHED = "finished"  # Interpolation for the last swap completed


class Outcome(Enum):
    """Result of a resolved guess."""
    WIN = "win"
    LOSE = "lose"


@dataclass(frozen=True)
class Vec2:
    """A 2-D point."""
    x: float
    y: float

    def distance_to(self, other: Vec2) -> float:
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass(frozen=True)
class Place:
    """One of the three fixed slots a shell can occupy."""
    id: str
    position: Vec2


@dataclass(frozen=True)
class Shell:
    """
    A shell with a permanent identity.

    `place` is the logical slot the shell belongs to; `position` is where it
    currently is on screen and trails `place` while a swap is animating.
    """
    id: int
    status: ShellStatus
    position: Vec2
    place: str
    color: str

    @property
    def is_open(self) -> bool:
        return self.status == ShellStatus.OPEN

    def opened(self) -> Shell:
        return replace(self, status=ShellStatus.OPEN)

    def closed(self) -> Shell:
        return replace(self, status=ShellStatus.CLOSED)

    def moved_to(self, position: Vec2) -> Shell:
        return replace(self, position=position)

    def placed_at(self, place_id: str) -> Shell:
        return replace(self, place=place_id)


@dataclass(frozen=True)
class Ball:
    """The hidden ball, referenced by the id of the shell concealing it."""
    position: int


Swap = tuple[str, str]


@dataclass(frozen=True)
class ShuffleState:
    """The remaining swap plan and the status of the swap in flight."""
    status: SwapStatus = SwapStatus.FINISHED
    shuffles: tuple[Swap, ...] = ()

    @property
    def has_queued(self) -> bool:
        return len(self.shuffles) > 0


@dataclass(frozen=True)
class GameState:
    """
    Complete game state at a point in time.

    This is the canonical state that the engine operates on.
    All state changes go through the reducer.
    """
    stage: Stage = Stage.IDLE
    shuffle: ShuffleState = field(default_factory=ShuffleState)
    shells: dict[int, Shell] = field(default_factory=dict)
    places: dict[str, Place] = field(default_factory=dict)
    ball: Ball = field(default_factory=lambda: Ball(position=2))
    guess: int | None = None

    def shell_at(self, place_id: str) -> Shell | None:
        """Get the shell whose logical place is `place_id`."""
        for shell in self.shells.values():
            if shell.place == place_id:
                return shell
        return None

    def target_of(self, shell: Shell) -> Vec2:
        """Get the on-screen position a shell is heading to."""
        return self.places[shell.place].position

    @property
    def ball_shell(self) -> Shell:
        return self.shells[self.ball.position]

    @property
    def is_settled(self) -> bool:
        """True when every shell sits exactly on its place."""
        return all(
            shell.position == self.target_of(shell)
            for shell in self.shells.values()
        )

    @property
    def outcome(self) -> Outcome | None:
        """Win/lose once a guess has been saved."""
        if self.guess is None:
            return None
        return Outcome.WIN if self.guess == self.ball.position else Outcome.LOSE

    def _copy_with(self, **kwargs) -> GameState:
        """Create a copy with some fields replaced."""
        return replace(self, **kwargs)


PLACE_IDS: tuple[str, ...] = ("a", "b", "c")


def initial_state() -> GameState:
    """
    Build the canonical starting layout.

    Shell 2 sits in the middle, open, so the player can see the ball
    before the shuffle starts.
    """
    places = {
        "a": Place(id="a", position=Vec2(200, 100)),
        "b": Place(id="b", position=Vec2(300, 100)),
        "c": Place(id="c", position=Vec2(400, 100)),
    }
    shells = {
        1: Shell(1, ShellStatus.CLOSED, places["a"].position, "a", "#72d586"),
        2: Shell(2, ShellStatus.OPEN, places["b"].position, "b", "#6674c8"),
        3: Shell(3, ShellStatus.CLOSED, places["c"].position, "c", "#76cfd5"),
    }
    return GameState(
        stage=Stage.IDLE,
        shuffle=ShuffleState(),
        shells=shells,
        places=places,
        ball=Ball(position=2),
        guess=None,
    )
