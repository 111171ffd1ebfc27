"""
Rendering - Turns a GameState into something a surface can show.

FrameRenderer builds a Frame of draw commands for a 2-D surface.
TextRenderer builds a single terminal line for the CLI.

Both consume the state read-only, once per frame.
"""

from __future__ import annotations
from dataclasses import dataclass

from ..engine_core.state import GameState, Outcome, Shell, Stage
from .input import SHELL_SIZE
from .schemas import CircleCommand, Frame, RectCommand, TextCommand


SHELL_RGB = "54, 70, 236"
BALL_RADIUS = 15
BALL_COLOR = "salmon"
STATUS_X = 200
STATUS_Y = 50
LINE_HEIGHT = 25


def status_lines(state: GameState) -> list[str]:
    """Stage-appropriate status text."""
    if state.stage == Stage.IDLE:
        return ["Click to start shuffling!"]
    if state.stage == Stage.SHUFFLING:
        return ["Shuffling..."]
    if state.stage == Stage.GUESSING:
        return ["Click on the shell!"]

    result = "Awesome!" if state.outcome == Outcome.WIN else "Maybe next time"
    return [result, "Click to start again!"]


@dataclass
class FrameRenderer:
    """Builds draw commands: status text, then the ball, then shells on top."""
    shell_size: float = SHELL_SIZE

    def render(self, state: GameState) -> Frame:
        commands = [
            TextCommand(text=line, x=STATUS_X, y=STATUS_Y + i * LINE_HEIGHT)
            for i, line in enumerate(status_lines(state))
        ]

        ball_at = state.ball_shell.position
        commands.append(
            CircleCommand(
                x=ball_at.x + self.shell_size / 2,
                y=ball_at.y + self.shell_size / 2,
                radius=BALL_RADIUS,
                fill=BALL_COLOR,
            )
        )

        for shell in state.shells.values():
            commands.append(self._shell(shell))

        return Frame(
            stage=state.stage.value,
            outcome=state.outcome.value if state.outcome else None,
            commands=commands,
        )

    def _shell(self, shell: Shell) -> RectCommand:
        alpha = 0 if shell.is_open else 1
        return RectCommand(
            shell_id=shell.id,
            x=shell.position.x,
            y=shell.position.y,
            width=self.shell_size,
            height=self.shell_size,
            fill=f"rgba({SHELL_RGB}, {alpha})",
            stroke=f"rgba({SHELL_RGB}, 1)",
            is_open=shell.is_open,
        )


@dataclass
class TextRenderer:
    """
    One-line terminal view.

    Closed shells show as [ ], open ones as ( ), and the open shell with
    the ball as (o). Shell ids are not shown, otherwise the game would be
    trivial. Horizontal position follows the on-screen x, so shells
    visibly slide past each other while swapping.
    """
    origin_x: float = 200
    pixels_per_column: float = 10
    width: int = 24

    def render(self, state: GameState) -> str:
        return f"{self.track(state)}  {' '.join(status_lines(state))}"

    def track(self, state: GameState) -> str:
        cells = [" "] * self.width
        for shell in sorted(state.shells.values(), key=lambda s: s.position.x):
            self._put(cells, shell.position.x, self._label(state, shell))
        return "".join(cells)

    def legend(self, state: GameState) -> str:
        """Place names under their slots."""
        cells = [" "] * self.width
        for place in state.places.values():
            self._put(cells, place.position.x, f" {place.id} ")
        return "".join(cells)

    def _put(self, cells: list[str], x: float, label: str) -> None:
        column = int(round((x - self.origin_x) / self.pixels_per_column))
        column = max(0, min(self.width - len(label), column))
        cells[column:column + len(label)] = label

    def _label(self, state: GameState, shell: Shell) -> str:
        if not shell.is_open:
            return "[ ]"
        if shell.id == state.ball.position:
            return "(o)"
        return "( )"
