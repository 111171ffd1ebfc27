"""
Pydantic Schemas for rendered frames.

A Frame is the read-only description of what a surface should draw for one
GameState: shells as rectangles, the ball as a circle, and the status text.
Any 2-D surface can replay the commands in order.
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, Field


class RectCommand(BaseModel):
    """A shell, drawn as a filled and stroked rectangle."""
    kind: Literal["rect"] = "rect"
    shell_id: int
    x: float
    y: float
    width: float
    height: float
    fill: str = Field(description="rgba() fill; transparent when the shell is open")
    stroke: str
    is_open: bool = False


class CircleCommand(BaseModel):
    """The ball."""
    kind: Literal["circle"] = "circle"
    x: float
    y: float
    radius: float
    fill: str


class TextCommand(BaseModel):
    """A line of status text."""
    kind: Literal["text"] = "text"
    text: str
    x: float
    y: float
    font: str = "30px Arial"
    fill: str = "salmon"


DrawCommand = Annotated[
    Union[RectCommand, CircleCommand, TextCommand],
    Field(discriminator="kind"),
]


class Frame(BaseModel):
    """Everything to draw for one state, in paint order."""
    stage: str
    outcome: Optional[str] = None
    commands: list[DrawCommand] = Field(default_factory=list)

    @property
    def status_lines(self) -> list[str]:
        return [c.text for c in self.commands if isinstance(c, TextCommand)]

    @property
    def shells(self) -> list[RectCommand]:
        return [c for c in self.commands if isinstance(c, RectCommand)]
