"""
Game configuration.

Values come from keyword arguments, or from the environment via
GameConfig.from_env():

    SHELLGAME_MIN_SWAPS   Fewest swaps in a shuffle plan (default 3)
    SHELLGAME_MAX_SWAPS   Most swaps in a shuffle plan (default 6)
    SHELLGAME_SPEED       Distance a shell travels per tick (default 5)
    SHELLGAME_EPSILON     Arrival distance, at most 1 (default 1)
    SHELLGAME_SEED        Seed for the shuffle planner (default: random)
"""

from __future__ import annotations
from typing import Optional
import os

from pydantic import BaseModel, Field, model_validator


DEFAULT_MIN_SWAPS = 3
DEFAULT_MAX_SWAPS = 6
DEFAULT_SPEED = 5.0
DEFAULT_EPSILON = 1.0


class GameConfig(BaseModel):
    """Tunable parameters of a game session."""
    model_config = {"frozen": True}

    min_swaps: int = Field(default=DEFAULT_MIN_SWAPS, ge=0, description="Fewest swaps per shuffle")
    max_swaps: int = Field(default=DEFAULT_MAX_SWAPS, ge=0, description="Most swaps per shuffle")
    speed: float = Field(default=DEFAULT_SPEED, gt=0, description="Distance moved per tick")
    epsilon: float = Field(default=DEFAULT_EPSILON, gt=0, le=1, description="Arrival distance")
    seed: Optional[int] = Field(default=None, description="Shuffle planner seed")
    max_reactions: int = Field(default=64, ge=1, description="Orchestrator safety bound")

    @model_validator(mode="after")
    def _check_swap_range(self) -> GameConfig:
        if self.min_swaps > self.max_swaps:
            raise ValueError(
                f"min_swaps ({self.min_swaps}) must not exceed max_swaps ({self.max_swaps})"
            )
        return self

    @classmethod
    def from_env(cls, **overrides) -> GameConfig:
        """
        Build a config from SHELLGAME_* environment variables.

        Keyword overrides that are not None win over the environment.
        """
        values = {
            "min_swaps": os.getenv("SHELLGAME_MIN_SWAPS"),
            "max_swaps": os.getenv("SHELLGAME_MAX_SWAPS"),
            "speed": os.getenv("SHELLGAME_SPEED"),
            "epsilon": os.getenv("SHELLGAME_EPSILON"),
            "seed": os.getenv("SHELLGAME_SEED"),
        }
        values.update(overrides)
        return cls(**{k: v for k, v in values.items() if v is not None and v != ""})
