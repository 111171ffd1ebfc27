"""
Shell Game - Find the ball under the shell

A deterministic, tick-driven engine for the three-shell game:
- Immutable game state and a pure reducer
- Randomized shuffle plans
- Swap sequencing with per-tick position animation
- A reactive game loop that resolves the player's guess
"""

__version__ = "0.1.0"
