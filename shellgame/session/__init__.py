"""
Session Module - Owns and drives one game.

A session represents one play-through:
- Created by the host when the game opens
- Holds the current game state
- Is driven by the game loop on clicks and ticks
- Dropped by the host; nothing is persisted
"""

from .manager import Session
from .game_loop import GameLoop

__all__ = [
    "Session",
    "GameLoop",
]
