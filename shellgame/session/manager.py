"""
Session - Owns the game state for one play-through.

LIFECYCLE:
1. Host creates a session (in-memory only)
2. The game loop reads `game_state` and submits actions via dispatch()
3. Reset replaces the state wholesale
4. Host drops the session when done; nothing is persisted

There is no process-wide session: the host constructs one and passes it
to the game loop explicitly.
"""

from __future__ import annotations
from dataclasses import dataclass, field
import logging
import time
import uuid

from ..config import GameConfig
from ..engine_core.state import GameState, initial_state
from ..engine_core.action import Action
from ..engine_core.reducer import Reducer

logger = logging.getLogger(__name__)


@dataclass
class Session:
    """
    An ephemeral game session.

    Contains:
    - The session config
    - Current canonical game state
    - The reducer that is allowed to replace it
    """
    session_id: str
    config: GameConfig
    created_at: float
    game_state: GameState = field(default_factory=initial_state)
    reducer: Reducer = field(default_factory=Reducer)
    actions_applied: int = 0

    @classmethod
    def create(cls, config: GameConfig | None = None) -> Session:
        """Create a fresh session in the canonical initial state."""
        session = cls(
            session_id=str(uuid.uuid4()),
            config=config or GameConfig(),
            created_at=time.time(),
        )
        logger.info("Created session %s", session.session_id)
        return session

    def dispatch(self, action: Action) -> GameState:
        """
        Apply an action and store the resulting state.

        If the reducer raises, the stored state is left as it was.
        """
        self.game_state = self.reducer.apply(self.game_state, action)
        self.actions_applied += 1
        return self.game_state
