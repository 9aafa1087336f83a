"""Reserve game environment with gym-like interface.

Provides reset() and step() for the menu driver and the WebSocket API.
The environment owns the live state and the single undo snapshot.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from reserve_core.actions import (
    ActionOutcome,
    GameAction,
    bulk_exchange,
    insert,
    play,
    reserve,
    swap_front_top,
    undo,
    use_reserve,
)
from reserve_core.piece import Piece
from reserve_core.rng import PieceRNG
from reserve_core.state import GameState, new_game, snapshot

logger = logging.getLogger(__name__)


class Level(Enum):
    """Game variants, from the bare queue to the full reserve game."""
    NOVICE = "novice"          # Queue only, manual insert
    ADVENTURER = "adventurer"  # Queue + reserve stack
    MASTER = "master"          # Queue + stack + swap, undo and 3x3 exchange


LEVEL_ACTIONS: Dict[Level, List[GameAction]] = {
    Level.NOVICE: [GameAction.PLAY, GameAction.INSERT],
    Level.ADVENTURER: [GameAction.PLAY, GameAction.RESERVE, GameAction.USE_RESERVE],
    Level.MASTER: [
        GameAction.PLAY,
        GameAction.RESERVE,
        GameAction.USE_RESERVE,
        GameAction.SWAP,
        GameAction.UNDO,
        GameAction.EXCHANGE,
    ],
}


@dataclass
class Observation:
    """Complete game state observation."""
    schema_version: str
    turn: int
    level: Level
    queue: List[Piece]  # Front to rear
    stack: List[Piece]  # Top to base
    next_id: int
    seed: int
    available_actions: List[GameAction]

    def to_dict(self) -> Dict[str, Any]:
        """Convert observation to dictionary for serialization."""
        return {
            "schema_version": self.schema_version,
            "turn": self.turn,
            "level": self.level.value,
            "queue": [p.to_dict() for p in self.queue],
            "stack": [p.to_dict() for p in self.stack],
            "next_id": self.next_id,
            "seed": self.seed,
            "available_actions": [a.value for a in self.available_actions],
        }


@dataclass
class StepResult:
    """Result of a step() call."""
    obs: Observation
    outcome: ActionOutcome
    info: Dict[str, Any]

    @property
    def ok(self) -> bool:
        return self.outcome.ok


class ReserveEnv:
    """Piece queue and reserve stack session."""

    SCHEMA_VERSION = "r1.0.0"

    def __init__(self, level: Level = Level.MASTER):
        """Initialize the environment.

        Args:
            level: Game variant deciding which actions are offered
        """
        self.level = level
        self.rng: Optional[PieceRNG] = None
        self.state: Optional[GameState] = None
        self.previous_state: Optional[GameState] = None

        self.turn = 0
        self.seed = 0

    @property
    def available_actions(self) -> List[GameAction]:
        return LEVEL_ACTIONS[self.level]

    def reset(self, seed: Optional[int] = None) -> Observation:
        """Start a new game.

        Args:
            seed: Random seed for reproducibility (generates one if None)

        Returns:
            Initial observation

        Raises:
            ValueError: If the seed is not an integer
        """
        if seed is None:
            seed = random.randint(0, 1_000_000)
        elif isinstance(seed, bool) or not isinstance(seed, int):
            raise ValueError(f"Invalid seed: {seed!r}")

        self.seed = seed
        self.rng = PieceRNG(seed)
        self.state = new_game(self.rng)
        # Undo before any action restores the freshly dealt queue
        self.previous_state = self.state.clone()
        self.turn = 0

        logger.debug("Reset: level=%s seed=%s queue=%s", self.level.value, seed,
                     self.state.queue_view())
        return self._build_observation()

    def step(self, action: GameAction) -> StepResult:
        """Execute one action.

        Args:
            action: Action to execute

        Returns:
            Step result with observation, outcome and info

        Raises:
            ValueError: If the game was not reset or the level lacks the action
        """
        if self.state is None:
            raise ValueError("Game not initialized. Call reset first.")
        if action not in self.available_actions:
            raise ValueError(
                f"Action {action.value} not available at level {self.level.value}"
            )

        events = []
        if action != GameAction.UNDO and GameAction.UNDO in self.available_actions:
            snapshot(self.previous_state, self.state)
            events.append("snapshot")

        outcome = self._dispatch(action)
        self.turn += 1

        info: Dict[str, Any] = {"events": events}
        if outcome.ok:
            events.append(action.value.lower())
            if outcome.replenished:
                events.append("replenish")
            logger.debug("Turn %d: %s ok, pieces=%s", self.turn, action.value,
                         [str(p) for p in outcome.pieces])
        else:
            info["error"] = outcome.message
            logger.debug("Turn %d: %s failed: %s", self.turn, action.value,
                         outcome.error.value)

        return StepResult(self._build_observation(), outcome, info)

    def observe(self) -> Observation:
        """Current observation without taking an action.

        Raises:
            ValueError: If the game was not reset
        """
        if self.state is None:
            raise ValueError("Game not initialized. Call reset first.")
        return self._build_observation()

    def _dispatch(self, action: GameAction) -> ActionOutcome:
        """Run the action against the live state."""
        if action == GameAction.PLAY:
            return play(self.state, self.rng, replenish=self.level != Level.NOVICE)
        elif action == GameAction.RESERVE:
            return reserve(self.state, self.rng)
        elif action == GameAction.USE_RESERVE:
            return use_reserve(self.state)
        elif action == GameAction.SWAP:
            return swap_front_top(self.state)
        elif action == GameAction.UNDO:
            return undo(self.state, self.previous_state)
        elif action == GameAction.EXCHANGE:
            return bulk_exchange(self.state)
        else:
            return insert(self.state, self.rng)

    def _build_observation(self) -> Observation:
        """Build the current observation.

        Returns:
            Complete observation
        """
        return Observation(
            schema_version=self.SCHEMA_VERSION,
            turn=self.turn,
            level=self.level,
            queue=list(self.state.queue_view()),
            stack=list(self.state.stack_view()),
            next_id=self.state.next_id,
            seed=self.seed,
            available_actions=list(self.available_actions),
        )
