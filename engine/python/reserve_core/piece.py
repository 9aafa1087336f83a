"""Piece definitions and the id counter that numbers them.

A piece is just a shape label and a unique id. Ids come from an IdCounter
owned by the game state, so rolling the state back also rolls the ids back.
"""

from dataclasses import dataclass
from typing import Any, Dict, List

# The 7 tetromino labels, in the order the shape RNG draws from
PIECE_TYPES: List[str] = ["I", "O", "T", "L", "S", "J", "Z"]


@dataclass(frozen=True)
class Piece:
    """An immutable queued/reserved piece."""

    type: str
    id: int

    def __post_init__(self):
        if self.type not in PIECE_TYPES:
            raise ValueError(f"Invalid piece type: {self.type}")
        if self.id < 0:
            raise ValueError(f"Invalid piece id: {self.id}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert piece to dictionary for serialization."""
        return {"type": self.type, "id": self.id}

    def __str__(self) -> str:
        return f"[{self.type} {self.id}]"


@dataclass
class IdCounter:
    """Source of piece ids. Holds the id the next piece will get."""

    value: int = 0

    def take(self) -> int:
        """Return the current id and advance the counter by one."""
        current = self.value
        self.value += 1
        return current

    def copy(self) -> "IdCounter":
        """Create a copy of this counter."""
        return IdCounter(self.value)
