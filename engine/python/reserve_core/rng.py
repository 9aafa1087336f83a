"""Seeded piece generator.

Shapes are drawn uniformly from the 7 labels (no bag), ids are taken from
the caller's IdCounter.
"""

import random
from typing import Optional

from reserve_core.piece import PIECE_TYPES, IdCounter, Piece


class PieceRNG:
    """Deterministic uniform piece generator."""

    PIECES = PIECE_TYPES

    def __init__(self, seed: Optional[int] = None):
        """Initialize with a seed for deterministic replay.

        Args:
            seed: Random seed for reproducibility (None = system entropy)
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def next_type(self) -> str:
        """Draw the next shape label.

        Returns:
            Piece type string ("I", "O", "T", "L", "S", "J", "Z")
        """
        return self.rng.choice(self.PIECES)

    def generate(self, counter: IdCounter) -> Piece:
        """Create a new piece, consuming one id from the counter.

        Args:
            counter: Id counter owned by the game state

        Returns:
            Freshly numbered piece
        """
        return Piece(self.next_type(), counter.take())

    def reset(self, seed: Optional[int]) -> None:
        """Reset the RNG with a new seed.

        Args:
            seed: New random seed
        """
        self.seed = seed
        self.rng = random.Random(seed)
