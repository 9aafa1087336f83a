"""Fixed-capacity reserve stack."""

from typing import List, Optional, Tuple

from reserve_core.piece import Piece


class LinearStack:
    """3-slot LIFO. slots[0] is the base, slots[top] is the top."""

    CAPACITY = 3

    def __init__(self):
        """Initialize an empty stack."""
        self.slots: List[Optional[Piece]] = [None] * self.CAPACITY
        self.top = -1  # -1 = empty

    def is_empty(self) -> bool:
        return self.top == -1

    def is_full(self) -> bool:
        return self.top == self.CAPACITY - 1

    def __len__(self) -> int:
        return self.top + 1

    def push(self, piece: Piece) -> bool:
        """Put a piece on top.

        Args:
            piece: Piece to push

        Returns:
            True if pushed, False if the stack was full
        """
        if self.is_full():
            return False
        self.top += 1
        self.slots[self.top] = piece
        return True

    def pop(self) -> Optional[Piece]:
        """Remove and return the top piece.

        Returns:
            The top piece, or None if the stack was empty
        """
        if self.is_empty():
            return None
        piece = self.slots[self.top]
        self.slots[self.top] = None
        self.top -= 1
        return piece

    def peek(self) -> Optional[Piece]:
        if self.is_empty():
            return None
        return self.slots[self.top]

    def replace_top(self, piece: Piece) -> Optional[Piece]:
        """Overwrite the top slot in place.

        Args:
            piece: Piece to put on top

        Returns:
            The piece previously on top, or None if the stack was empty
        """
        if self.is_empty():
            return None
        previous = self.slots[self.top]
        self.slots[self.top] = piece
        return previous

    def to_list(self) -> List[Piece]:
        """Get live pieces from top to base."""
        return [self.slots[i] for i in range(self.top, -1, -1)]

    def view(self) -> Tuple[Piece, ...]:
        """Read-only top-to-base view."""
        return tuple(self.to_list())

    def copy(self) -> "LinearStack":
        """Create an independent copy."""
        new_stack = LinearStack()
        new_stack.copy_from(self)
        return new_stack

    def copy_from(self, other: "LinearStack") -> None:
        """Overwrite this stack's slots and top index with another's."""
        self.slots = list(other.slots)
        self.top = other.top

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinearStack):
            return NotImplemented
        return self.slots == other.slots and self.top == other.top

    def __repr__(self) -> str:
        return f"LinearStack({self.to_list()}, top={self.top})"
