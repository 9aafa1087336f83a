"""Fixed-capacity circular queue of upcoming pieces."""

from typing import List, Optional, Tuple

from reserve_core.piece import Piece


class CircularQueue:
    """5-slot FIFO with wrap-around indexing."""

    CAPACITY = 5

    def __init__(self):
        """Initialize an empty queue."""
        # slots[front .. front+count-1] (mod CAPACITY) hold the live pieces
        self.slots: List[Optional[Piece]] = [None] * self.CAPACITY
        self.front = 0
        self.rear = 0
        self.count = 0

    def is_empty(self) -> bool:
        return self.count == 0

    def is_full(self) -> bool:
        return self.count == self.CAPACITY

    def __len__(self) -> int:
        return self.count

    def enqueue(self, piece: Piece) -> bool:
        """Insert a piece at the rear.

        Args:
            piece: Piece to insert

        Returns:
            True if inserted, False if the queue was full
        """
        if self.is_full():
            return False
        self.slots[self.rear] = piece
        self.rear = (self.rear + 1) % self.CAPACITY
        self.count += 1
        return True

    def dequeue(self) -> Optional[Piece]:
        """Remove and return the front piece.

        Returns:
            The front piece, or None if the queue was empty
        """
        if self.is_empty():
            return None
        piece = self.slots[self.front]
        self.slots[self.front] = None
        self.front = (self.front + 1) % self.CAPACITY
        self.count -= 1
        return piece

    def peek(self) -> Optional[Piece]:
        """Return the front piece without removing it."""
        if self.is_empty():
            return None
        return self.slots[self.front]

    def replace_front(self, piece: Piece) -> Optional[Piece]:
        """Overwrite the front slot in place.

        Indices and count are untouched.

        Args:
            piece: Piece to put at the front

        Returns:
            The piece previously at the front, or None if the queue was empty
        """
        if self.is_empty():
            return None
        previous = self.slots[self.front]
        self.slots[self.front] = piece
        return previous

    def to_list(self) -> List[Piece]:
        """Get live pieces in logical order.

        Returns:
            Pieces from front to rear
        """
        return [
            self.slots[(self.front + i) % self.CAPACITY] for i in range(self.count)
        ]

    def view(self) -> Tuple[Piece, ...]:
        """Read-only front-to-rear view."""
        return tuple(self.to_list())

    def copy(self) -> "CircularQueue":
        """Create an independent copy, physical layout included."""
        new_queue = CircularQueue()
        new_queue.copy_from(self)
        return new_queue

    def copy_from(self, other: "CircularQueue") -> None:
        """Overwrite this queue's slots and indices with another's."""
        # Pieces are frozen, so copying the slot list is a full value copy
        self.slots = list(other.slots)
        self.front = other.front
        self.rear = other.rear
        self.count = other.count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CircularQueue):
            return NotImplemented
        return (
            self.slots == other.slots
            and self.front == other.front
            and self.rear == other.rear
            and self.count == other.count
        )

    def __repr__(self) -> str:
        return f"CircularQueue({self.to_list()}, front={self.front}, count={self.count})"
