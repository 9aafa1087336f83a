"""Game state aggregate and single-level snapshot."""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from reserve_core.circular_queue import CircularQueue
from reserve_core.linear_stack import LinearStack
from reserve_core.piece import IdCounter, Piece
from reserve_core.rng import PieceRNG


@dataclass
class GameState:
    """Queue of next pieces, reserve stack and the id counter."""

    queue: CircularQueue = field(default_factory=CircularQueue)
    stack: LinearStack = field(default_factory=LinearStack)
    counter: IdCounter = field(default_factory=IdCounter)

    @property
    def next_id(self) -> int:
        return self.counter.value

    def queue_view(self) -> Tuple[Piece, ...]:
        """Queue contents, front to rear."""
        return self.queue.view()

    def stack_view(self) -> Tuple[Piece, ...]:
        """Stack contents, top to base."""
        return self.stack.view()

    def clone(self) -> "GameState":
        """Deep copy sharing no storage with this state."""
        return GameState(
            queue=self.queue.copy(),
            stack=self.stack.copy(),
            counter=self.counter.copy(),
        )

    def copy_from(self, other: "GameState") -> None:
        """Overwrite every field of this state with a copy of another's."""
        self.queue.copy_from(other.queue)
        self.stack.copy_from(other.stack)
        self.counter.value = other.counter.value

    def to_dict(self) -> Dict[str, Any]:
        return {
            "queue": [p.to_dict() for p in self.queue.to_list()],
            "stack": [p.to_dict() for p in self.stack.to_list()],
            "next_id": self.next_id,
        }


def snapshot(dest: GameState, src: GameState) -> None:
    """Copy the whole of src into dest.

    Args:
        dest: State to overwrite (the undo slot, or the live state on undo)
        src: State to copy from
    """
    dest.copy_from(src)


def new_game(rng: PieceRNG) -> GameState:
    """Create a state with a full queue, an empty stack and ids 0..4 used.

    Args:
        rng: Shape generator

    Returns:
        Fresh game state
    """
    state = GameState()
    while not state.queue.is_full():
        state.queue.enqueue(rng.generate(state.counter))
    return state
