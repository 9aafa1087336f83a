"""Guarded gameplay actions over a GameState.

Every action checks its preconditions first and leaves the state untouched
when one fails; the failure is reported in the returned ActionOutcome, never
raised.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from reserve_core.piece import Piece
from reserve_core.rng import PieceRNG
from reserve_core.state import GameState, snapshot

# Pieces moved each way by the bulk exchange
EXCHANGE_SIZE = 3


class GameAction(Enum):
    """Actions a player can take on a turn."""
    PLAY = "PLAY"                # Play the front piece
    RESERVE = "RESERVE"          # Move the front piece onto the stack
    USE_RESERVE = "USE_RESERVE"  # Play the top reserved piece
    SWAP = "SWAP"                # Swap queue front with stack top
    UNDO = "UNDO"                # Restore the last snapshot
    EXCHANGE = "EXCHANGE"        # 3-for-3 exchange between queue and stack
    INSERT = "INSERT"            # Add one new piece to the queue


class ActionError(str, Enum):
    """Recoverable precondition failures."""
    QUEUE_EMPTY = "QUEUE_EMPTY"
    QUEUE_FULL = "QUEUE_FULL"
    STACK_EMPTY = "STACK_EMPTY"
    STACK_FULL = "STACK_FULL"
    INSUFFICIENT_FOR_BULK_EXCHANGE = "INSUFFICIENT_FOR_BULK_EXCHANGE"


ERROR_MESSAGES: Dict[ActionError, str] = {
    ActionError.QUEUE_EMPTY: "Queue is empty!",
    ActionError.QUEUE_FULL: "Queue is full!",
    ActionError.STACK_EMPTY: "Reserve stack is empty!",
    ActionError.STACK_FULL: "Reserve stack is full!",
    ActionError.INSUFFICIENT_FOR_BULK_EXCHANGE: (
        f"Action requires {EXCHANGE_SIZE} pieces in the stack "
        f"and at least {EXCHANGE_SIZE} in the queue."
    ),
}


@dataclass
class ActionOutcome:
    """Result of one action."""
    action: GameAction
    ok: bool
    error: Optional[ActionError] = None
    pieces: List[Piece] = field(default_factory=list)  # Pieces the action moved
    replenished: Optional[Piece] = None  # Piece generated to refill the queue

    @property
    def message(self) -> Optional[str]:
        return ERROR_MESSAGES[self.error] if self.error else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert outcome to dictionary for serialization."""
        return {
            "action": self.action.value,
            "ok": self.ok,
            "error": self.error.value if self.error else None,
            "message": self.message,
            "pieces": [p.to_dict() for p in self.pieces],
            "replenished": self.replenished.to_dict() if self.replenished else None,
        }


def _failed(action: GameAction, error: ActionError) -> ActionOutcome:
    return ActionOutcome(action=action, ok=False, error=error)


def _replenish(state: GameState, rng: PieceRNG) -> Optional[Piece]:
    """Top the queue back up by one piece if there is room.

    Returns:
        The new piece, or None if the queue was already full
    """
    if state.queue.is_full():
        return None
    piece = rng.generate(state.counter)
    state.queue.enqueue(piece)
    return piece


def play(state: GameState, rng: PieceRNG, replenish: bool = True) -> ActionOutcome:
    """Play the front piece of the queue.

    Args:
        state: Game state to mutate
        rng: Generator for the replacement piece
        replenish: Refill the queue after playing

    Returns:
        Outcome with the played piece
    """
    if state.queue.is_empty():
        return _failed(GameAction.PLAY, ActionError.QUEUE_EMPTY)

    played = state.queue.dequeue()
    new_piece = _replenish(state, rng) if replenish else None
    return ActionOutcome(GameAction.PLAY, True, pieces=[played], replenished=new_piece)


def reserve(state: GameState, rng: PieceRNG) -> ActionOutcome:
    """Move the front piece of the queue onto the reserve stack."""
    if state.stack.is_full():
        return _failed(GameAction.RESERVE, ActionError.STACK_FULL)
    if state.queue.is_empty():
        return _failed(GameAction.RESERVE, ActionError.QUEUE_EMPTY)

    reserved = state.queue.dequeue()
    state.stack.push(reserved)
    new_piece = _replenish(state, rng)
    return ActionOutcome(GameAction.RESERVE, True, pieces=[reserved], replenished=new_piece)


def use_reserve(state: GameState) -> ActionOutcome:
    """Play (discard) the top reserved piece. The queue is not touched."""
    if state.stack.is_empty():
        return _failed(GameAction.USE_RESERVE, ActionError.STACK_EMPTY)

    used = state.stack.pop()
    return ActionOutcome(GameAction.USE_RESERVE, True, pieces=[used])


def swap_front_top(state: GameState) -> ActionOutcome:
    """Exchange the queue's front piece with the stack's top piece in place.

    No ids are consumed and neither container changes size.
    """
    if state.queue.is_empty():
        return _failed(GameAction.SWAP, ActionError.QUEUE_EMPTY)
    if state.stack.is_empty():
        return _failed(GameAction.SWAP, ActionError.STACK_EMPTY)

    front = state.queue.peek()
    top = state.stack.replace_top(front)
    state.queue.replace_front(top)
    return ActionOutcome(GameAction.SWAP, True, pieces=[front, top])


def bulk_exchange(state: GameState) -> ActionOutcome:
    """Swap the stack's 3 pieces with the queue's front 3.

    The stack's pieces are enqueued in the order they were popped (top first),
    followed by whatever was behind the front 3 in the queue. The queue's
    front 3 are pushed in reverse so the old queue front ends on top.

    Example (stack listed top to base, queue front to rear):
        stack [Z, Y, X], queue [A, B, C, D, E]
        -> stack [A, B, C], queue [Z, Y, X, D, E]
    """
    if len(state.stack) < EXCHANGE_SIZE or len(state.queue) < EXCHANGE_SIZE:
        return _failed(GameAction.EXCHANGE, ActionError.INSUFFICIENT_FOR_BULK_EXCHANGE)

    from_stack = [state.stack.pop() for _ in range(EXCHANGE_SIZE)]
    from_queue = [state.queue.dequeue() for _ in range(EXCHANGE_SIZE)]
    remainder = []
    while not state.queue.is_empty():
        remainder.append(state.queue.dequeue())

    for piece in reversed(from_queue):
        state.stack.push(piece)
    for piece in from_stack + remainder:
        state.queue.enqueue(piece)

    return ActionOutcome(GameAction.EXCHANGE, True, pieces=from_stack + from_queue)


def undo(state: GameState, previous: GameState) -> ActionOutcome:
    """Restore state from the retained snapshot. Always succeeds."""
    snapshot(state, previous)
    return ActionOutcome(GameAction.UNDO, True)


def insert(state: GameState, rng: PieceRNG) -> ActionOutcome:
    """Generate a new piece and add it at the rear of the queue."""
    if state.queue.is_full():
        return _failed(GameAction.INSERT, ActionError.QUEUE_FULL)

    piece = rng.generate(state.counter)
    state.queue.enqueue(piece)
    return ActionOutcome(GameAction.INSERT, True, pieces=[piece])
