"""Plain-text rendering of the queue and the reserve stack."""

from typing import Sequence

from reserve_core.actions import ActionOutcome, GameAction
from reserve_core.env import Observation
from reserve_core.piece import Piece

EMPTY_MARKER = "[EMPTY]"


def format_pieces(pieces: Sequence[Piece]) -> str:
    """Format pieces as "[T 3] [I 4]", or the empty marker."""
    if not pieces:
        return EMPTY_MARKER
    return " ".join(str(p) for p in pieces)


def render_queue(pieces: Sequence[Piece]) -> str:
    return f"Piece queue: {format_pieces(pieces)}"


def render_stack(pieces: Sequence[Piece]) -> str:
    return f"Reserve stack (top -> base): {format_pieces(pieces)}"


def render(obs: Observation) -> str:
    """Render the observation as the two state lines.

    The stack line is omitted at levels without a reserve stack.
    """
    lines = [render_queue(obs.queue)]
    if GameAction.RESERVE in obs.available_actions:
        lines.append(render_stack(obs.stack))
    return "\n".join(lines)


def describe_outcome(outcome: ActionOutcome) -> str:
    """One-line report of what an action did."""
    if not outcome.ok:
        return f">> ERROR: {outcome.message}"

    action = outcome.action
    if action == GameAction.PLAY:
        text = f">> Piece played: {outcome.pieces[0]}"
    elif action == GameAction.RESERVE:
        text = f">> Piece reserved: {outcome.pieces[0]}"
    elif action == GameAction.USE_RESERVE:
        text = f">> Reserved piece used: {outcome.pieces[0]}"
    elif action == GameAction.SWAP:
        text = ">> Queue front and stack top swapped."
    elif action == GameAction.UNDO:
        text = ">> Last action undone."
    elif action == GameAction.EXCHANGE:
        text = ">> 3x3 exchange done."
    else:
        text = f">> Piece inserted: {outcome.pieces[0]}"

    if outcome.replenished:
        text += f"\n>> New piece {outcome.replenished} entered the queue."
    return text
