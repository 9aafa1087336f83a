"""Protocol data classes for WebSocket communication."""

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional, Literal
from enum import Enum

PROTOCOL_VERSION = "r1.0.0"


class MessageType(str, Enum):
    """WebSocket message types."""
    HELLO = "hello"
    RESET = "reset"
    ACTION = "action"
    OBS = "obs"
    ERROR = "error"


@dataclass
class HelloRequest:
    """Client hello message."""
    type: Literal["hello"] = "hello"
    version: str = PROTOCOL_VERSION


@dataclass
class HelloResponse:
    """Server hello response."""
    type: Literal["hello"] = "hello"
    version: str = PROTOCOL_VERSION
    server: str = "reserve-core-py"


@dataclass
class ResetRequest:
    """Request to start a new game."""
    seed: Optional[int] = None
    level: str = "master"  # "novice", "adventurer" or "master"
    type: Literal["reset"] = "reset"

    def __post_init__(self):
        # bool is an int subclass but not a usable seed
        if self.seed is not None and (
            isinstance(self.seed, bool) or not isinstance(self.seed, int)
        ):
            raise ValueError(f"Invalid seed: {self.seed!r} (expected integer or null)")
        if not isinstance(self.level, str):
            raise ValueError(f"Invalid level: {self.level!r}")


@dataclass
class ActionRequest:
    """Request to run one action."""
    action: str  # PLAY, RESERVE, USE_RESERVE, SWAP, UNDO, EXCHANGE, INSERT
    type: Literal["action"] = "action"


@dataclass
class ObservationResponse:
    """Game state observation response."""
    data: Dict[str, Any]  # Observation dict from env.to_dict()
    ok: bool
    error: Optional[str]  # ActionError value when the action was refused
    info: Dict[str, Any]
    type: Literal["obs"] = "obs"


@dataclass
class ErrorResponse:
    """Error response."""
    code: str
    message: str
    details: Optional[Dict[str, Any]] = None
    type: Literal["error"] = "error"


class ErrorCode:
    """Standard error codes."""
    INVALID_MESSAGE = "INVALID_MESSAGE"
    INVALID_ACTION = "INVALID_ACTION"
    GAME_NOT_INITIALIZED = "GAME_NOT_INITIALIZED"
    VERSION_MISMATCH = "VERSION_MISMATCH"


def parse_message(data: Dict[str, Any]) -> Any:
    """Parse incoming WebSocket message.

    Args:
        data: JSON message dict

    Returns:
        Parsed message object

    Raises:
        ValueError: If message type or fields are invalid
    """
    if not isinstance(data, dict):
        raise ValueError("Message must be a JSON object")

    msg_type = data.get("type")

    try:
        if msg_type == MessageType.HELLO:
            return HelloRequest(**data)
        elif msg_type == MessageType.RESET:
            return ResetRequest(**data)
        elif msg_type == MessageType.ACTION:
            return ActionRequest(**data)
    except TypeError as e:
        raise ValueError(f"Invalid fields for {msg_type}: {e}") from e

    raise ValueError(f"Unknown message type: {msg_type}")


def to_dict(obj: Any) -> Dict[str, Any]:
    """Convert dataclass to dict for JSON serialization.

    Args:
        obj: Dataclass instance

    Returns:
        Dictionary representation
    """
    return asdict(obj)
