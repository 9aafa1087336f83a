"""FastAPI WebSocket server for the reserve game."""

import json
import logging
from typing import Optional

from fastapi import FastAPI, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from reserve_core.actions import GameAction
from reserve_core.env import Level, ReserveEnv
from api.protocol import (
    PROTOCOL_VERSION,
    HelloRequest,
    HelloResponse,
    ResetRequest,
    ActionRequest,
    ObservationResponse,
    ErrorResponse,
    ErrorCode,
    parse_message,
    to_dict,
)

app = FastAPI(title="ReserveCore API", version="0.1.0")

# Enable CORS for web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:5173"],  # Vite default ports
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class GameNotInitialized(Exception):
    """Raised when an action arrives before the first reset."""


class GameSession:
    """Manages a single game session."""

    def __init__(self):
        self.env: Optional[ReserveEnv] = None
        self.initialized = False

    def reset(self, seed: Optional[int] = None, level: str = "master") -> ObservationResponse:
        """Start a new game.

        Args:
            seed: Random seed (the env generates one if None)
            level: Level name

        Returns:
            Initial observation response

        Raises:
            ValueError: If the level name is unknown
        """
        try:
            game_level = Level(str(level).lower())
        except ValueError:
            raise ValueError(f"Invalid level: {level}")

        self.env = ReserveEnv(level=game_level)
        obs = self.env.reset(seed)
        self.initialized = True
        logger.info(f"[Session] Reset: level={game_level.value}, seed={obs.seed}")

        return ObservationResponse(
            data=obs.to_dict(),
            ok=True,
            error=None,
            info={"event": "reset", "seed": obs.seed},
        )

    def act(self, action: str) -> ObservationResponse:
        """Execute one action.

        Args:
            action: Action name

        Returns:
            Step result as observation response

        Raises:
            GameNotInitialized: If no game was started
            ValueError: If the action is unknown or not offered at this level
        """
        if not self.initialized or self.env is None:
            raise GameNotInitialized("Game not initialized. Send reset first.")

        try:
            game_action = GameAction[str(action).upper()]
        except KeyError:
            raise ValueError(f"Invalid action: {action}")

        result = self.env.step(game_action)
        info = dict(result.info)
        info["outcome"] = result.outcome.to_dict()

        return ObservationResponse(
            data=result.obs.to_dict(),
            ok=result.ok,
            error=result.outcome.error.value if result.outcome.error else None,
            info=info,
        )


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "service": "reserve-core-api", "version": "0.1.0"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


async def send_error(websocket: WebSocket, code: str, message: str) -> None:
    error = ErrorResponse(code=code, message=message)
    await websocket.send_text(json.dumps(to_dict(error)))


@app.websocket("/ws")
async def websocket_endpoint(websocket: WebSocket):
    """WebSocket endpoint for game communication."""
    await websocket.accept()
    session = GameSession()

    try:
        while True:
            # Receive message
            data = await websocket.receive_text()

            try:
                message_dict = json.loads(data)
                message = parse_message(message_dict)

                if isinstance(message, HelloRequest):
                    if message.version != PROTOCOL_VERSION:
                        await send_error(
                            websocket,
                            ErrorCode.VERSION_MISMATCH,
                            f"Server speaks {PROTOCOL_VERSION}, client sent {message.version}",
                        )
                        continue
                    response = HelloResponse()
                    await websocket.send_text(json.dumps(to_dict(response)))

                elif isinstance(message, ResetRequest):
                    logger.info(f"[WS] Received reset request: seed={message.seed}, level={message.level}")
                    try:
                        obs_response = session.reset(message.seed, message.level)
                        await websocket.send_text(json.dumps(to_dict(obs_response)))
                    except ValueError as e:
                        await send_error(websocket, ErrorCode.INVALID_MESSAGE, str(e))
                    except Exception as e:
                        logger.error(f"[WS] Reset failed: {e}", exc_info=True)
                        await send_error(websocket, ErrorCode.INVALID_MESSAGE, f"Reset error: {str(e)}")

                elif isinstance(message, ActionRequest):
                    logger.info(f"[WS] Received action request: {message.action}")
                    try:
                        obs_response = session.act(message.action)
                        await websocket.send_text(json.dumps(to_dict(obs_response)))
                    except GameNotInitialized as e:
                        await send_error(websocket, ErrorCode.GAME_NOT_INITIALIZED, str(e))
                    except ValueError as e:
                        await send_error(websocket, ErrorCode.INVALID_ACTION, str(e))

            except json.JSONDecodeError as e:
                await send_error(websocket, ErrorCode.INVALID_MESSAGE, f"Invalid JSON: {str(e)}")

            except ValueError as e:
                await send_error(websocket, ErrorCode.INVALID_MESSAGE, str(e))

    except WebSocketDisconnect:
        logger.info("[WS] Client disconnected")
    except Exception as e:
        logger.error(f"[WS] Error: {e}", exc_info=True)
        try:
            await send_error(websocket, ErrorCode.INVALID_MESSAGE, f"Server error: {str(e)}")
        except Exception as send_exc:
            logger.warning(f"[WS] Failed to send error (client may have disconnected): {send_exc}")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
