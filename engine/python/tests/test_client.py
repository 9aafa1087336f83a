"""Simple WebSocket test client for manual testing.

Usage:
    python tests/test_client.py              - scripted session
    python tests/test_client.py interactive  - play from the keyboard
"""

import asyncio
import json
import os

import pytest
import websockets


RUN_WS_TESTS = os.getenv("RUN_WS_TESTS") == "1"
URI = "ws://localhost:8000/ws"


@pytest.mark.asyncio
async def test_game_session():
    """Test a complete game session against a running server."""
    if not RUN_WS_TESTS:
        pytest.skip("WebSocket integration test requires RUN_WS_TESTS=1 and backend server.")

    print("Connecting to WebSocket server...")
    async with websockets.connect(URI) as websocket:
        await websocket.send(json.dumps({"type": "hello", "version": "r1.0.0"}))
        data = json.loads(await websocket.recv())
        print(f"   Server: {data}")

        await websocket.send(json.dumps({"type": "reset", "seed": 42}))
        data = json.loads(await websocket.recv())
        first = data["data"]["queue"][0]
        print(f"   Game reset. Queue: {data['data']['queue']}")

        for action in ["RESERVE", "PLAY", "SWAP", "UNDO", "USE_RESERVE"]:
            await websocket.send(json.dumps({"type": "action", "action": action}))
            data = json.loads(await websocket.recv())
            print(f"   {action:11} → ok={data['ok']}, events: {data['info'].get('events', [])}")

        assert data["info"]["outcome"]["pieces"] == [first]

        await websocket.send(json.dumps({"type": "action", "action": "INVALID"}))
        data = json.loads(await websocket.recv())
        assert data["type"] == "error"


@pytest.mark.asyncio
async def test_multiple_games():
    """Test resetting into each level."""
    if not RUN_WS_TESTS:
        pytest.skip("WebSocket integration test requires RUN_WS_TESTS=1 and backend server.")

    async with websockets.connect(URI) as websocket:
        await websocket.send(json.dumps({"type": "hello", "version": "r1.0.0"}))
        await websocket.recv()

        for level in ["novice", "adventurer", "master"]:
            await websocket.send(json.dumps({"type": "reset", "seed": 100, "level": level}))
            data = json.loads(await websocket.recv())
            assert data["data"]["level"] == level

            await websocket.send(json.dumps({"type": "action", "action": "PLAY"}))
            data = json.loads(await websocket.recv())
            assert data["ok"]


async def interactive_mode():
    """Interactive mode - control the game via keyboard."""
    print("Commands: play, reserve, use_reserve, swap, undo, exchange, insert, reset, quit")

    async with websockets.connect(URI) as websocket:
        await websocket.send(json.dumps({"type": "hello", "version": "r1.0.0"}))
        await websocket.recv()

        await websocket.send(json.dumps({"type": "reset", "seed": 42}))
        data = json.loads(await websocket.recv())
        print(f"Game started! Queue: {data['data']['queue']}\n")

        while True:
            cmd = input("> ").strip().lower()

            if cmd == "quit":
                break
            elif cmd == "reset":
                await websocket.send(json.dumps({"type": "reset"}))
            else:
                await websocket.send(json.dumps({"type": "action", "action": cmd.upper()}))

            data = json.loads(await websocket.recv())
            if data["type"] == "error":
                print(f"Error: {data['message']}")
                continue

            obs = data["data"]
            print(f"Queue: {obs['queue']}")
            print(f"Stack: {obs['stack']}")
            if not data["ok"]:
                print(f"Refused: {data['error']}")


if __name__ == "__main__":
    import sys

    mode = sys.argv[1] if len(sys.argv) > 1 else "test"

    if mode == "interactive":
        asyncio.run(interactive_mode())
    else:
        asyncio.run(test_game_session())
