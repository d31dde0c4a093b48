"""WebSocket handler for real-time single-player sessions."""

from __future__ import annotations

import logging

from fastapi import APIRouter, WebSocket

from snake_session.server.registry import SessionRegistry
from snake_session.server.transport import WebSocketTransport

logger = logging.getLogger(__name__)

ws_router = APIRouter()


def _get_registry(ws: WebSocket) -> SessionRegistry:
    return ws.app.state.registry


@ws_router.websocket("/ws")
async def play(websocket: WebSocket) -> None:
    """Player WebSocket: send direction tokens, receive a snapshot each tick."""
    registry = _get_registry(websocket)
    await websocket.accept()

    client = (
        f"{websocket.client.host}:{websocket.client.port}"
        if websocket.client else "unknown"
    )
    handle = registry.open(WebSocketTransport(websocket), client=client)
    logger.info("Client %s connected.", client)

    result = await registry.run(handle)
    logger.info(
        "Client %s disconnected; final state %s, score %d.",
        client, result.state.value, result.score,
    )
