"""Starlette WebSocket adapter for the session transport."""

from __future__ import annotations

from starlette.websockets import WebSocket, WebSocketDisconnect, WebSocketState

from snake_session.engine import Snapshot
from snake_session.server.models import SnapshotPayload
from snake_session.session import TransportClosedError


class WebSocketTransport:
    """Sends snapshots as JSON text frames and reads raw command frames."""

    def __init__(self, websocket: WebSocket) -> None:
        self.websocket = websocket

    async def send(self, snapshot: Snapshot) -> None:
        payload = SnapshotPayload.from_snapshot(snapshot).to_json()
        try:
            await self.websocket.send_text(payload)
        except WebSocketDisconnect as exc:
            raise TransportClosedError(f"Peer closed with code {exc.code}.") from exc

    async def receive(self) -> str:
        message = await self.websocket.receive()
        if message["type"] == "websocket.disconnect":
            raise TransportClosedError(
                f"Peer closed with code {message.get('code')}.",
            )
        text = message.get("text")
        if text is None:
            text = (message.get("bytes") or b"").decode("utf-8", errors="replace")
        return text

    async def close(self) -> None:
        if (
            self.websocket.application_state == WebSocketState.CONNECTED
            and self.websocket.client_state == WebSocketState.CONNECTED
        ):
            await self.websocket.close(code=1000, reason="Session ended.")
