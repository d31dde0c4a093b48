"""Shared fixtures."""

from __future__ import annotations

import asyncio

import pytest

from snake_session.engine import Snapshot
from snake_session.session import TransportClosedError


class FakeTransport:
    """In-memory transport: feed commands via ``inbound``, read ``sent``.

    Putting ``None`` on ``inbound`` simulates the peer disconnecting.
    """

    def __init__(self, send_error: Exception | None = None) -> None:
        self.inbound: asyncio.Queue[str | None] = asyncio.Queue()
        self.sent: list[Snapshot] = []
        self.closed = False
        self.send_error = send_error

    async def send(self, snapshot: Snapshot) -> None:
        if self.send_error is not None:
            raise self.send_error
        self.sent.append(snapshot)

    async def receive(self) -> str:
        item = await self.inbound.get()
        if item is None:
            raise TransportClosedError("Peer went away.")
        return item

    async def close(self) -> None:
        self.closed = True


@pytest.fixture()
def make_transport():
    return FakeTransport
