"""Load test: many independent sessions running simultaneously."""

from __future__ import annotations

import asyncio

import pytest

from snake_session.config import ServerConfig
from snake_session.server.registry import SessionRegistry
from snake_session.session import EndReason


class TestConcurrentSessions:
    @pytest.mark.asyncio
    async def test_50_concurrent_sessions(self, make_transport):
        """Spin up 50 sessions; each snake runs into the right wall."""
        registry = SessionRegistry(
            ServerConfig(board_width=10, board_height=10, tick_interval_ms=5),
        )
        transports = [make_transport() for _ in range(50)]
        handles = [
            registry.open(t, client=f"test-{i}", seed=i)
            for i, t in enumerate(transports)
        ]
        assert len(registry) == 50

        results = await asyncio.wait_for(
            asyncio.gather(*(registry.run(h) for h in handles)), timeout=10,
        )

        assert all(r.reason is EndReason.GAME_OVER for r in results)
        assert all(r.ticks == 5 for r in results)
        assert all(len(t.sent) == 5 for t in transports)
        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_mixed_inputs(self, make_transport):
        """Sessions steered differently stay independent."""
        registry = SessionRegistry(
            ServerConfig(board_width=10, board_height=10, tick_interval_ms=20),
        )
        commands = ["UP", "DOWN", "RIGHT", "LEFT"] * 5
        transports = []
        for cmd in commands:
            t = make_transport()
            t.inbound.put_nowait(cmd)
            transports.append(t)
        handles = [registry.open(t) for t in transports]

        results = await asyncio.wait_for(
            asyncio.gather(*(registry.run(h) for h in handles)), timeout=10,
        )

        expected_ticks = {"UP": 6, "DOWN": 5, "RIGHT": 5, "LEFT": 5}
        for cmd, result in zip(commands, results, strict=True):
            assert result.ticks == expected_ticks[cmd]
