"""In-memory registry of live sessions and their lifecycle."""

from __future__ import annotations

import asyncio
import logging
import uuid
from dataclasses import dataclass, field

from snake_session.config import ServerConfig
from snake_session.engine import GameEngine
from snake_session.server.models import SessionDetail, SessionSummary, SnapshotPayload
from snake_session.session import SessionLoop, SessionResult, Transport

logger = logging.getLogger(__name__)


@dataclass
class SessionHandle:
    """All state for a single live session."""

    session_id: str
    client: str
    engine: GameEngine
    loop: SessionLoop
    _task: asyncio.Task | None = field(default=None, repr=False)

    def summary(self) -> SessionSummary:
        return SessionSummary(
            session_id=self.session_id,
            client=self.client,
            state=self.engine.state.value,
            score=self.engine.score,
            ticks=self.engine.tick_count,
            tick_interval_ms=round(self.loop.tick_interval * 1000),
        )

    def detail(self) -> SessionDetail:
        return SessionDetail(
            **self.summary().model_dump(),
            snapshot=SnapshotPayload.from_snapshot(self.engine.snapshot()),
        )


class SessionRegistry:
    """Tracks every session the server is currently running.

    Sessions share nothing but this index; each owns its own engine.
    """

    def __init__(self, config: ServerConfig | None = None) -> None:
        self.config = config if config is not None else ServerConfig()
        self._sessions: dict[str, SessionHandle] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    def open(
        self,
        transport: Transport,
        client: str = "unknown",
        seed: int | None = None,
    ) -> SessionHandle:
        """Create and register a session bound to *transport*."""
        engine = GameEngine(self.config.game_config(seed=seed))
        loop = SessionLoop(engine, transport, tick_interval=self.config.tick_interval)
        session_id = uuid.uuid4().hex[:12]
        handle = SessionHandle(
            session_id=session_id, client=client, engine=engine, loop=loop,
        )
        self._sessions[session_id] = handle
        logger.info("Session %s opened for %s.", session_id, client)
        return handle

    async def run(self, handle: SessionHandle) -> SessionResult:
        """Run a registered session to completion, then forget it."""
        handle._task = asyncio.create_task(handle.loop.run())
        try:
            result = await handle._task
        finally:
            if not handle._task.done():
                handle._task.cancel()
            self._sessions.pop(handle.session_id, None)
        logger.info(
            "Session %s ended (%s) after %d ticks. Score: %d",
            handle.session_id, result.reason.value, result.ticks, result.score,
        )
        return result

    def get(self, session_id: str) -> SessionHandle | None:
        return self._sessions.get(session_id)

    def list_sessions(self) -> list[SessionSummary]:
        return [h.summary() for h in self._sessions.values()]

    async def cleanup(self) -> None:
        """Stop every live session and wait for them to wind down."""
        tasks = []
        for handle in self._sessions.values():
            if handle._task is not None and not handle._task.done():
                handle.loop.stop()
                tasks.append(handle._task)
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        logger.info("SessionRegistry cleanup complete (%d sessions).", len(tasks))
