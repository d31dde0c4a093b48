"""Per-connection session loop driving one game engine.

A :class:`SessionLoop` is a single-owner actor: only the coroutine running
:meth:`SessionLoop.run` touches the engine. A ticker task and an input
reader task feed it events through one ordered queue, so a direction
change can never interleave with a tick in progress.
"""

from __future__ import annotations

import asyncio
import enum
import logging
from dataclasses import dataclass
from typing import Protocol

from snake_session.commands import parse_command
from snake_session.engine import GameEngine, GameState, Snapshot
from snake_session.snake import Direction

logger = logging.getLogger(__name__)

DEFAULT_TICK_INTERVAL = 0.12  # seconds


class TransportClosedError(ConnectionError):
    """Raised by a transport when the peer has gone away."""


class Transport(Protocol):
    """External connection a session streams snapshots to and reads from."""

    async def send(self, snapshot: Snapshot) -> None: ...

    async def receive(self) -> str: ...

    async def close(self) -> None: ...


class EndReason(str, enum.Enum):
    """Why a session stopped."""

    GAME_OVER = "game_over"
    DISCONNECTED = "disconnected"
    SEND_FAILED = "send_failed"
    RECEIVE_FAILED = "receive_failed"
    STOPPED = "stopped"


@dataclass(frozen=True)
class SessionResult:
    """Final outcome of a session."""

    state: GameState
    score: int
    ticks: int
    reason: EndReason


class _Tick:
    __slots__ = ()


@dataclass(frozen=True)
class _Closed:
    reason: EndReason


_TICK = _Tick()


class SessionLoop:
    """Ticks one engine on a fixed interval and applies player input.

    Each tick event advances the engine and sends the resulting snapshot.
    The loop ends after the first snapshot whose state is not ``RUNNING``,
    on any transport failure, or when :meth:`stop` is called. Transport
    errors are never retried.
    """

    def __init__(
        self,
        engine: GameEngine,
        transport: Transport,
        tick_interval: float = DEFAULT_TICK_INTERVAL,
    ) -> None:
        if tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        self.engine = engine
        self.transport = transport
        self.tick_interval = tick_interval
        self._queue: asyncio.Queue[_Tick | _Closed | Direction] = asyncio.Queue()
        self._tick_done = asyncio.Event()
        self._started = False

    async def run(self) -> SessionResult:
        """Drive the session until it ends and return its outcome."""
        if self._started:
            raise RuntimeError("SessionLoop.run() may only be called once.")
        self._started = True

        ticker = asyncio.create_task(self._ticker())
        reader = asyncio.create_task(self._reader())
        try:
            reason = await self._process()
        finally:
            ticker.cancel()
            reader.cancel()
            await asyncio.gather(ticker, reader, return_exceptions=True)
            await self._close_transport()

        return SessionResult(
            state=self.engine.state,
            score=self.engine.score,
            ticks=self.engine.tick_count,
            reason=reason,
        )

    def stop(self) -> None:
        """Ask a running session to end after the events already queued."""
        self._queue.put_nowait(_Closed(EndReason.STOPPED))

    async def _process(self) -> EndReason:
        while True:
            event = await self._queue.get()

            if isinstance(event, Direction):
                self.engine.set_direction(event)
                continue
            if isinstance(event, _Closed):
                return event.reason

            self.engine.tick()
            try:
                await self.transport.send(self.engine.snapshot())
            except TransportClosedError:
                logger.info("Peer closed while sending a snapshot.")
                return EndReason.DISCONNECTED
            except Exception:
                logger.warning("Failed to send snapshot.", exc_info=True)
                return EndReason.SEND_FAILED
            finally:
                self._tick_done.set()

            if not self.engine.running:
                return EndReason.GAME_OVER

    async def _ticker(self) -> None:
        loop = asyncio.get_running_loop()
        deadline = loop.time() + self.tick_interval
        while True:
            await asyncio.sleep(max(0.0, deadline - loop.time()))
            self._tick_done.clear()
            self._queue.put_nowait(_TICK)
            # At most one tick is in flight; a slow send holds the clock.
            await self._tick_done.wait()
            deadline += self.tick_interval
            now = loop.time()
            if deadline < now:
                # Missed slots are dropped, not replayed.
                deadline = now + self.tick_interval

    async def _reader(self) -> None:
        try:
            while True:
                raw = await self.transport.receive()
                direction = parse_command(raw)
                if direction is not None:
                    self._queue.put_nowait(direction)
        except TransportClosedError:
            logger.info("Peer disconnected.")
            self._queue.put_nowait(_Closed(EndReason.DISCONNECTED))
        except Exception:
            logger.warning("Failed to receive from peer.", exc_info=True)
            self._queue.put_nowait(_Closed(EndReason.RECEIVE_FAILED))

    async def _close_transport(self) -> None:
        try:
            await self.transport.close()
        except Exception:
            logger.warning("Failed closing transport.", exc_info=True)
