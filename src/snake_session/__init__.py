"""Snake Session — server-authoritative single-player snake engine."""

from snake_session.board import Board, Point
from snake_session.commands import parse_command
from snake_session.config import ServerConfig
from snake_session.engine import GameConfig, GameEngine, GameState, Snapshot
from snake_session.food import BoardFullError, FoodSpawner
from snake_session.session import (
    EndReason,
    SessionLoop,
    SessionResult,
    Transport,
    TransportClosedError,
)
from snake_session.snake import Direction, Snake

__all__ = [
    "Board",
    "BoardFullError",
    "Direction",
    "EndReason",
    "FoodSpawner",
    "GameConfig",
    "GameEngine",
    "GameState",
    "Point",
    "ServerConfig",
    "SessionLoop",
    "SessionResult",
    "Snake",
    "Snapshot",
    "Transport",
    "TransportClosedError",
    "parse_command",
]
