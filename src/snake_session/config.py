"""Server configuration."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path

from snake_session.engine import GameConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ServerConfig:
    """Settings shared by every session the server opens.

    Supports JSON serialization so a deployment can be pinned in a file.
    """

    # Game
    board_width: int = 30
    board_height: int = 20
    initial_length: int = 3

    # Session
    tick_interval_ms: int = 120

    # Network
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 8080

    def __post_init__(self) -> None:
        if self.tick_interval_ms < 1:
            raise ValueError("tick_interval_ms must be at least 1.")
        if not 0 <= self.port <= 65535:
            raise ValueError("port must be between 0 and 65535.")
        # Fail at startup rather than on the first connection.
        self.game_config()

    @property
    def tick_interval(self) -> float:
        """Tick interval in seconds."""
        return self.tick_interval_ms / 1000.0

    def game_config(self, seed: int | None = None) -> GameConfig:
        """Build the per-session game configuration."""
        return GameConfig(
            board_width=self.board_width,
            board_height=self.board_height,
            initial_length=self.initial_length,
            seed=seed,
        )

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> ServerConfig:
        """Load config from a JSON file."""
        return cls(**json.loads(Path(path).read_text()))
