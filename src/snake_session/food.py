"""Food placement logic."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from snake_session.board import Board, Point

if TYPE_CHECKING:
    from snake_session.snake import Snake

logger = logging.getLogger(__name__)

# Consecutive rejected draws before switching to a free-cell scan.
_DEFAULT_MAX_ATTEMPTS = 1_000


class BoardFullError(RuntimeError):
    """Raised when no free cell is left to place food on."""


class FoodSpawner:
    """Places food on cells not occupied by the snake.

    Draws uniformly random cells from the session's NumPy generator and
    rejects occupied ones. After ``max_attempts`` consecutive rejections it
    falls back to a uniform choice among the remaining free cells, so a
    nearly full board cannot stall the tick.
    """

    def __init__(
        self,
        board: Board,
        rng: np.random.Generator | None = None,
        max_attempts: int = _DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.board = board
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self, snake: Snake) -> Point:
        """Return a random point within the board that is off the snake."""
        for _ in range(self.max_attempts):
            p = Point(
                int(self.rng.integers(self.board.width)),
                int(self.rng.integers(self.board.height)),
            )
            if not snake.is_on_snake(p):
                return p

        free = self.board.free_cells(snake.body)
        if not free:
            raise BoardFullError("No free cell available for food.")
        logger.debug(
            "Rejection sampling gave up after %d draws; choosing from %d free cells.",
            self.max_attempts, len(free),
        )
        return free[int(self.rng.integers(len(free)))]
