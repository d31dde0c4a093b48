"""Tick-based game engine composing board, snake, and food logic."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

import numpy as np

from snake_session.board import Board, Point
from snake_session.food import FoodSpawner
from snake_session.snake import Direction, Snake

logger = logging.getLogger(__name__)


class GameState(enum.Enum):
    """Lifecycle states of a single game."""

    RUNNING = "Running"
    LOST = "Lost"
    # Reserved for a full-board win; no transition reaches it.
    WON = "Won"


@dataclass(frozen=True)
class GameConfig:
    """Configuration for a single-player game."""

    board_width: int = 30
    board_height: int = 20
    initial_length: int = 3
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.board_width < 1 or self.board_height < 1:
            raise ValueError("board_width and board_height must be positive.")
        if self.initial_length < 1:
            raise ValueError("initial_length must be at least 1.")
        # Segments trail leftward from the centre column; any past x=0 lie
        # off the board until the tail moves on.
        on_board = min(self.initial_length, self.board_width // 2 + 1)
        if on_board >= self.board_width * self.board_height:
            raise ValueError("The board must leave at least one cell for food.")

    @property
    def start(self) -> Point:
        return Point(self.board_width // 2, self.board_height // 2)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of a game after a tick."""

    board_width: int
    board_height: int
    snake_body: tuple[Point, ...]
    food: Point
    score: int
    state: str


class GameEngine:
    """Single-snake, tick-based game engine.

    The engine owns the board, snake, food, score and a private random
    generator seeded at creation. Each call to :meth:`tick` advances the
    game by one step; once the game leaves ``RUNNING`` every further
    ``tick`` or ``set_direction`` call is a no-op.
    """

    def __init__(self, config: GameConfig | None = None) -> None:
        self.config = config if config is not None else GameConfig()
        self.board = Board(self.config.board_width, self.config.board_height)
        self.rng = np.random.default_rng(self.config.seed)
        self.snake = Snake(
            self.config.start, self.config.initial_length, Direction.RIGHT,
        )
        self.food_spawner = FoodSpawner(self.board, rng=self.rng)
        self.food = self.food_spawner.spawn(self.snake)

        self._state = GameState.RUNNING
        self._score = 0
        self._tick_count = 0

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    @property
    def tick_count(self) -> int:
        return self._tick_count

    @property
    def running(self) -> bool:
        return self._state is GameState.RUNNING

    def set_direction(self, direction: Direction) -> None:
        """Steer the snake; ignored once the game is over."""
        if self._state is GameState.RUNNING:
            self.snake.set_direction(direction)

    def tick(self) -> None:
        """Advance the game by one step."""
        if self._state is not GameState.RUNNING:
            return
        self._tick_count += 1

        next_head = self.snake.move()

        # Wall collision takes precedence over self-collision.
        if self.board.is_out_of_bounds(next_head):
            self._end(GameState.LOST, "hit the wall", next_head)
            return

        if self.snake.check_self_collision():
            self._end(GameState.LOST, "ran into itself", next_head)
            return

        if next_head == self.food:
            self._score += 1
            self.snake.grow(1)
            self._respawn_food()

    def snapshot(self) -> Snapshot:
        """Return the read-only view emitted to the player."""
        return Snapshot(
            board_width=self.board.width,
            board_height=self.board.height,
            snake_body=self.snake.body,
            food=self.food,
            score=self._score,
            state=self._state.value,
        )

    def _respawn_food(self) -> None:
        # The head sits on the eaten food; keep it there if nothing is free.
        if not self.board.free_cells(self.snake.body):
            logger.warning("Board is full; food stays at %s.", tuple(self.food))
            return
        self.food = self.food_spawner.spawn(self.snake)

    def _end(self, state: GameState, cause: str, at: Point) -> None:
        self._state = state
        logger.info(
            "Snake %s at %s on tick %d with score %d.",
            cause, tuple(at), self._tick_count, self._score,
        )
