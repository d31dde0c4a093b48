"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque

from snake_session.board import Point


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of body points.

    The head is ``body[0]``; the tail is ``body[-1]``. Segments trail
    behind the head, opposite to the initial direction.
    """

    def __init__(
        self,
        start: Point,
        length: int = 3,
        direction: Direction = Direction.RIGHT,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = direction.value
        self._body: deque[Point] = deque(
            Point(start.x - dx * i, start.y - dy * i) for i in range(length)
        )
        self.direction = direction
        self._grow_pending = 0

    @property
    def head(self) -> Point:
        """Return the head coordinate."""
        return self._body[0]

    @property
    def body(self) -> tuple[Point, ...]:
        """Return a copy of the body, head first."""
        return tuple(self._body)

    @property
    def grow_pending(self) -> int:
        return self._grow_pending

    def __len__(self) -> int:
        return len(self._body)

    def set_direction(self, new_direction: Direction) -> None:
        """Change direction, ignoring 180° reversals."""
        if _OPPOSITES[new_direction] != self.direction:
            self.direction = new_direction

    def move(self) -> Point:
        """Move the snake one step forward and return the new head.

        The tail is kept while growth is pending, otherwise it is dropped.
        No bounds or collision checks happen here.
        """
        dx, dy = self.direction.value
        head = self._body[0]
        new_head = Point(head.x + dx, head.y + dy)
        self._body.appendleft(new_head)
        if self._grow_pending > 0:
            self._grow_pending -= 1
        else:
            self._body.pop()
        return new_head

    def grow(self, segments: int = 1) -> None:
        """Queue growth for the next *segments* moves."""
        if segments < 0:
            raise ValueError("Growth must be non-negative.")
        self._grow_pending += segments

    def check_self_collision(self) -> bool:
        """Check whether the head overlaps any other body segment."""
        head = self._body[0]
        return any(self._body[i] == head for i in range(1, len(self._body)))

    def is_on_snake(self, p: Point) -> bool:
        """Check whether the snake occupies a given point, head included."""
        return p in self._body
