"""Board bounds and free-cell queries for the snake game."""

from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    """An ``(x, y)`` board coordinate; ``x`` grows rightward, ``y`` downward."""

    x: int
    y: int


class Board:
    """Static grid of ``width`` × ``height`` cells.

    Legal coordinates are ``0 <= x < width`` and ``0 <= y < height``.
    The board holds no cell state; occupancy is owned by the snake.
    """

    __slots__ = ("_width", "_height")

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("Board dimensions must be positive.")
        self._width = width
        self._height = height

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cell_count(self) -> int:
        return self._width * self._height

    def is_out_of_bounds(self, p: Point) -> bool:
        """Check whether a point lies outside the board."""
        return p.x < 0 or p.x >= self._width or p.y < 0 or p.y >= self._height

    def free_cells(self, occupied: Iterable[Point]) -> list[Point]:
        """Return every in-bounds cell not present in *occupied*.

        Cells are listed in row-major order (by ``y``, then ``x``).
        """
        mask = np.ones((self._height, self._width), dtype=bool)
        for p in occupied:
            if not self.is_out_of_bounds(p):
                mask[p.y, p.x] = False
        ys, xs = np.nonzero(mask)
        return [Point(x, y) for y, x in zip(ys.tolist(), xs.tolist(), strict=True)]

    def __repr__(self) -> str:
        return f"Board(width={self._width}, height={self._height})"
