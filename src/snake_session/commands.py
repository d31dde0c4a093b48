"""Decoding of inbound player commands."""

from __future__ import annotations

import logging

from snake_session.snake import Direction

logger = logging.getLogger(__name__)

_DIRECTION_MAP: dict[str, Direction] = {
    "UP": Direction.UP,
    "DOWN": Direction.DOWN,
    "LEFT": Direction.LEFT,
    "RIGHT": Direction.RIGHT,
}


def parse_command(token: str) -> Direction | None:
    """Map a direction token to a :class:`Direction`.

    Tokens are exact and case-sensitive. Anything else returns ``None``.
    """
    direction = _DIRECTION_MAP.get(token)
    if direction is None:
        logger.debug("Ignoring unknown command %r.", token)
    return direction
