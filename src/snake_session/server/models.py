"""Pydantic models for the wire payloads and API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from snake_session.engine import Snapshot


class PointPayload(BaseModel):
    """A board coordinate on the wire."""

    x: int
    y: int


class SnapshotPayload(BaseModel):
    """Game state sent to the player after every tick."""

    model_config = ConfigDict(populate_by_name=True)

    board_width: int = Field(alias="boardWidth")
    board_height: int = Field(alias="boardHeight")
    snake_body: list[PointPayload] = Field(alias="snakeBody")
    food: PointPayload
    score: int
    game_state: str = Field(alias="gameState")

    @classmethod
    def from_snapshot(cls, snapshot: Snapshot) -> SnapshotPayload:
        return cls(
            board_width=snapshot.board_width,
            board_height=snapshot.board_height,
            snake_body=[PointPayload(x=p.x, y=p.y) for p in snapshot.snake_body],
            food=PointPayload(x=snapshot.food.x, y=snapshot.food.y),
            score=snapshot.score,
            game_state=snapshot.state,
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class SessionSummary(BaseModel):
    """Compact session info for list endpoints."""

    session_id: str
    client: str
    state: str
    score: int
    ticks: int
    tick_interval_ms: int


class SessionDetail(SessionSummary):
    """Session info plus the current snapshot."""

    snapshot: SnapshotPayload


class ErrorResponse(BaseModel):
    """Standard error envelope."""

    detail: str
