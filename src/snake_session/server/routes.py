"""REST route handlers for inspecting live sessions."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, Request

from snake_session.server.models import ErrorResponse, SessionDetail, SessionSummary

router = APIRouter(tags=["sessions"])


def _get_registry(request: Request):
    return request.app.state.registry


@router.get("/health")
async def health(request: Request) -> dict:
    """Liveness probe with the number of running sessions."""
    return {"status": "ok", "sessions": len(_get_registry(request))}


@router.get("/sessions")
async def list_sessions(request: Request) -> list[SessionSummary]:
    """List running sessions."""
    return _get_registry(request).list_sessions()


@router.get(
    "/sessions/{session_id}",
    responses={404: {"model": ErrorResponse}},
)
async def get_session(session_id: str, request: Request) -> SessionDetail:
    """Get a running session with its current snapshot."""
    handle = _get_registry(request).get(session_id)
    if handle is None:
        raise HTTPException(status_code=404, detail="Session not found.")
    return handle.detail()
