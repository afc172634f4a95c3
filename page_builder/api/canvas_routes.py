"""
Canvas Routes
==============

API routes for canvas sessions and drag/drop/selection events.
"""

import logging
from fastapi import APIRouter, HTTPException
from typing import Optional
from pydantic import BaseModel

from ..canvas.state_manager import CanvasSession, StateManager
from ..models.canvas_models import DragTransaction
from ..models.view_models import CanvasView

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/canvas", tags=["canvas"])

# Injected by server
state_manager: Optional[StateManager] = None


class DropRequest(BaseModel):
    """Drop event on the canvas or on an element slot."""
    transaction: Optional[DragTransaction] = None
    target_index: Optional[int] = None


class EventResponse(BaseModel):
    """Result of a canvas event."""
    session_id: str
    changed: bool
    state: CanvasView


def get_state_manager() -> StateManager:
    """Dependency to get state manager."""
    if state_manager is None:
        raise HTTPException(500, "State manager not initialized")
    return state_manager


def get_canvas_session(session_id: str) -> CanvasSession:
    """Look up a session or fail with 404."""
    session = get_state_manager().get_session(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return session


def _event_response(session: CanvasSession, changed: bool) -> EventResponse:
    if changed:
        session.touch()
    return EventResponse(
        session_id=session.session_id,
        changed=changed,
        state=session.controller.view()
    )


@router.post("/session")
async def create_session():
    """Create a new canvas session."""
    session_id = get_state_manager().create_session()
    return {"session_id": session_id, "message": "Session created"}


@router.get("/state/{session_id}")
async def get_state(session_id: str) -> CanvasView:
    """Get canvas render state for session."""
    return get_canvas_session(session_id).controller.view()


@router.delete("/state/{session_id}")
async def close_session(session_id: str):
    """Close the session and discard its canvas."""
    if not get_state_manager().close_session(session_id):
        raise HTTPException(status_code=404, detail="Session not found")

    return {"message": "Session closed", "session_id": session_id}


@router.post("/{session_id}/dragover")
async def drag_over(session_id: str):
    """Allow-drop acknowledgement. Never changes state."""
    session = get_canvas_session(session_id)
    return {"session_id": session_id, "allow_drop": session.controller.drag_over()}


@router.post("/{session_id}/drop")
async def drop(session_id: str, request: DropRequest) -> EventResponse:
    """Drop a palette payload on the canvas, or complete a reorder on a slot."""
    session = get_canvas_session(session_id)
    try:
        changed = session.controller.handle_drop(request.transaction, request.target_index)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return _event_response(session, changed)


@router.post("/{session_id}/dragend")
async def drag_end(session_id: str) -> EventResponse:
    """Finish a drag gesture without a drop."""
    session = get_canvas_session(session_id)
    session.controller.drag_end()
    return _event_response(session, False)


@router.post("/{session_id}/elements/{index}/dragstart")
async def element_drag_start(session_id: str, index: int) -> EventResponse:
    """Pick up a placed element for reordering."""
    session = get_canvas_session(session_id)
    if not session.controller.element_drag_start(index):
        raise HTTPException(status_code=404, detail="Element not found")

    return _event_response(session, False)


@router.post("/{session_id}/elements/{index}/drop")
async def element_drop(session_id: str, index: int) -> EventResponse:
    """Drop the dragged element on the slot at index."""
    session = get_canvas_session(session_id)
    changed = session.controller.element_drop(index)
    return _event_response(session, changed)


@router.post("/{session_id}/elements/{index}/select")
async def select_element(session_id: str, index: int) -> EventResponse:
    """Select the element at index."""
    session = get_canvas_session(session_id)
    if not session.controller.select(index):
        raise HTTPException(status_code=404, detail="Element not found")

    return _event_response(session, False)
