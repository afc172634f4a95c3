"""
Element Routes
===============

API routes for the property editor: edits to the selected element.
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..models.canvas_models import CanvasElement, StyleValue
from ..models.view_models import PropertyPanelView
from .canvas_routes import get_canvas_session

router = APIRouter(prefix="/api/element", tags=["elements"])


class ContentRequest(BaseModel):
    """Request to replace the selected element's content."""
    content: str


class StyleRequest(BaseModel):
    """Request to set one style property of the selected element."""
    name: str
    value: StyleValue


class ElementResponse(BaseModel):
    """Response for element edits."""
    element: CanvasElement
    selected_index: int
    message: str


@router.get("/{session_id}/panel")
async def get_panel(session_id: str) -> PropertyPanelView:
    """Property panel for the selected element."""
    return get_canvas_session(session_id).editor.panel()


@router.put("/{session_id}/content")
async def update_content(session_id: str, request: ContentRequest) -> ElementResponse:
    """Replace the content of the selected element."""
    session = get_canvas_session(session_id)
    if not session.editor.update_content(request.content):
        raise HTTPException(status_code=409, detail="No element selected")

    session.touch()
    return ElementResponse(
        element=session.controller.selected_element,
        selected_index=session.controller.selected_index,
        message="Content updated"
    )


@router.put("/{session_id}/style")
async def update_style(session_id: str, request: StyleRequest) -> ElementResponse:
    """Set one style property of the selected element."""
    session = get_canvas_session(session_id)
    if not session.editor.update_style(request.name, request.value):
        raise HTTPException(status_code=409, detail="No element selected")

    session.touch()
    return ElementResponse(
        element=session.controller.selected_element,
        selected_index=session.controller.selected_index,
        message="Style updated"
    )
