"""
Palette Routes
===============

API routes for the element palette.
"""

from fastapi import APIRouter

from ..canvas.palette import Palette
from ..models.canvas_models import DragTransaction, ElementType

router = APIRouter(prefix="/api/palette", tags=["palette"])

palette = Palette()


@router.get("")
async def list_kinds():
    """Element kinds offered for dragging."""
    return {"kinds": [kind.value for kind in palette.kinds()]}


@router.post("/{kind}/dragstart")
async def drag_start(kind: ElementType) -> DragTransaction:
    """Start dragging a kind; send the returned transaction with the drop."""
    return palette.drag_start(kind)
