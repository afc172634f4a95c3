"""
View Models for Page Builder
=============================

Read-only snapshots handed to the rendering layer.
"""

from typing import List, Optional
from pydantic import BaseModel, Field

from .canvas_models import CanvasElement, StyleValue
from .style_models import StyleKind, WidgetType


CANVAS_EMPTY_MESSAGE = "Drag elements here..."
PANEL_PLACEHOLDER = "Select an element to see options"


class ElementView(BaseModel):
    """A placed element as rendered on the canvas."""
    index: int
    selected: bool = False
    element: CanvasElement


class CanvasView(BaseModel):
    """Render state of the canvas."""
    elements: List[ElementView] = Field(default_factory=list)
    selected_index: Optional[int] = None
    dragging_index: Optional[int] = None
    empty_message: Optional[str] = None


class PanelField(BaseModel):
    """A property panel input with its current value."""
    name: str
    label: str
    kind: StyleKind
    widget: WidgetType
    value: StyleValue
    options: List[str] = Field(default_factory=list)


class PropertyPanelView(BaseModel):
    """Render state of the property panel."""
    active: bool
    selected_index: Optional[int] = None
    content: Optional[str] = None
    fields: List[PanelField] = Field(default_factory=list)
    placeholder: Optional[str] = None
