"""
Canvas Models for Page Builder
===============================

Models for placed elements, the element list and the editor UI state.
"""

import uuid
from enum import Enum
from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field


StyleValue = Union[str, int, float]


class ElementType(str, Enum):
    """Kinds of element offered by the palette."""
    TEXT = "Text"
    IMAGE = "Image"
    DIV = "Div"
    LIST = "List"


# Palette order
ELEMENT_TYPES: List[ElementType] = [
    ElementType.TEXT,
    ElementType.IMAGE,
    ElementType.DIV,
    ElementType.LIST,
]

DEFAULT_STYLE: Dict[str, StyleValue] = {
    "fontSize": "16px",
    "color": "#000000",
    "padding": "8px",
}


def default_content(element_type: ElementType) -> str:
    """Default display string for a freshly dropped element."""
    return f"{element_type.value} Content"


class CanvasElement(BaseModel):
    """An element placed on the canvas."""
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    type: ElementType
    content: str
    style: Dict[str, StyleValue] = Field(default_factory=lambda: dict(DEFAULT_STYLE))
    # Reserved for nesting, never populated
    children: Optional[List["CanvasElement"]] = None

    @classmethod
    def create(cls, element_type: ElementType) -> "CanvasElement":
        """Build a new element with default content and style."""
        return cls(type=element_type, content=default_content(element_type))


CanvasElement.model_rebuild()


class CanvasState(BaseModel):
    """Ordered list of placed elements. Order is render order."""
    elements: List[CanvasElement] = Field(default_factory=list)

    def __len__(self) -> int:
        return len(self.elements)

    def add_element(self, element: CanvasElement) -> None:
        """Append element to the tail of the canvas."""
        if self.index_of(element.id) is not None:
            raise ValueError(f"Duplicate element id: {element.id}")
        self.elements.append(element)

    def get(self, index: int) -> Optional[CanvasElement]:
        """Element at index, or None when out of range."""
        if 0 <= index < len(self.elements):
            return self.elements[index]
        return None

    def index_of(self, element_id: Optional[str]) -> Optional[int]:
        """Current position of the element with this id."""
        if element_id is None:
            return None
        for index, element in enumerate(self.elements):
            if element.id == element_id:
                return index
        return None

    def find(self, element_id: Optional[str]) -> Optional[CanvasElement]:
        """Element with this id, or None."""
        index = self.index_of(element_id)
        return None if index is None else self.elements[index]

    def move_element(self, from_index: int, to_index: int) -> None:
        """
        Splice the element at from_index out and insert it at to_index
        of the shortened list.

        [A, B, C, D] moving 0 to 2 gives [B, C, A, D].
        """
        moved = self.elements.pop(from_index)
        self.elements.insert(to_index, moved)


class EditorState(BaseModel):
    """
    Interaction state kept beside the element list.

    Selection and dragging are tracked by element id; positions are
    resolved against the current CanvasState when read.
    """
    selected_id: Optional[str] = None
    dragging_id: Optional[str] = None

    def selected_index(self, canvas: CanvasState) -> Optional[int]:
        return canvas.index_of(self.selected_id)

    def dragging_index(self, canvas: CanvasState) -> Optional[int]:
        return canvas.index_of(self.dragging_id)

    def clear_dragging(self) -> None:
        self.dragging_id = None


class DragTransaction(BaseModel):
    """Carrier of the drag payload between drag-start and drop."""
    data: Dict[str, str] = Field(default_factory=dict)

    def set_data(self, key: str, value: str) -> None:
        self.data[key] = value

    def get_data(self, key: str) -> Optional[str]:
        return self.data.get(key)
