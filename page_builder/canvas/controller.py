"""
Canvas Controller
=================

Owns the element list and the interaction state of one canvas, and
applies drop, reorder and selection events to them.

Drop disambiguation:
- a drag transaction carrying a "type" payload came from the palette
  and creates a new element at the tail
- anything else dropped on an element slot is the second phase of a
  reorder gesture started by element_drag_start()
"""

import logging
from typing import List, Optional

from ..models.canvas_models import (
    CanvasElement, CanvasState, DragTransaction, EditorState, ElementType
)
from ..models.view_models import CANVAS_EMPTY_MESSAGE, CanvasView, ElementView
from .palette import TYPE_KEY

logger = logging.getLogger(__name__)


class CanvasController:
    """Mutation protocol for a single canvas."""

    def __init__(
        self,
        canvas: Optional[CanvasState] = None,
        editor_state: Optional[EditorState] = None
    ):
        self.canvas = canvas if canvas is not None else CanvasState()
        self.editor_state = editor_state if editor_state is not None else EditorState()

    @property
    def elements(self) -> List[CanvasElement]:
        return self.canvas.elements

    @property
    def selected_index(self) -> Optional[int]:
        return self.editor_state.selected_index(self.canvas)

    @property
    def dragging_index(self) -> Optional[int]:
        return self.editor_state.dragging_index(self.canvas)

    @property
    def selected_element(self) -> Optional[CanvasElement]:
        return self.canvas.find(self.editor_state.selected_id)

    def drag_over(self) -> bool:
        """Allow-drop hook. Never mutates state."""
        return True

    def drop(self, transaction: DragTransaction) -> Optional[CanvasElement]:
        """
        Canvas-surface drop of a palette payload.

        Appends a new element with default content and style. Selection
        is left as is.

        Args:
            transaction: Drag transaction started by Palette.drag_start()

        Returns:
            The created element, or None if the payload holds no kind
        """
        kind = transaction.get_data(TYPE_KEY)
        if not kind:
            logger.debug("[CANVAS] Drop without element type ignored")
            return None

        element_type = ElementType(kind)

        # A palette drop starts a new gesture; drop any stale reorder
        self.editor_state.clear_dragging()

        element = CanvasElement.create(element_type)
        self.canvas.add_element(element)
        logger.info(
            f"[CANVAS] Added {element.type.value} element {element.id} "
            f"at index {len(self.canvas) - 1}"
        )
        return element

    def element_drag_start(self, index: int) -> bool:
        """Phase 1 of a reorder: pick up the element at index."""
        element = self.canvas.get(index)
        if element is None:
            logger.warning(f"[CANVAS] Drag start on missing index {index}")
            return False

        self.editor_state.dragging_id = element.id
        return True

    def element_drop(self, index: int) -> bool:
        """
        Phase 2 of a reorder: drop the dragged element on the slot at index.

        The dragged element is spliced out and reinserted at index of the
        shortened list. Dragging state is cleared whether or not anything
        moved.

        Returns:
            True if the element list changed
        """
        from_index = self.dragging_index
        self.editor_state.clear_dragging()

        if from_index is None:
            return False

        to_index = max(0, min(index, len(self.canvas) - 1))
        if from_index == to_index:
            return False

        self.canvas.move_element(from_index, to_index)
        logger.info(f"[CANVAS] Moved element from index {from_index} to {to_index}")
        return True

    def drag_end(self) -> None:
        """End of a drag gesture that may not have produced a drop."""
        self.editor_state.clear_dragging()

    def handle_drop(
        self,
        transaction: Optional[DragTransaction] = None,
        target_index: Optional[int] = None
    ) -> bool:
        """
        Dispatch a drop event as delivered by the host.

        A palette payload creates an element regardless of the target.
        Without one, a drop on an element slot completes a reorder.

        Returns:
            True if the element list changed
        """
        if transaction is not None and transaction.get_data(TYPE_KEY):
            return self.drop(transaction) is not None
        if target_index is not None:
            return self.element_drop(target_index)

        self.editor_state.clear_dragging()
        return False

    def select(self, index: int) -> bool:
        """Select the element at index, replacing any prior selection."""
        element = self.canvas.get(index)
        if element is None:
            logger.warning(f"[CANVAS] Select on missing index {index}")
            return False

        self.editor_state.selected_id = element.id
        return True

    def view(self) -> CanvasView:
        """Render state of the canvas."""
        selected_index = self.selected_index
        return CanvasView(
            elements=[
                ElementView(index=i, selected=(i == selected_index), element=el)
                for i, el in enumerate(self.canvas.elements)
            ],
            selected_index=selected_index,
            dragging_index=self.dragging_index,
            empty_message=CANVAS_EMPTY_MESSAGE if not self.canvas.elements else None
        )
