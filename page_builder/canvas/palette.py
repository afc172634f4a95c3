"""
Palette
=======

Drag source for new elements.
"""

from typing import List

from ..models.canvas_models import DragTransaction, ElementType, ELEMENT_TYPES

# Payload key carrying the element kind
TYPE_KEY = "type"


class Palette:
    """Fixed set of draggable element kinds. Holds no state."""

    def kinds(self) -> List[ElementType]:
        return list(ELEMENT_TYPES)

    def drag_start(self, element_type: ElementType) -> DragTransaction:
        """Start dragging a kind; the kind travels as the transaction payload."""
        transaction = DragTransaction()
        transaction.set_data(TYPE_KEY, ElementType(element_type).value)
        return transaction
