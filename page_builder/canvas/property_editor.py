"""
Property Editor
===============

Content and style edits for the selected element.
"""

import logging
from typing import Optional

from ..models.canvas_models import StyleValue
from ..models.style_models import (
    STYLE_PROPERTIES, STYLE_PROPERTY_MAP, StyleKind, normalize_style_value, parse_pixel_value
)
from ..models.view_models import PANEL_PLACEHOLDER, PanelField, PropertyPanelView
from .controller import CanvasController

logger = logging.getLogger(__name__)


class PropertyEditor:
    """
    Writes edits back into the controller's element list.

    Every edit targets the selected element and is a no-op when
    nothing is selected.
    """

    def __init__(self, controller: CanvasController):
        self.controller = controller

    @property
    def active(self) -> bool:
        return self.controller.selected_element is not None

    def update_content(self, content: str) -> bool:
        """Replace the content of the selected element."""
        element = self.controller.selected_element
        if element is None:
            return False

        element.content = content
        return True

    def update_style(self, name: str, value: StyleValue) -> bool:
        """
        Merge one normalized style value into the selected element.

        Args:
            name: Style property name
            value: Raw value from the panel input

        Returns:
            False if no element is selected
        """
        element = self.controller.selected_element
        if element is None:
            return False

        normalized = normalize_style_value(name, value)
        element.style[name] = normalized
        logger.debug(f"[PROPERTY-EDITOR] {element.id} style {name}={normalized!r}")
        return True

    def field_value(self, name: str) -> Optional[StyleValue]:
        """Value shown in the panel field for the selected element."""
        element = self.controller.selected_element
        if element is None:
            return None

        prop = STYLE_PROPERTY_MAP.get(name)
        stored = element.style.get(name)
        if prop is None:
            return stored
        if prop.kind == StyleKind.PIXEL:
            return parse_pixel_value(stored, int(prop.default))
        return stored if stored is not None else prop.default

    def panel(self) -> PropertyPanelView:
        """Render state of the property panel."""
        element = self.controller.selected_element
        if element is None:
            return PropertyPanelView(active=False, placeholder=PANEL_PLACEHOLDER)

        return PropertyPanelView(
            active=True,
            selected_index=self.controller.selected_index,
            content=element.content,
            fields=[
                PanelField(
                    name=prop.name,
                    label=prop.label,
                    kind=prop.kind,
                    widget=prop.widget,
                    value=self.field_value(prop.name),
                    options=prop.options,
                )
                for prop in STYLE_PROPERTIES
            ],
        )
