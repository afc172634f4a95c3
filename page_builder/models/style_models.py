"""
Style Models for Page Builder
==============================

Style property catalogue and normalization of edited values.

Every property is one of three kinds:
- PIXEL: numeric, stored with a "px" suffix (fontSize, padding, margin)
- COLOR: hex color, stored as given
- KEYWORD: CSS keyword, stored as given (fontWeight and any unknown name)
"""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional
from pydantic import BaseModel, Field

from .canvas_models import StyleValue


class StyleKind(str, Enum):
    """How a style property's value is normalized."""
    PIXEL = "pixel"
    COLOR = "color"
    KEYWORD = "keyword"


class WidgetType(str, Enum):
    """Input widget used by the property panel."""
    NUMBER = "number"
    COLOR = "color"
    SELECT = "select"
    TEXT = "text"


class StyleProperty(BaseModel):
    """A style property the property panel can edit."""
    name: str
    label: str
    kind: StyleKind
    widget: WidgetType
    default: StyleValue
    options: List[str] = Field(default_factory=list)


# Panel fields, in display order
STYLE_PROPERTIES: List[StyleProperty] = [
    StyleProperty(
        name="backgroundColor",
        label="Background Color",
        kind=StyleKind.COLOR,
        widget=WidgetType.COLOR,
        default="#ffffff",
    ),
    StyleProperty(
        name="fontWeight",
        label="Font Weight",
        kind=StyleKind.KEYWORD,
        widget=WidgetType.SELECT,
        default="normal",
        options=["normal", "bold", "lighter", "bolder"],
    ),
    StyleProperty(
        name="margin",
        label="Margin (px)",
        kind=StyleKind.PIXEL,
        widget=WidgetType.NUMBER,
        default=8,
    ),
    StyleProperty(
        name="padding",
        label="Padding (px)",
        kind=StyleKind.PIXEL,
        widget=WidgetType.NUMBER,
        default=8,
    ),
    StyleProperty(
        name="fontSize",
        label="Font Size (px)",
        kind=StyleKind.PIXEL,
        widget=WidgetType.NUMBER,
        default=16,
    ),
    StyleProperty(
        name="color",
        label="Font Color",
        kind=StyleKind.COLOR,
        widget=WidgetType.COLOR,
        default="#000000",
    ),
]

STYLE_PROPERTY_MAP: Dict[str, StyleProperty] = {p.name: p for p in STYLE_PROPERTIES}

PIXEL_PROPERTIES: FrozenSet[str] = frozenset(
    p.name for p in STYLE_PROPERTIES if p.kind == StyleKind.PIXEL
)


def style_kind(name: str) -> StyleKind:
    """Kind of a style property. Unknown names are keyword-valued."""
    prop = STYLE_PROPERTY_MAP.get(name)
    return prop.kind if prop else StyleKind.KEYWORD


def normalize_style_value(name: str, value: StyleValue) -> StyleValue:
    """
    Normalize a raw edited value for storage in an element's style.

    Pixel-valued properties get a literal "px" appended; every other
    kind passes through unchanged. Values are not validated.

    Args:
        name: Style property name (e.g. "fontSize")
        value: Raw value from the editor (e.g. "20")

    Returns:
        Value to merge into the style mapping
    """
    kind = style_kind(name)
    if kind == StyleKind.PIXEL:
        return f"{value}px"
    return value


def parse_pixel_value(value: Optional[StyleValue], default: int) -> int:
    """Leading integer of a stored pixel value ("24px" -> 24), or default."""
    if value is None:
        return default
    if isinstance(value, (int, float)):
        return int(value)

    digits = ""
    for i, char in enumerate(value.strip()):
        if char.isdigit() or (char == "-" and i == 0):
            digits += char
        else:
            break
    try:
        return int(digits)
    except ValueError:
        return default
