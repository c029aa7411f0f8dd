"""Pydantic models for flow layout geometry and options."""

from .flow_enums import (
    FlowDirection,
    HorizontalAlignment,
    VerticalAlignment,
)
from .geometry import (
    FlowLayout,
    Position,
    Rectangle,
)
from .layout_options import FlowLayoutOptions

__all__ = [
    # Geometry
    "Rectangle",
    "Position",
    "FlowLayout",

    # Options
    "FlowLayoutOptions",
    "FlowDirection",
    "HorizontalAlignment",
    "VerticalAlignment",
]
