"""Flow layout engine.

Computes the position of rectangular items arranged in rows that wrap at a
container's width, and the height needed to fit all rows.

Usage:
    from flow_layout import FlowLayoutEngine, FlowLayoutOptions, Rectangle

    engine = FlowLayoutEngine(FlowLayoutOptions(horizontal_spacing=8))
    layout = engine.position(items, Rectangle.sized(width=320, height=0))
"""

from flow_layout.layout.engines.flow import FlowLayoutEngine
from flow_layout.models import (
    FlowDirection,
    FlowLayout,
    FlowLayoutOptions,
    HorizontalAlignment,
    Position,
    Rectangle,
    VerticalAlignment,
)

__all__ = [
    "FlowLayoutEngine",
    "FlowLayoutOptions",
    "FlowLayout",
    "Rectangle",
    "Position",
    "FlowDirection",
    "HorizontalAlignment",
    "VerticalAlignment",
]
