"""Layout module for flow (wrap) positioning.

This module provides:
- Layout engine abstraction (LayoutEngine base class)
- FlowLayoutEngine: rows packed greedily by width, aligned per row
- Row grouping and in-row positioning stages (rows module)
"""

from flow_layout.layout.engines.base import LayoutEngine
from flow_layout.layout.engines.flow import FlowLayoutEngine
from flow_layout.layout.rows import Row, build_rows, position_row

__all__ = [
    "LayoutEngine",
    "FlowLayoutEngine",
    "Row",
    "build_rows",
    "position_row",
]
