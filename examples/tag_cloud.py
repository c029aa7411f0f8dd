#!/usr/bin/env python3
"""
Tag Cloud Example
Wraps a row of tag chips into a fixed-width container, first through the
engine directly and then through the MCP tool handlers.
"""

import asyncio
from pathlib import Path
import sys
sys.path.append(str(Path(__file__).parent.parent))

from flow_layout import FlowLayoutEngine, FlowLayoutOptions, Rectangle
from flow_layout.tools.layout_tools import FlowLayoutTools

TAGS = ["python", "layout", "wrap", "pydantic", "mcp", "rows", "alignment", "spacing"]


def chip(label: str) -> Rectangle:
    """Approximate a chip size from its label: 7 units per glyph plus padding."""
    return Rectangle.sized(width=len(label) * 7 + 16, height=24)


async def run_tag_cloud():
    """Lay out the tags twice: measure the height, then render."""
    print("Tag Cloud Example")
    print("=" * 50)

    items = [chip(tag) for tag in TAGS]
    engine = FlowLayoutEngine(FlowLayoutOptions(
        horizontal_alignment="center",
        horizontal_spacing=8,
        vertical_spacing=6,
    ))

    # 1. Measure the height needed at the container width
    width = 220
    height = engine.fitting_height(items, Rectangle.sized(width, 0))
    print(f"\n1. Fitting height at width {width}: {height}")

    # 2. Position the chips within the measured bounds
    layout = engine.position(items, Rectangle.sized(width, height))
    print(f"\n2. Placed {len(layout.positions)} chips in {layout.row_count} rows:")
    for tag, position in zip(TAGS, layout.positions):
        print(f"   {tag:<10} x={position.x:7.1f} y={position.y:6.1f}")

    # 3. Same request through the MCP tool handler, right-to-left
    tools = FlowLayoutTools()
    result = await tools.handle_tool("flow_layout_position", {
        "items": [item.model_dump() for item in items],
        "bounds": {"width": width},
        "direction": "reverse",
        "horizontal_spacing": 8,
        "vertical_spacing": 6,
    })
    print(f"\n3. Reverse flow via tool: ok={result['ok']}")
    for tag, position in zip(TAGS, result["data"]["positions"]):
        print(f"   {tag:<10} x={position['x']:7.1f} y={position['y']:6.1f}")


if __name__ == "__main__":
    asyncio.run(run_tag_cloud())
