"""Row grouping and in-row positioning for the flow layout.

Two pure stages:
- build_rows: greedily partitions the items into rows bounded by width
- position_row: places the items of one row, applying direction and alignment

Rows never copy the input; each one records the ``[start, stop)`` index range
of the items it holds.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from flow_layout.models.flow_enums import (
    FlowDirection,
    HorizontalAlignment,
    VerticalAlignment,
)
from flow_layout.models.geometry import Position, Rectangle
from flow_layout.models.layout_options import FlowLayoutOptions


@dataclass
class Row:
    """A run of consecutive items sharing one horizontal band.

    Attributes:
        start: Index of the row's first item in the input sequence
        stop: Index one past the row's last item
        top_offset: Y of the row's top edge; the first row starts at the bounds' min_y
        height: Height of the tallest item within the row
        total_items_width: Sum of the items' widths, excluding interim spacing
    """

    start: int
    top_offset: float
    stop: int = 0
    height: float = 0.0
    total_items_width: float = 0.0

    @property
    def count(self) -> int:
        return self.stop - self.start

    def items(self, source: Sequence[Rectangle]) -> Sequence[Rectangle]:
        """Return the row's items from the sequence the row was built over."""
        return source[self.start:self.stop]


def build_rows(
    items: Sequence[Rectangle],
    bounds: Rectangle,
    horizontal_spacing: float,
    vertical_spacing: float,
) -> Tuple[List[Row], float]:
    """Group items into rows based on the width of the bounds.

    A row is closed when the next item would cross ``bounds.max_x``. Overflow
    is only checked against the next candidate, so every row receives at
    least one item even if that item alone is wider than the bounds.

    Args:
        items: Items to group, in layout order
        bounds: Container bounds
        horizontal_spacing: Distance between adjacent items within a row
        vertical_spacing: Distance between adjacent rows

    Returns:
        Tuple of (rows in order, height required to fit all rows)
    """
    rows: List[Row] = []
    count = len(items)
    cursor = 0

    while cursor < count:
        if rows:
            previous = rows[-1]
            top_offset = previous.top_offset + previous.height + vertical_spacing
        else:
            top_offset = bounds.min_y

        row = Row(start=cursor, stop=cursor, top_offset=top_offset)
        leading_offset = bounds.min_x
        while cursor < count:
            item = items[cursor]
            cursor += 1
            row.stop = cursor
            row.total_items_width += item.width
            row.height = max(row.height, item.height)
            leading_offset += item.width + horizontal_spacing
            if cursor < count and leading_offset + items[cursor].width > bounds.max_x:
                break
        rows.append(row)

    gaps = max(len(rows) - 1, 0)
    fitting_height = sum(row.height for row in rows) + gaps * vertical_spacing
    return rows, float(fitting_height)


def initial_leading_offset(
    row: Row,
    bounds: Rectangle,
    alignment: HorizontalAlignment,
    horizontal_spacing: float,
) -> float:
    """Return the leading offset the row's first placed item starts at.

    The remaining space may be negative when the row is wider than the
    bounds; the shift is applied as-is.
    """
    gaps = 0 if row.count == 1 else row.count - 1
    gaps_width = gaps * horizontal_spacing
    remaining_space = bounds.width - (row.total_items_width + gaps_width)

    if alignment == HorizontalAlignment.CENTER:
        shift = remaining_space / 2
    elif alignment == HorizontalAlignment.TRAILING:
        shift = remaining_space
    else:
        shift = 0.0
    return bounds.min_x + shift


def top_offset(item: Rectangle, row: Row, alignment: VerticalAlignment) -> float:
    """Return the y coordinate of an item aligned within its row."""
    if alignment == VerticalAlignment.CENTER:
        shift = (row.height - item.height) / 2
    elif alignment == VerticalAlignment.BOTTOM:
        shift = row.height - item.height
    else:
        shift = 0.0
    return row.top_offset + shift


def position_row(
    row: Row,
    items: Sequence[Rectangle],
    bounds: Rectangle,
    options: FlowLayoutOptions,
) -> List[Position]:
    """Compute the position of every item in a row.

    For the reverse direction the row's items are placed in reversed order
    and the resulting positions are reversed back, so the returned list is
    always in the row's original item order.

    Args:
        row: Row produced by build_rows over ``items``
        items: The full item sequence the row indexes into
        bounds: Container bounds
        options: Engine options

    Returns:
        One position per row item, in the row's original order
    """
    row_items = list(row.items(items))
    reverse = options.direction == FlowDirection.REVERSE
    if reverse:
        row_items.reverse()

    leading_offset = initial_leading_offset(
        row, bounds, options.horizontal_alignment, options.horizontal_spacing
    )
    positions: List[Position] = []
    for item in row_items:
        y = top_offset(item, row, options.vertical_alignment)
        positions.append(Position(x=leading_offset, y=y))
        leading_offset += item.width + options.horizontal_spacing

    if reverse:
        positions.reverse()
    return positions
