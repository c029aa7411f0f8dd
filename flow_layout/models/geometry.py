"""Geometry models for flow layout inputs and outputs.

This module provides Pydantic schemas for:
- Rectangles (item sizes and container bounds)
- Positions (the computed top-left corner of each item)
- Layout results (positions plus the height needed to fit every row)

Sizes are validated eagerly: negative or non-finite widths and heights are
rejected when the model is constructed, so the layout engine only ever sees
geometry inside its documented domain. Positions are unconstrained, since an
oversized row may legitimately be placed before the bounds' left edge.
"""

from typing import List, Tuple

from pydantic import BaseModel, Field


class Position(BaseModel):
    """Position of a single item in the bounds' coordinate space.

    Attributes:
        x: Horizontal coordinate of the item's leading edge
        y: Vertical coordinate of the item's top edge
    """

    model_config = {"frozen": True}

    x: float = Field(..., description="Horizontal coordinate")
    y: float = Field(..., description="Vertical coordinate")

    @classmethod
    def zero(cls) -> "Position":
        """Return the origin position (0, 0)."""
        return cls(x=0.0, y=0.0)

    def to_list(self) -> List[float]:
        """Convert to list format [x, y].

        Returns:
            Position as [x, y] list
        """
        return [self.x, self.y]


class Rectangle(BaseModel):
    """An axis-aligned rectangle.

    Used both for the items being laid out (only ``width`` and ``height``
    drive packing) and for the container bounds (only ``min_x``, ``max_x``,
    ``min_y`` and ``width`` are consulted).

    Attributes:
        x: Horizontal origin
        y: Vertical origin
        width: Width, non-negative
        height: Height, non-negative
    """

    model_config = {"frozen": True}

    x: float = Field(default=0.0, allow_inf_nan=False, description="Horizontal origin")
    y: float = Field(default=0.0, allow_inf_nan=False, description="Vertical origin")
    width: float = Field(..., ge=0, allow_inf_nan=False, description="Width")
    height: float = Field(..., ge=0, allow_inf_nan=False, description="Height")

    @classmethod
    def sized(cls, width: float, height: float) -> "Rectangle":
        """Create a rectangle of the given size at the origin."""
        return cls(width=width, height=height)

    @property
    def min_x(self) -> float:
        return self.x

    @property
    def mid_x(self) -> float:
        return self.x + self.width / 2

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def min_y(self) -> float:
        return self.y

    @property
    def mid_y(self) -> float:
        return self.y + self.height / 2

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Position:
        """Computed center point of the rectangle."""
        return Position(x=self.mid_x, y=self.mid_y)


class FlowLayout(BaseModel):
    """Result of laying out a sequence of items within bounds.

    Attributes:
        fitting_height: Height required to fit all rows, based on the width
            of the bounds originally passed in
        positions: One position per input item, index-aligned with the input
        row_count: Number of rows the items were wrapped into
    """

    model_config = {"frozen": True}

    fitting_height: float = Field(..., description="Height required to fit all rows")
    positions: Tuple[Position, ...] = Field(
        default=(), description="Item positions, index-aligned with the input items"
    )
    row_count: int = Field(default=0, ge=0, description="Number of rows built")

    def to_dict(self, include_row_count: bool = True) -> dict:
        """Export to a JSON-friendly dict.

        Args:
            include_row_count: Whether to include the ``row_count`` key

        Returns:
            Dictionary with ``fitting_height`` and ``positions`` as [{x, y}]
        """
        data = {
            "fitting_height": self.fitting_height,
            "positions": [position.model_dump() for position in self.positions],
        }
        if include_row_count:
            data["row_count"] = self.row_count
        return data
