"""Flow (wrap) layout engine.

Places items left-to-right (or right-to-left) within a row, stacks rows
top-to-bottom, and starts a new row whenever the next item would overflow
the bounds' width.

The engine is a pure function of its options and inputs: options are frozen
when the engine is built, and every call works on local state only, so a
single instance can be shared across threads.
"""

import logging
from typing import Any, List, Optional, Sequence

from flow_layout.config.settings import get_default_options
from flow_layout.layout.engines.base import LayoutEngine
from flow_layout.layout.rows import build_rows, position_row
from flow_layout.models.geometry import FlowLayout, Position, Rectangle
from flow_layout.models.layout_options import FlowLayoutOptions

logger = logging.getLogger(__name__)


class FlowLayoutEngine(LayoutEngine):
    """Computes item positions for a flow layout.

    Example:
        engine = FlowLayoutEngine(FlowLayoutOptions(horizontal_spacing=10))
        layout = engine.position(
            [Rectangle.sized(20, 20), Rectangle.sized(40, 40)],
            Rectangle.sized(100, 100),
        )
        layout.positions  # (Position(x=0.0, y=0.0), Position(x=30.0, y=0.0))
    """

    def __init__(self, options: Optional[FlowLayoutOptions] = None):
        """Initialize the engine.

        Args:
            options: Engine options (defaults if not provided)
        """
        self.options = options or FlowLayoutOptions()

    @classmethod
    def from_settings(cls, **overrides: Any) -> "FlowLayoutEngine":
        """Build an engine from the environment-driven defaults.

        Args:
            **overrides: Option values taking precedence over the defaults

        Raises:
            pydantic.ValidationError: If any resulting option is invalid
        """
        values = get_default_options()
        values.update(overrides)
        return cls(FlowLayoutOptions(**values))

    def with_options(self, **changes: Any) -> "FlowLayoutEngine":
        """Return a new engine with some options changed.

        Changes are validated like any other options.
        """
        values = self.options.model_dump()
        values.update(changes)
        return FlowLayoutEngine(FlowLayoutOptions(**values))

    @property
    def name(self) -> str:
        return "flow"

    def position(self, items: Sequence[Rectangle], bounds: Rectangle) -> FlowLayout:
        """Return the positions of the items within the bounds, and the
        height required to fit all items within the bounds' width.

        Args:
            items: Items to lay out, in order
            bounds: Container bounds; only min_x, max_x, min_y and width are used

        Returns:
            FlowLayout whose positions are index-aligned with ``items``
        """
        rows, fitting_height = build_rows(
            items,
            bounds,
            self.options.horizontal_spacing,
            self.options.vertical_spacing,
        )
        positions: List[Position] = []
        for row in rows:
            positions.extend(position_row(row, items, bounds, self.options))

        logger.debug(
            f"Flow layout placed {len(positions)} items in {len(rows)} rows "
            f"(fitting height {fitting_height})"
        )
        return FlowLayout(
            fitting_height=fitting_height,
            positions=tuple(positions),
            row_count=len(rows),
        )

    def fitting_height(self, items: Sequence[Rectangle], bounds: Rectangle) -> float:
        """Return the height required to fit all items, without positioning them."""
        _, fitting_height = build_rows(
            items,
            bounds,
            self.options.horizontal_spacing,
            self.options.vertical_spacing,
        )
        return fitting_height
