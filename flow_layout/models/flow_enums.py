"""Enumerations controlling how a flow layout arranges items.

The variant sets are closed: the engine selects behavior with plain
``if``/``elif`` over these members.
"""

from enum import Enum


class FlowDirection(str, Enum):
    """The direction items flow within a row."""

    # Items flow from left to right.
    FORWARD = "forward"
    # Items flow from right to left.
    REVERSE = "reverse"


class HorizontalAlignment(str, Enum):
    """The horizontal alignment of a row within the bounds' width."""
    LEADING = "leading"
    CENTER = "center"
    TRAILING = "trailing"


class VerticalAlignment(str, Enum):
    """The vertical alignment of an item within its row's height."""
    TOP = "top"
    CENTER = "center"
    BOTTOM = "bottom"
