"""Base layout engine protocol.

Defines the interface that all layout engines must implement.
"""

from abc import ABC, abstractmethod
from typing import Sequence

from flow_layout.models.geometry import FlowLayout, Rectangle


class LayoutEngine(ABC):
    """Abstract base class for layout engines.

    Layout engines convert a sequence of sized items and a container bounds
    into positioned items, plus the height required to fit them.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Engine name (e.g., 'flow')."""
        ...

    @abstractmethod
    def position(self, items: Sequence[Rectangle], bounds: Rectangle) -> FlowLayout:
        """Compute the position of every item within the bounds.

        Args:
            items: Items to lay out; only width and height are used
            bounds: Container bounds

        Returns:
            FlowLayout with positions index-aligned with ``items``
        """
        ...

    @abstractmethod
    def fitting_height(self, items: Sequence[Rectangle], bounds: Rectangle) -> float:
        """Return the height required to fit all items within the bounds' width."""
        ...
