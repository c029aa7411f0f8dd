"""Layout engines registry.

Available engines:
- flow: greedy row-wrapping flow layout
"""

from flow_layout.layout.engines.base import LayoutEngine
from flow_layout.layout.engines.flow import FlowLayoutEngine

# Engine registry
ENGINES = {
    "flow": FlowLayoutEngine,
}


def get_engine(name: str) -> type:
    """Get layout engine class by name.

    Args:
        name: Engine name ('flow')

    Returns:
        Layout engine class

    Raises:
        ValueError: If engine not found
    """
    if name not in ENGINES:
        raise ValueError(f"Unknown layout engine: {name}. Available: {list(ENGINES.keys())}")
    return ENGINES[name]


__all__ = [
    "LayoutEngine",
    "FlowLayoutEngine",
    "ENGINES",
    "get_engine",
]
