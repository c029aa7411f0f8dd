"""MCP tool handlers."""

from .layout_tools import FlowLayoutTools, InvalidLayoutArgumentError

__all__ = ["FlowLayoutTools", "InvalidLayoutArgumentError"]
