"""MCP tools for flow layout computation.

Provides tools to:
- Position a sequence of sized items within container bounds
- Compute the height required to fit the items at a given width

Options not passed in the arguments fall back to the environment-driven
defaults in flow_layout.config.settings.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

from mcp import Tool
from pydantic import ValidationError

from ..config.settings import get_default_options, is_enabled
from ..layout.engines import get_engine
from ..layout.engines.base import LayoutEngine
from ..models.flow_enums import FlowDirection, HorizontalAlignment, VerticalAlignment
from ..models.geometry import Rectangle
from ..models.layout_options import FlowLayoutOptions
from ..utils.response import success_response, error_response

logger = logging.getLogger(__name__)

OPTION_KEYS = (
    "direction",
    "horizontal_alignment",
    "vertical_alignment",
    "horizontal_spacing",
    "vertical_spacing",
)


class InvalidLayoutArgumentError(ValueError):
    """Raised when a tool payload is not shaped like a layout request."""

    def __init__(self, argument: str, reason: str):
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


def _layout_input_schema() -> Dict[str, Any]:
    """JSON schema shared by the flow layout tools."""
    rectangle_properties = {
        "x": {"type": "number", "default": 0},
        "y": {"type": "number", "default": 0},
        "width": {"type": "number", "minimum": 0},
        "height": {"type": "number", "minimum": 0},
    }
    return {
        "type": "object",
        "properties": {
            "items": {
                "type": "array",
                "description": "Item sizes in layout order: [{width, height}]",
                "items": {
                    "type": "object",
                    "properties": rectangle_properties,
                    "required": ["width", "height"]
                }
            },
            "bounds": {
                "type": "object",
                "description": "Container bounds; x/y give the origin, height is not consulted",
                "properties": rectangle_properties,
                "required": ["width"]
            },
            "direction": {
                "type": "string",
                "enum": [d.value for d in FlowDirection],
                "description": "Direction items flow within a row"
            },
            "horizontal_alignment": {
                "type": "string",
                "enum": [a.value for a in HorizontalAlignment],
                "description": "Alignment of each row within the bounds' width"
            },
            "vertical_alignment": {
                "type": "string",
                "enum": [a.value for a in VerticalAlignment],
                "description": "Alignment of each item within its row"
            },
            "horizontal_spacing": {
                "type": "number",
                "minimum": 0,
                "description": "Spacing between items in a row"
            },
            "vertical_spacing": {
                "type": "number",
                "minimum": 0,
                "description": "Spacing between rows"
            }
        },
        "required": ["items", "bounds"]
    }


class FlowLayoutTools:
    """Provides flow layout computation tools."""

    def __init__(self, engine_name: str = "flow"):
        """Initialize with the engine used for layout requests.

        Args:
            engine_name: Registered layout engine name
        """
        self.engine_class = get_engine(engine_name)

    def get_tools(self) -> List[Tool]:
        """Return flow layout MCP tools."""
        return [
            Tool(
                name="flow_layout_position",
                description="Position items in rows that wrap at the bounds' width. Returns one {x, y} per item, in input order, and the height needed to fit all rows.",
                inputSchema=_layout_input_schema()
            ),
            Tool(
                name="flow_layout_fitting_height",
                description="Compute the height needed to fit all items when wrapped at the bounds' width",
                inputSchema=_layout_input_schema()
            ),
        ]

    async def handle_tool(self, name: str, arguments: dict) -> dict:
        """Route tool call to appropriate handler.

        Args:
            name: Tool name
            arguments: Tool arguments

        Returns:
            Standardized response
        """
        handlers = {
            "flow_layout_position": self._position,
            "flow_layout_fitting_height": self._fitting_height,
        }

        handler = handlers.get(name)
        if not handler:
            return error_response(f"Unknown layout tool: {name}", code="UNKNOWN_TOOL")

        try:
            return await handler(arguments)
        except ValidationError as e:
            return error_response(
                f"Invalid layout request: {e.error_count()} validation error(s)",
                code="INVALID_ARGUMENT",
                details={"errors": _summarize_errors(e)}
            )
        except InvalidLayoutArgumentError as e:
            return error_response(
                str(e),
                code="INVALID_ARGUMENT",
                details={"argument": e.argument}
            )
        except Exception as e:
            logger.error(f"Error in {name}: {e}", exc_info=True)
            return error_response(str(e), code="TOOL_ERROR")

    async def _position(self, args: dict) -> dict:
        """Position items within bounds."""
        engine, items, bounds = self._parse_request(args)
        layout = engine.position(items, bounds)
        return success_response(
            layout.to_dict(include_row_count=is_enabled("include_row_count"))
        )

    async def _fitting_height(self, args: dict) -> dict:
        """Compute the fitting height of items within bounds."""
        engine, items, bounds = self._parse_request(args)
        return success_response({"fitting_height": engine.fitting_height(items, bounds)})

    def _parse_request(
        self, args: Optional[dict]
    ) -> Tuple[LayoutEngine, List[Rectangle], Rectangle]:
        """Build the engine, items and bounds for a request.

        Raises:
            InvalidLayoutArgumentError: If the payload is malformed
            pydantic.ValidationError: If a value is out of range
        """
        if not isinstance(args, dict):
            raise InvalidLayoutArgumentError("arguments", "expected an object")

        raw_items = args.get("items")
        if not isinstance(raw_items, list):
            raise InvalidLayoutArgumentError("items", "expected an array of {width, height}")
        raw_bounds = args.get("bounds")
        if not isinstance(raw_bounds, dict):
            raise InvalidLayoutArgumentError("bounds", "expected an object with a width")

        values = get_default_options()
        values.update({key: args[key] for key in OPTION_KEYS if key in args})
        engine = self.engine_class(FlowLayoutOptions(**values))

        items = [Rectangle.model_validate(item) for item in raw_items]
        bounds = Rectangle.model_validate({"height": 0.0, **raw_bounds})
        logger.debug(f"Layout request: {len(items)} items, bounds width {bounds.width}")
        return engine, items, bounds


def _summarize_errors(error: ValidationError) -> List[Dict[str, Any]]:
    """Reduce pydantic errors to JSON-serializable loc/msg/type entries."""
    return [
        {
            "loc": [str(part) for part in err["loc"]],
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]
