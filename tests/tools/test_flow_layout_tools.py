"""Tests for MCP flow layout tools."""

import pytest

from flow_layout.config import settings
from flow_layout.tools.layout_tools import FlowLayoutTools, InvalidLayoutArgumentError
from flow_layout.utils.response import is_success


@pytest.fixture
def layout_tools():
    """Create flow layout tools with the default engine."""
    return FlowLayoutTools()


@pytest.fixture
def overflow_request():
    """Three items that wrap into two rows in a 100-wide container."""
    return {
        "items": [
            {"width": 20, "height": 20},
            {"width": 70, "height": 30},
            {"width": 10, "height": 10},
        ],
        "bounds": {"width": 100, "height": 100},
        "horizontal_alignment": "center",
        "horizontal_spacing": 20,
        "vertical_spacing": 20,
    }


class TestFlowLayoutToolsGetTools:
    """Test tool registration."""

    def test_tool_names(self, layout_tools):
        names = [t.name for t in layout_tools.get_tools()]
        assert names == ["flow_layout_position", "flow_layout_fitting_height"]

    def test_position_schema(self, layout_tools):
        """Test flow_layout_position has correct input schema."""
        tool = next(t for t in layout_tools.get_tools() if t.name == "flow_layout_position")
        schema = tool.inputSchema
        assert schema["required"] == ["items", "bounds"]
        assert schema["properties"]["direction"]["enum"] == ["forward", "reverse"]
        assert schema["properties"]["vertical_alignment"]["enum"] == ["top", "center", "bottom"]

    def test_unknown_engine(self):
        with pytest.raises(ValueError, match="Unknown layout engine"):
            FlowLayoutTools(engine_name="grid")


class TestFlowLayoutPosition:
    """Test the flow_layout_position tool."""

    @pytest.mark.asyncio
    async def test_position(self, layout_tools, overflow_request):
        result = await layout_tools.handle_tool("flow_layout_position", overflow_request)

        assert is_success(result)
        data = result["data"]
        assert data["positions"] == [
            {"x": 40.0, "y": 0.0},
            {"x": 0.0, "y": 40.0},
            {"x": 90.0, "y": 40.0},
        ]
        assert data["fitting_height"] == 70.0
        assert data["row_count"] == 2

    @pytest.mark.asyncio
    async def test_position_empty_items(self, layout_tools):
        result = await layout_tools.handle_tool(
            "flow_layout_position", {"items": [], "bounds": {"width": 100}}
        )
        assert is_success(result)
        assert result["data"]["positions"] == []
        assert result["data"]["fitting_height"] == 0

    @pytest.mark.asyncio
    async def test_position_reverse(self, layout_tools):
        result = await layout_tools.handle_tool(
            "flow_layout_position",
            {
                "items": [{"width": 20, "height": 20}, {"width": 40, "height": 40}],
                "bounds": {"width": 100},
                "direction": "reverse",
                "horizontal_spacing": 10,
            },
        )
        assert result["data"]["positions"] == [{"x": 50.0, "y": 0.0}, {"x": 0.0, "y": 0.0}]

    @pytest.mark.asyncio
    async def test_position_bounds_origin(self, layout_tools):
        result = await layout_tools.handle_tool(
            "flow_layout_position",
            {"items": [{"width": 20, "height": 20}], "bounds": {"x": 5, "y": 7, "width": 100}},
        )
        assert result["data"]["positions"] == [{"x": 5.0, "y": 7.0}]

    @pytest.mark.asyncio
    async def test_position_without_row_count(self, layout_tools, overflow_request):
        """Test the include_row_count flag controls the response shape."""
        original = settings.is_enabled("include_row_count")
        settings.set_flag("include_row_count", False)
        try:
            result = await layout_tools.handle_tool("flow_layout_position", overflow_request)
        finally:
            settings.set_flag("include_row_count", original)

        assert is_success(result)
        assert "row_count" not in result["data"]


class TestFlowLayoutFittingHeight:
    """Test the flow_layout_fitting_height tool."""

    @pytest.mark.asyncio
    async def test_fitting_height(self, layout_tools, overflow_request):
        result = await layout_tools.handle_tool("flow_layout_fitting_height", overflow_request)
        assert is_success(result)
        assert result["data"] == {"fitting_height": 70.0}

    @pytest.mark.asyncio
    async def test_fitting_height_four_items(self, layout_tools):
        result = await layout_tools.handle_tool(
            "flow_layout_fitting_height",
            {
                "items": [{"width": 100, "height": 40}] * 4,
                "bounds": {"width": 375},
                "horizontal_spacing": 10,
                "vertical_spacing": 10,
            },
        )
        assert result["data"]["fitting_height"] == 90.0


class TestFlowLayoutToolErrors:
    """Test error envelopes."""

    @pytest.mark.asyncio
    async def test_unknown_tool(self, layout_tools):
        result = await layout_tools.handle_tool("flow_layout_nope", {})
        assert not is_success(result)
        assert result["error"]["code"] == "UNKNOWN_TOOL"

    @pytest.mark.asyncio
    async def test_missing_items(self, layout_tools):
        result = await layout_tools.handle_tool(
            "flow_layout_position", {"bounds": {"width": 100}}
        )
        assert result["error"]["code"] == "INVALID_ARGUMENT"
        assert result["error"]["details"] == {"argument": "items"}

    @pytest.mark.asyncio
    async def test_missing_bounds(self, layout_tools):
        result = await layout_tools.handle_tool("flow_layout_position", {"items": []})
        assert result["error"]["code"] == "INVALID_ARGUMENT"
        assert result["error"]["details"] == {"argument": "bounds"}

    @pytest.mark.asyncio
    async def test_negative_width(self, layout_tools):
        result = await layout_tools.handle_tool(
            "flow_layout_position",
            {"items": [{"width": -1, "height": 10}], "bounds": {"width": 100}},
        )
        assert result["error"]["code"] == "INVALID_ARGUMENT"
        errors = result["error"]["details"]["errors"]
        assert errors[0]["loc"] == ["width"]

    @pytest.mark.asyncio
    async def test_invalid_option(self, layout_tools):
        result = await layout_tools.handle_tool(
            "flow_layout_position",
            {"items": [], "bounds": {"width": 100}, "vertical_alignment": "baseline"},
        )
        assert result["error"]["code"] == "INVALID_ARGUMENT"
        assert result["error"]["details"]["errors"][0]["loc"] == ["vertical_alignment"]

    @pytest.mark.asyncio
    async def test_negative_spacing(self, layout_tools):
        result = await layout_tools.handle_tool(
            "flow_layout_fitting_height",
            {"items": [], "bounds": {"width": 100}, "horizontal_spacing": -5},
        )
        assert result["error"]["code"] == "INVALID_ARGUMENT"

    def test_invalid_argument_error_message(self):
        error = InvalidLayoutArgumentError("items", "expected an array")
        assert isinstance(error, ValueError)
        assert str(error) == "Invalid argument 'items': expected an array"
