"""Main MCP server implementation for flow layout computation."""

import asyncio
import json
import logging

from mcp import Tool
from mcp.server import Server, NotificationOptions
from mcp.server.models import InitializationOptions
from mcp.types import TextContent

from .config.settings import LOG_LEVEL
from .tools.layout_tools import FlowLayoutTools

# Configure logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)


class FlowLayoutMCPServer:
    """MCP Server exposing the flow layout engine as tools."""

    def __init__(self):
        """Initialize the MCP server and its tool handlers."""
        self.layout_tools = FlowLayoutTools()

        # Create MCP server instance
        self.server = Server("flow-layout-mcp")

        # Register handlers
        self._register_handlers()

    def _register_handlers(self):
        """Register all MCP handlers."""

        @self.server.list_tools()
        async def handle_list_tools() -> list[Tool]:
            """List all available tools."""
            return self.list_tools()

        @self.server.call_tool()
        async def handle_call_tool(name: str, arguments: dict) -> list[TextContent]:
            """Route tool calls to appropriate handlers."""
            return await self.call_tool(name, arguments)

    def list_tools(self) -> list[Tool]:
        """Return every tool the server exposes."""
        return self.layout_tools.get_tools()

    async def call_tool(self, name: str, arguments: dict) -> list[TextContent]:
        """Run a tool and serialize its response as JSON text."""
        try:
            if name.startswith("flow_layout_"):
                result = await self.layout_tools.handle_tool(name, arguments)
            else:
                raise ValueError(f"Unknown tool: {name}")

            return [TextContent(type="text", text=json.dumps(result, indent=2))]

        except Exception as e:
            logger.error(f"Error executing tool {name}: {e}")
            error_result = {
                "error": str(e),
                "tool": name,
                "arguments": arguments
            }
            return [TextContent(type="text", text=json.dumps(error_result, indent=2, default=str))]

    async def run(self):
        """Run the MCP server."""
        from mcp.server.stdio import stdio_server

        async with stdio_server() as (read_stream, write_stream):
            await self.server.run(
                read_stream,
                write_stream,
                InitializationOptions(
                    server_name="flow-layout-mcp",
                    server_version="0.1.0",
                    capabilities=self.server.get_capabilities(
                        notification_options=NotificationOptions(),
                        experimental_capabilities={}
                    )
                )
            )


def main():
    """Main entry point for the MCP server."""
    server = FlowLayoutMCPServer()
    asyncio.run(server.run())


if __name__ == "__main__":
    main()
