"""
ToolGate MCP Server - SSE Transport.
"""
from typing import Any

from mcp.server.fastmcp import FastMCP

from toolgate.config import get_settings
from toolgate.logging_setup import setup_logging
from toolgate.mcp.utils import validate_tools
from toolgate.tools.base import get_all_tools
from toolgate.tools.loader import register_tools_file


def register(mcp: FastMCP) -> None:
    """Register ToolGate's own tools with the MCP server."""

    @mcp.tool()
    def validate_tool_definitions(tools: dict[str, Any]) -> dict:
        """Validate tool definitions and return only the ones that pass.

        Args:
            tools: Mapping of tool name to definition ({description, parameters | paramsSchema})
        """
        return validate_tools(tools).model_dump()

    @mcp.tool()
    def list_registered_tools() -> list[dict]:
        """List the tools that passed validation at startup, in MCP format."""
        return [tool.to_schema().model_dump() for tool in get_all_tools()]


def create_server() -> FastMCP:
    """Build the MCP server, registering TOOLGATE_TOOLS_FILE if configured."""
    settings = get_settings()
    setup_logging(settings.log_level)

    if settings.tools_file:
        register_tools_file(settings.tools_file)

    mcp = FastMCP(name="toolgate", host=settings.host, port=settings.port)
    register(mcp)
    return mcp


if __name__ == "__main__":
    create_server().run(transport="sse")
