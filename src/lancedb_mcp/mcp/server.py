"""MCP Server exposing the vector tools to external clients."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from mcp.server import Server
from mcp.types import GetPromptResult, PromptMessage, TextContent
from mcp.types import Prompt as MCPPrompt
from mcp.types import Tool as MCPTool

from lancedb_mcp import __version__
from lancedb_mcp.errors import LanceDBMCPError, ToolArgumentError
from lancedb_mcp.mcp.converters import prompt_to_mcp, tool_to_mcp
from lancedb_mcp.mcp.prompts import render_prompt
from lancedb_mcp.tools.arguments import validate_arguments
from lancedb_mcp.tools.base import ToolResult

if TYPE_CHECKING:
    from lancedb_mcp.mcp.prompts import PromptTemplate
    from lancedb_mcp.tools.base import Tool

logger = logging.getLogger(__name__)

DEFAULT_SERVER_NAME = "lancedb-vector-server"


class ToolCallFailed(LanceDBMCPError):
    """Raised inside ``call_tool`` so the SDK flags the response with isError."""


async def execute_tool(
    tools: dict[str, Tool],
    name: str,
    arguments: dict[str, Any] | None,
) -> ToolResult:
    """Validate arguments and run a tool, converting every failure into a result.

    Args:
        tools: Dictionary mapping tool names to Tool instances
        name: Requested tool name
        arguments: Raw arguments from the client

    Returns:
        ToolResult; ``is_error`` is set when the tool is unknown, the
        arguments are invalid, or the handler fails
    """
    if name not in tools:
        return ToolResult(text=f"Error: Unknown tool: {name}", is_error=True)

    tool = tools[name]
    try:
        args = validate_arguments(tool.schema.args_model, name, arguments)
        text = await tool.execute(args)
    except ToolArgumentError as e:
        logger.warning("Rejected call to %s: %s", name, e)
        return ToolResult(text=f"Error: {e}", is_error=True)
    except Exception as e:
        logger.error("Tool %s failed: %s", name, e)
        return ToolResult(text=f"Error: {e}", is_error=True)

    return ToolResult(text=text)


def create_mcp_server(
    tools: dict[str, Tool],
    prompts: dict[str, PromptTemplate] | None = None,
    server_name: str = DEFAULT_SERVER_NAME,
) -> Server:
    """Create an MCP Server that exposes the given tools and prompts.

    Args:
        tools: Dictionary mapping tool names to Tool instances
        prompts: Dictionary mapping prompt names to templates
        server_name: Name for the MCP server

    Returns:
        Configured MCP Server instance
    """
    server = Server(server_name, version=__version__)
    prompts = prompts or {}

    @server.list_tools()
    async def list_tools() -> list[MCPTool]:
        """Return all registered tools in MCP format."""
        return [tool_to_mcp(tool) for tool in tools.values()]

    @server.call_tool()
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Execute a tool and return the result."""
        result = await execute_tool(tools, name, arguments)
        if result.is_error:
            raise ToolCallFailed(result.text)
        return [TextContent(type="text", text=result.text)]

    @server.list_prompts()
    async def list_prompts() -> list[MCPPrompt]:
        return [prompt_to_mcp(prompt) for prompt in prompts.values()]

    @server.get_prompt()
    async def get_prompt(name: str, arguments: dict[str, str] | None) -> GetPromptResult:
        text = render_prompt(prompts, name, arguments)
        return GetPromptResult(
            description=prompts[name].description,
            messages=[
                PromptMessage(role="user", content=TextContent(type="text", text=text)),
            ],
        )

    return server
