"""Schema converters between lancedb-mcp tools/prompts and MCP types."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mcp.types import Prompt as MCPPrompt
from mcp.types import PromptArgument as MCPPromptArgument
from mcp.types import Tool as MCPTool

if TYPE_CHECKING:
    from lancedb_mcp.mcp.prompts import PromptTemplate
    from lancedb_mcp.tools.base import Tool


def tool_to_mcp_input_schema(tool: Tool) -> dict[str, Any]:
    """Convert a tool's argument model to an MCP-compatible input schema.

    Args:
        tool: Tool instance

    Returns:
        JSON Schema dict for MCP Tool.inputSchema
    """
    schema = dict(tool.schema.input_schema())
    schema.pop("title", None)
    schema["type"] = "object"
    schema.setdefault("properties", {})
    return schema


def tool_to_mcp(tool: Tool) -> MCPTool:
    """Convert a tool to its MCP description."""
    return MCPTool(
        name=tool.schema.name,
        description=tool.schema.description,
        inputSchema=tool_to_mcp_input_schema(tool),
    )


def prompt_to_mcp(prompt: PromptTemplate) -> MCPPrompt:
    """Convert a prompt template to its MCP description."""
    return MCPPrompt(
        name=prompt.name,
        description=prompt.description,
        arguments=[
            MCPPromptArgument(name=arg.name, description=arg.description, required=arg.required)
            for arg in prompt.arguments
        ],
    )
