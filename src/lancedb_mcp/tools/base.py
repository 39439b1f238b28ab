"""Base types for the tool system."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel


@dataclass
class ToolSchema:
    """Name, description and argument model of a tool.

    The argument model doubles as the JSON Schema published to MCP clients.
    """

    name: str
    description: str
    args_model: type[BaseModel]

    def input_schema(self) -> dict[str, Any]:
        """Get the JSON Schema describing the tool's arguments."""
        return self.args_model.model_json_schema()


# Tool function signature: async function taking validated arguments, returning text
ToolFunction = Callable[[Any], Awaitable[str]]


@dataclass
class ToolResult:
    """Outcome of a tool call."""

    text: str
    is_error: bool = False


@dataclass
class Tool:
    """A tool exposed to MCP clients."""

    schema: ToolSchema
    fn: ToolFunction

    async def execute(self, args: BaseModel) -> str:
        """Execute the tool with validated arguments.

        Args:
            args: Instance of ``schema.args_model``

        Returns:
            Tool execution result as string
        """
        return await self.fn(args)
