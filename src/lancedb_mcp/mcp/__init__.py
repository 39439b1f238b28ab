"""Model Context Protocol (MCP) server for lancedb-mcp.

Provides:
- MCP Server: expose the vector tools and prompts to MCP clients
- Transports: stdio (default) and Streamable HTTP
"""

from lancedb_mcp.mcp.server import ToolCallFailed, create_mcp_server, execute_tool

__all__ = [
    "ToolCallFailed",
    "create_mcp_server",
    "execute_tool",
]
