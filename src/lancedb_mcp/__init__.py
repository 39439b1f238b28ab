"""lancedb-mcp - Model Context Protocol server for LanceDB vector tables.

Exposes three tools to MCP clients (Claude Desktop, IDE agents, etc.):

- ``vector_add`` - append records to a table, creating it on first write
- ``vector_search`` - similarity search by vector or by text (embedded via Ollama)
- ``list_tables`` - list the tables of the database

Key modules:

- :mod:`lancedb_mcp.vector` - storage port and LanceDB adapter
- :mod:`lancedb_mcp.embeddings` - Ollama embedding client
- :mod:`lancedb_mcp.tools` - argument models and tool handlers
- :mod:`lancedb_mcp.mcp` - MCP server, prompts and transports
"""

__version__ = "0.1.0"
