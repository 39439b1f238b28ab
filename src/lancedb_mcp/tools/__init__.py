"""Vector tools exposed over MCP.

- **vector_add** - append records to a table (created on first write)
- **vector_search** - similarity search by vector or by text
- **list_tables** - list the database's tables

Usage::

    from lancedb_mcp.tools.vector_tools import create_vector_tools

    tools = create_vector_tools(store, embedder)
"""
