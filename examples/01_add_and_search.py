"""Example 01: Add vectors and search them without an MCP client.

This example demonstrates:
1. Opening a LanceDB database in a temporary directory
2. Creating the vector tools bound to that store
3. Adding records (the table is created on first write)
4. Searching by vector, with and without the vector column
5. Searching by text (requires a running Ollama with nomic-embed-text)
"""

import asyncio
import json
import tempfile

from lancedb_mcp.embeddings.ollama import OllamaEmbedding
from lancedb_mcp.mcp.server import execute_tool
from lancedb_mcp.tools.vector_tools import create_vector_tools
from lancedb_mcp.vector.lancedb import LanceDBVectorStore

DIM = 16


async def main():
    with tempfile.TemporaryDirectory() as tmpdir:
        print("1. Connecting to LanceDB...")
        store = LanceDBVectorStore.connect(tmpdir)

        print("2. Creating tools...")
        tools = create_vector_tools(store, OllamaEmbedding())

        print("3. Adding vectors...")
        result = await execute_tool(
            tools,
            "vector_add",
            {
                "table_name": "docs",
                "vectors": [
                    {"vector": [0.1] * DIM, "title": "Getting started", "url": "https://example.com/start"},
                    {"vector": [0.9] * DIM, "title": "Advanced usage", "url": "https://example.com/adv"},
                ],
            },
        )
        print(f"   {result.text}")

        print("4. Searching by vector...")
        result = await execute_tool(
            tools,
            "vector_search",
            {"table_name": "docs", "query_vector": [0.85] * DIM, "distance_type": "l2", "limit": 1},
        )
        print(json.dumps(json.loads(result.text), indent=2))

        print("5. Searching by text...")
        result = await execute_tool(
            tools, "vector_search", {"table_name": "docs", "query_text": "how do I begin?"}
        )
        if result.is_error:
            print(f"   Skipped: {result.text}")
        else:
            print(result.text)

        store.close()


if __name__ == "__main__":
    asyncio.run(main())
