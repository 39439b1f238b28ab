"""Vector tool handlers and their factory.

The handlers receive the store and the embedding client explicitly; the
factory binds them into :class:`~lancedb_mcp.tools.base.Tool` objects for
the MCP server.
"""

from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from lancedb_mcp.errors import TableNotFoundError, ToolExecutionError
from lancedb_mcp.tools.arguments import (
    ListTablesArgs,
    VectorAddArgs,
    VectorSearchArgs,
)
from lancedb_mcp.tools.base import Tool, ToolSchema

if TYPE_CHECKING:
    from lancedb_mcp.config.schema import SearchConfig
    from lancedb_mcp.embeddings.client import EmbeddingClient
    from lancedb_mcp.vector.store import VectorStore

logger = logging.getLogger(__name__)


@dataclass
class SearchSettings:
    """Defaults for vector_search arguments the caller leaves out."""

    default_limit: int = 10
    default_distance: str = "cosine"
    min_vector_dimension: int = 10

    @classmethod
    def from_config(cls, config: SearchConfig) -> SearchSettings:
        return cls(
            default_limit=config.default_limit,
            default_distance=config.default_distance,
            min_vector_dimension=config.min_vector_dimension,
        )


async def add_vectors(store: VectorStore, args: VectorAddArgs) -> str:
    """Append records to a table, creating the table on first write.

    Args:
        store: Vector store connection
        args: Validated vector_add arguments

    Returns:
        Summary of how many records were written
    """
    table_name = args.table_name
    records = [record.to_row() for record in args.vectors]
    count = len(records)

    try:
        table = await asyncio.to_thread(store.open_table, table_name)
    except TableNotFoundError:
        logger.info("Table %s not found, creating it", table_name)
        try:
            await asyncio.to_thread(store.create_table, table_name, records)
        except Exception as e:
            raise ToolExecutionError(f"Error creating table {table_name}: {e}") from e
        return f"Created table {table_name}. Added {count} vectors to table {table_name}"
    except Exception as e:
        raise ToolExecutionError(f"Error opening table {table_name}: {e}") from e

    try:
        await asyncio.to_thread(table.add, records)
    except Exception as e:
        raise ToolExecutionError(f"Error adding vectors to table {table_name}: {e}") from e

    return f"Added {count} vectors to table {table_name}"


async def resolve_query_vector(
    args: VectorSearchArgs,
    embedder: EmbeddingClient | None,
) -> list[float]:
    """Return the literal query vector, or embed ``query_text``."""
    if args.query_vector is not None:
        return args.query_vector

    if embedder is None:
        raise ToolExecutionError("query_text requires an embedding client")

    logger.info('Generating embedding for text: "%s"', args.query_text)
    vector = await embedder.embed_single(args.query_text or "")
    logger.info("Generated embedding with dimension: %d", len(vector))
    return vector


def project_results(
    rows: list[dict[str, Any]],
    vector_column: str,
    with_vectors: bool,
) -> list[dict[str, Any]]:
    """Return new row dicts, without the vector column unless requested."""
    if with_vectors:
        return [dict(row) for row in rows]
    return [{key: value for key, value in row.items() if key != vector_column} for row in rows]


async def search_vectors(
    store: VectorStore,
    embedder: EmbeddingClient | None,
    args: VectorSearchArgs,
    settings: SearchSettings | None = None,
) -> str:
    """Run a similarity search against a table.

    Args:
        store: Vector store connection
        embedder: Embedding client used when only ``query_text`` is given
        args: Validated vector_search arguments
        settings: Defaults for limit, metric and the vector-column heuristic

    Returns:
        JSON array of matching rows
    """
    settings = settings or SearchSettings()
    table_name = args.table_name

    try:
        table = await asyncio.to_thread(store.open_table, table_name)
        search_vector = await resolve_query_vector(args, embedder)

        field = await asyncio.to_thread(table.vector_field, settings.min_vector_dimension)
        if field is None:
            raise ToolExecutionError("No vector column found in the table")

        if len(search_vector) != field.dimension:
            logger.warning(
                "Query vector dimension (%d) doesn't match table vector dimension (%d)",
                len(search_vector),
                field.dimension,
            )

        rows = await asyncio.to_thread(
            table.search,
            search_vector,
            distance_type=args.distance_type or settings.default_distance,
            limit=args.limit or settings.default_limit,
            where=args.where,
            vector_column=field.name,
        )
    except Exception as e:
        raise ToolExecutionError(f"Error searching table {table_name}: {e}") from e

    results = project_results(rows, field.name, args.with_vectors)
    return json.dumps(results, indent=2, default=_json_default)


async def list_tables(store: VectorStore) -> str:
    """Return the store's table names as a JSON array."""
    try:
        names = await asyncio.to_thread(store.table_names)
    except Exception as e:
        raise ToolExecutionError(f"Error listing tables: {e}") from e
    return json.dumps(list(names), indent=2)


def _json_default(value: Any) -> Any:
    # numpy arrays/scalars and pyarrow scalars expose tolist()/as_py()
    if hasattr(value, "tolist"):
        return value.tolist()
    if hasattr(value, "as_py"):
        return value.as_py()
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def create_vector_tools(
    store: VectorStore,
    embedder: EmbeddingClient | None = None,
    settings: SearchSettings | None = None,
) -> dict[str, Tool]:
    """Create the vector tools bound to a store and an embedding client.

    Args:
        store: Vector store connection shared by all tools
        embedder: Embedding client for text queries
        settings: Search defaults

    Returns:
        Dictionary mapping tool names to Tool instances
    """
    settings = settings or SearchSettings()

    async def _add(args: VectorAddArgs) -> str:
        return await add_vectors(store, args)

    async def _search(args: VectorSearchArgs) -> str:
        return await search_vectors(store, embedder, args, settings)

    async def _list(args: ListTablesArgs) -> str:
        return await list_tables(store)

    tools = [
        Tool(
            schema=ToolSchema(
                name="vector_add",
                description=(
                    "Add vectors with metadata to a LanceDB table. "
                    "Creates the table if it doesn't exist."
                ),
                args_model=VectorAddArgs,
            ),
            fn=_add,
        ),
        Tool(
            schema=ToolSchema(
                name="vector_search",
                description=(
                    "Search for similar vectors in a LanceDB table using either a direct "
                    "vector or text that will be converted to a vector using Ollama embedding."
                ),
                args_model=VectorSearchArgs,
            ),
            fn=_search,
        ),
        Tool(
            schema=ToolSchema(
                name="list_tables",
                description="List all tables in the LanceDB database.",
                args_model=ListTablesArgs,
            ),
            fn=_list,
        ),
    ]
    return {t.schema.name: t for t in tools}
