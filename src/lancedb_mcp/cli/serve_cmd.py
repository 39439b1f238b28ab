"""CLI commands for running the MCP server."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

from rich.console import Console

from lancedb_mcp.errors import ConfigError, VectorStoreError

USAGE = (
    "Usage: mcp-server-lancedb --db-path <path> "
    "[--ollama-endpoint <url>] [--ollama-model <model>]"
)

console = Console(stderr=True)
logger = logging.getLogger(__name__)


def _load(config_path: str | None):
    from lancedb_mcp.config.loader import load_config

    path = Path(config_path) if config_path else None
    return load_config(path)


def serve_command(
    db_path: str | None = None,
    ollama_endpoint: str | None = None,
    ollama_model: str | None = None,
    transport: str | None = None,
    host: str | None = None,
    port: int | None = None,
    config_path: str | None = None,
    log_level: str = "INFO",
) -> int:
    """Start the MCP server exposing the vector tools.

    Command-line values override the config file.

    Args:
        db_path: LanceDB database location
        ollama_endpoint: URL of the Ollama embeddings endpoint
        ollama_model: Ollama model for text queries
        transport: Transport type (stdio or http)
        host: Bind host for HTTP transport
        port: Bind port for HTTP transport
        config_path: Optional path to config file
        log_level: Logging level name

    Returns:
        Process exit code
    """
    try:
        config = _load(config_path)
    except ConfigError as e:
        console.print(f"[red]Failed to load config: {e}[/red]")
        return 1

    if db_path:
        config.database.path = db_path
    if ollama_endpoint:
        config.embedding.endpoint = ollama_endpoint
    if ollama_model:
        config.embedding.model = ollama_model
    if transport:
        config.server.transport = transport  # type: ignore[assignment]
    if host:
        config.server.host = host
    if port:
        config.server.port = port

    if not config.database.path:
        console.print("[red]Error: Missing required arguments[/red]")
        console.print(USAGE, markup=False, soft_wrap=True)
        return 1

    if config.server.transport not in ("stdio", "http"):
        console.print(f"[red]Unknown transport: {config.server.transport}[/red]")
        console.print("Supported: stdio, http")
        return 1

    from lancedb_mcp.logging_config import configure_logging

    configure_logging(log_level)

    from lancedb_mcp.vector.lancedb import LanceDBVectorStore

    try:
        store = LanceDBVectorStore.connect(config.database.path)
    except VectorStoreError as e:
        console.print(f"[red]{e}[/red]")
        return 1

    from lancedb_mcp.embeddings.ollama import OllamaEmbedding
    from lancedb_mcp.mcp.prompts import load_prompts
    from lancedb_mcp.mcp.server import create_mcp_server
    from lancedb_mcp.tools.vector_tools import SearchSettings, create_vector_tools

    embedder = OllamaEmbedding(
        model=config.embedding.model,
        endpoint=config.embedding.endpoint,
        timeout=config.embedding.timeout,
    )
    tools = create_vector_tools(store, embedder, SearchSettings.from_config(config.search))
    server = create_mcp_server(tools, load_prompts(), server_name=config.server.name)

    try:
        if config.server.transport == "stdio":
            from lancedb_mcp.mcp.transports import run_stdio_server

            asyncio.run(run_stdio_server(server))
        else:
            console.print(
                f"[cyan]Starting MCP server (HTTP) on "
                f"{config.server.host}:{config.server.port}...[/cyan]"
            )
            from lancedb_mcp.mcp.transports import run_streamable_http_server

            asyncio.run(
                run_streamable_http_server(server, host=config.server.host, port=config.server.port)
            )
    except KeyboardInterrupt:
        logger.info("Server stopped")
    except Exception as e:
        console.print(f"[red]Fatal error running server: {e}[/red]")
        return 1
    finally:
        store.close()

    return 0


def tables_command(db_path: str) -> int:
    """Print the table names of a database.

    Args:
        db_path: LanceDB database location

    Returns:
        Process exit code
    """
    from lancedb_mcp.tools.vector_tools import list_tables
    from lancedb_mcp.vector.lancedb import LanceDBVectorStore

    try:
        store = LanceDBVectorStore.connect(db_path)
    except VectorStoreError as e:
        console.print(f"[red]{e}[/red]")
        return 1

    try:
        names = json.loads(asyncio.run(list_tables(store)))
    except Exception as e:
        console.print(f"[red]{e}[/red]")
        return 1
    finally:
        store.close()

    if not names:
        console.print("[yellow]No tables found[/yellow]")
    for name in names:
        print(name)
    return 0
