"""Main CLI application using Typer."""

import typer
from rich.console import Console

from lancedb_mcp import __version__

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}

app = typer.Typer(
    name="lancedb-mcp",
    help="lancedb-mcp - MCP server for LanceDB vector search",
    no_args_is_help=True,
    context_settings=CONTEXT_SETTINGS,
)

console = Console()


def serve(
    db_path: str = typer.Option(
        None, "--db-path", help="Path to the LanceDB database (required)"
    ),
    ollama_endpoint: str = typer.Option(
        None,
        "--ollama-endpoint",
        help="URL of the Ollama API embeddings endpoint "
        "(default: http://localhost:11434/api/embeddings)",
    ),
    ollama_model: str = typer.Option(
        None,
        "--ollama-model",
        help="Ollama model to use for embeddings (default: nomic-embed-text:latest)",
    ),
    transport: str = typer.Option(None, "--transport", "-t", help="MCP transport: stdio or http"),
    host: str = typer.Option(None, "--host", help="Bind host for the HTTP transport"),
    port: int = typer.Option(None, "--port", "-p", help="Bind port for the HTTP transport"),
    config_path: str = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to config file (default: ~/.lancedb-mcp/config.yaml)",
    ),
    log_level: str = typer.Option("INFO", "--log-level", help="Logging level"),
):
    """Start the MCP server."""
    from lancedb_mcp.cli.serve_cmd import serve_command

    code = serve_command(
        db_path=db_path,
        ollama_endpoint=ollama_endpoint,
        ollama_model=ollama_model,
        transport=transport,
        host=host,
        port=port,
        config_path=config_path,
        log_level=log_level,
    )
    if code:
        raise typer.Exit(code=code)


app.command("serve")(serve)


@app.command()
def init(
    db_path: str = typer.Option(None, "--db-path", help="LanceDB database path to record"),
    ollama_endpoint: str = typer.Option(None, "--ollama-endpoint", help="Embeddings endpoint URL"),
    ollama_model: str = typer.Option(None, "--ollama-model", help="Embedding model name"),
    config_path: str = typer.Option(
        None, "--config", "-c", help="Where to write (default: ~/.lancedb-mcp/config.yaml)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
):
    """Write a starter config file."""
    from lancedb_mcp.cli.init_cmd import init_command

    code = init_command(
        db_path=db_path,
        ollama_endpoint=ollama_endpoint,
        ollama_model=ollama_model,
        config_path=config_path,
        force=force,
    )
    if code:
        raise typer.Exit(code=code)


@app.command()
def tables(
    db_path: str = typer.Option(..., "--db-path", help="Path to the LanceDB database"),
):
    """List the tables of a database."""
    from lancedb_mcp.cli.serve_cmd import tables_command

    code = tables_command(db_path)
    if code:
        raise typer.Exit(code=code)


@app.command()
def version():
    """Show lancedb-mcp version."""
    console.print(f"lancedb-mcp version {__version__}")


# Single-command app behind the mcp-server-lancedb script
server_app = typer.Typer(
    name="mcp-server-lancedb",
    add_completion=False,
    context_settings=CONTEXT_SETTINGS,
)
server_app.command()(serve)


def main() -> None:
    """Entry point for ``mcp-server-lancedb``."""
    server_app()
