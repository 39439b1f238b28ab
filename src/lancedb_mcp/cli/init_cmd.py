"""Initialize command - write a starter config file."""

from pathlib import Path

from rich.console import Console
from rich.panel import Panel

from lancedb_mcp.config.loader import DEFAULT_CONFIG_PATH, save_config
from lancedb_mcp.config.schema import LanceDBMCPConfig

console = Console()


def init_command(
    db_path: str | None = None,
    ollama_endpoint: str | None = None,
    ollama_model: str | None = None,
    config_path: str | None = None,
    force: bool = False,
) -> int:
    """Write a config file with defaults plus the given values.

    Args:
        db_path: LanceDB database location to record
        ollama_endpoint: Embeddings endpoint to record
        ollama_model: Embedding model to record
        config_path: Destination, defaults to ``~/.lancedb-mcp/config.yaml``
        force: Overwrite an existing file

    Returns:
        Process exit code
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path}[/yellow]")
        console.print("Use [bold]--force[/bold] to overwrite.")
        return 1

    config = LanceDBMCPConfig()
    if db_path:
        config.database.path = str(Path(db_path).expanduser())
    if ollama_endpoint:
        config.embedding.endpoint = ollama_endpoint
    if ollama_model:
        config.embedding.model = ollama_model

    written = save_config(config, path)

    console.print(
        Panel.fit(
            f"[bold green]Wrote {written}[/bold green]\n"
            f"database: {config.database.path or '(set with --db-path)'}\n"
            f"embedding: {config.embedding.model} @ {config.embedding.endpoint}",
            border_style="green",
        )
    )
    return 0
