"""Logging setup for the server process.

Everything goes to stderr: stdout carries the MCP stdio transport.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(level: str = "INFO") -> None:
    """Install a single rich handler on the root logger.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ...)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True),
                rich_tracebacks=True,
                show_path=False,
            )
        ],
        force=True,
    )

    # Third-party loggers never more verbose than WARNING
    for name in ("httpx", "httpcore", "lancedb", "mcp"):
        logging.getLogger(name).setLevel(max(log_level, logging.WARNING))
