"""Read and write the lancedb-mcp YAML config file."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from lancedb_mcp.config.schema import LanceDBMCPConfig
from lancedb_mcp.errors import ConfigError

DEFAULT_CONFIG_PATH = Path.home() / ".lancedb-mcp" / "config.yaml"

__all__ = ["DEFAULT_CONFIG_PATH", "ConfigError", "load_config", "save_config"]


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping, got {type(data).__name__}")
    return data


def load_config(path: Path | None = None) -> LanceDBMCPConfig:
    """Load the server configuration.

    A missing or empty file means "all defaults"; the database path can
    then still be given on the command line.

    Args:
        path: Config file, defaults to ``~/.lancedb-mcp/config.yaml``

    Returns:
        Validated configuration

    Raises:
        ConfigError: If the file is unreadable, not YAML, or fails validation
    """
    path = path or DEFAULT_CONFIG_PATH
    if not path.exists():
        return LanceDBMCPConfig()

    try:
        return LanceDBMCPConfig.model_validate(_read_yaml(path))
    except ValidationError as e:
        raise ConfigError(f"Configuration validation failed for {path}: {e}") from e


def save_config(config: LanceDBMCPConfig, path: Path | str | None = None) -> Path:
    """Write ``config`` as YAML, creating parent directories.

    Returns:
        The path written to
    """
    path = Path(path) if path is not None else DEFAULT_CONFIG_PATH
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        yaml.safe_dump(config.model_dump(), default_flow_style=False, sort_keys=False),
        encoding="utf-8",
    )
    return path
