"""Pydantic models for the lancedb-mcp configuration file."""

from typing import Literal

from pydantic import BaseModel, Field

DistanceType = Literal["l2", "cosine", "dot"]


class DatabaseConfig(BaseModel):
    """LanceDB storage location."""

    path: str | None = Field(
        default=None,
        description="LanceDB database URI or directory (required at startup)",
    )


class EmbeddingConfig(BaseModel):
    """Ollama embedding endpoint configuration."""

    endpoint: str = Field(
        default="http://localhost:11434/api/embeddings",
        description="URL of the Ollama API embeddings endpoint",
    )
    model: str = Field(
        default="nomic-embed-text:latest",
        description="Ollama model used to embed query_text",
    )
    timeout: int = Field(default=30, description="Request timeout in seconds", ge=1)


class SearchConfig(BaseModel):
    """Defaults applied to vector_search calls."""

    default_limit: int = Field(default=10, description="Result limit when none is given", ge=1)
    default_distance: DistanceType = Field(
        default="cosine",
        description="Distance metric when none is given",
    )
    min_vector_dimension: int = Field(
        default=10,
        description="Fixed-size list columns longer than this are treated as vector columns",
        ge=0,
    )


class ServerConfig(BaseModel):
    """MCP server configuration."""

    name: str = Field(default="lancedb-vector-server", description="Server name reported to clients")
    transport: Literal["stdio", "http"] = Field(default="stdio", description="MCP transport")
    host: str = Field(default="127.0.0.1", description="Bind host for the HTTP transport")
    port: int = Field(default=8200, description="Bind port for the HTTP transport", ge=1, le=65535)


class LanceDBMCPConfig(BaseModel):
    """Root configuration model."""

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    embedding: EmbeddingConfig = Field(default_factory=EmbeddingConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
