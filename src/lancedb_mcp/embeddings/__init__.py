"""Embedding generation for text queries."""

from lancedb_mcp.embeddings.client import EmbeddingClient
from lancedb_mcp.embeddings.ollama import OllamaEmbedding

__all__ = ["EmbeddingClient", "OllamaEmbedding"]
