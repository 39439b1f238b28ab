"""Vector storage port and the LanceDB adapter."""

from lancedb_mcp.vector.lancedb import LanceDBTable, LanceDBVectorStore
from lancedb_mcp.vector.store import VectorField, VectorStore, VectorTable

__all__ = ["LanceDBTable", "LanceDBVectorStore", "VectorField", "VectorStore", "VectorTable"]
