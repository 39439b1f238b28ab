"""Pytest configuration and shared fixtures."""

import math
from typing import Any

import pytest

from lancedb_mcp.config.schema import LanceDBMCPConfig
from lancedb_mcp.errors import TableNotFoundError
from lancedb_mcp.vector.store import VectorField


class FakeTable:
    """In-memory table: rows are dicts, the vector column is ``vector``."""

    def __init__(self, name: str, rows: list[dict[str, Any]]):
        self.name = name
        self.rows = [dict(r) for r in rows]
        self.dimension = len(rows[0]["vector"]) if rows else 0
        self.search_calls: list[dict[str, Any]] = []

    def add(self, records: list[dict[str, Any]]) -> None:
        self.rows.extend(dict(r) for r in records)

    def count_rows(self) -> int:
        return len(self.rows)

    def vector_field(self, min_dimension: int = 10) -> VectorField | None:
        if not self.dimension:
            return None
        return VectorField(name="vector", dimension=self.dimension)

    def search(
        self,
        vector: list[float],
        *,
        distance_type: str = "cosine",
        limit: int = 10,
        where: str | None = None,
        vector_column: str | None = None,
    ) -> list[dict[str, Any]]:
        self.search_calls.append(
            {
                "vector": vector,
                "distance_type": distance_type,
                "limit": limit,
                "where": where,
                "vector_column": vector_column,
            }
        )
        scored = []
        for row in self.rows:
            dist = math.dist(row["vector"], vector) if len(row["vector"]) == len(vector) else math.inf
            scored.append({**row, "_distance": dist})
        scored.sort(key=lambda r: r["_distance"])
        return scored[:limit]


class FakeStore:
    """In-memory implementation of the VectorStore protocol."""

    def __init__(self):
        self.tables: dict[str, FakeTable] = {}
        self.closed = False

    def table_names(self) -> list[str]:
        return list(self.tables)

    def open_table(self, name: str) -> FakeTable:
        if name not in self.tables:
            raise TableNotFoundError(name)
        return self.tables[name]

    def create_table(self, name: str, records: list[dict[str, Any]]) -> FakeTable:
        self.tables[name] = FakeTable(name, records)
        return self.tables[name]

    def close(self) -> None:
        self.closed = True


class FakeEmbedder:
    """Embedding client returning a fixed vector and counting calls."""

    def __init__(self, vector: list[float]):
        self.vector = vector
        self.calls: list[str] = []

    async def embed(self, texts: list[str]) -> list[list[float]]:
        return [await self.embed_single(t) for t in texts]

    async def embed_single(self, text: str) -> list[float]:
        self.calls.append(text)
        return list(self.vector)

    @property
    def dimension(self) -> int:
        return len(self.vector)

    @property
    def model_name(self) -> str:
        return "fake"


@pytest.fixture
def default_config() -> LanceDBMCPConfig:
    """Provide a default configuration for tests."""
    return LanceDBMCPConfig()


@pytest.fixture
def fake_store() -> FakeStore:
    return FakeStore()


@pytest.fixture
def docs_store() -> FakeStore:
    """Store with a ``docs`` table of three 2-d vectors."""
    store = FakeStore()
    store.create_table(
        "docs",
        [
            {"vector": [0.1, 0.2], "title": "a"},
            {"vector": [0.9, 0.8], "title": "b"},
            {"vector": [0.5, 0.5], "title": "c"},
        ],
    )
    return store


@pytest.fixture
def fake_embedder() -> FakeEmbedder:
    return FakeEmbedder([0.1, 0.2])
