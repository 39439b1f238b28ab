"""LanceDB vector store implementation."""

from __future__ import annotations

import logging
from typing import Any

import lancedb
import pyarrow as pa

from lancedb_mcp.errors import TableNotFoundError, VectorStoreError
from lancedb_mcp.vector.store import VectorField

logger = logging.getLogger(__name__)

DEFAULT_VECTOR_COLUMN = "vector"

# Page size used when listing table names
_TABLE_PAGE_SIZE = 100


class LanceDBTable:
    """Thin adapter over a ``lancedb`` table."""

    def __init__(self, table: Any):
        self._table = table

    @property
    def name(self) -> str:
        return str(self._table.name)

    @property
    def schema(self) -> pa.Schema:
        return self._table.schema

    def add(self, records: list[dict[str, Any]]) -> None:
        if not records:
            return
        self._table.add(records)

    def count_rows(self) -> int:
        count: int = self._table.count_rows()
        return count

    def vector_field(self, min_dimension: int = 10) -> VectorField | None:
        """Locate the vector column by type tag and list length.

        A fixed-size list column named ``vector`` wins; otherwise the first
        fixed-size list column longer than ``min_dimension`` is used.
        """
        candidates = [f for f in self.schema if pa.types.is_fixed_size_list(f.type)]

        for field in candidates:
            if field.name == DEFAULT_VECTOR_COLUMN:
                return VectorField(name=field.name, dimension=field.type.list_size)

        for field in candidates:
            if field.type.list_size > min_dimension:
                return VectorField(name=field.name, dimension=field.type.list_size)

        return None

    def search(
        self,
        vector: list[float],
        *,
        distance_type: str = "cosine",
        limit: int = 10,
        where: str | None = None,
        vector_column: str | None = None,
    ) -> list[dict[str, Any]]:
        query = self._table.search(vector, vector_column_name=vector_column)
        query = query.distance_type(distance_type).limit(limit)
        if where:
            query = query.where(where)
        results: list[dict[str, Any]] = query.to_list()
        return results


class LanceDBVectorStore:
    """Vector store backed by an embedded LanceDB database.

    LanceDB owns the on-disk format, the indexes and the distance
    computations; this class only adapts its connection object to the
    :class:`~lancedb_mcp.vector.store.VectorStore` protocol and translates
    missing tables into :class:`~lancedb_mcp.errors.TableNotFoundError`.
    """

    def __init__(self, db: Any, uri: str):
        """Wrap an open LanceDB connection.

        Args:
            db: Connection returned by ``lancedb.connect``
            uri: Database URI the connection was opened with
        """
        self._db: Any | None = db
        self.uri = uri

    @classmethod
    def connect(cls, uri: str) -> LanceDBVectorStore:
        """Open a connection to the database at ``uri``.

        Args:
            uri: Local directory or LanceDB URI

        Returns:
            Connected store

        Raises:
            VectorStoreError: If the connection cannot be established
        """
        try:
            db = lancedb.connect(uri)
        except Exception as e:
            raise VectorStoreError(f"Failed to connect to LanceDB at {uri}: {e}") from e

        logger.info("Connected to LanceDB at: %s", uri)
        return cls(db, uri)

    @property
    def db(self) -> Any:
        if self._db is None:
            raise VectorStoreError(f"Connection to {self.uri} is closed")
        return self._db

    @property
    def closed(self) -> bool:
        return self._db is None

    def table_names(self) -> list[str]:
        names: list[str] = []
        page_token: str | None = None
        while True:
            response = self.db.list_tables(page_token=page_token, limit=_TABLE_PAGE_SIZE)
            page = list(response.tables)
            names.extend(page)
            if len(page) < _TABLE_PAGE_SIZE:
                return names
            page_token = response.page_token or page[-1]

    def open_table(self, name: str) -> LanceDBTable:
        if name not in self.table_names():
            raise TableNotFoundError(name)
        return LanceDBTable(self.db.open_table(name))

    def create_table(self, name: str, records: list[dict[str, Any]]) -> LanceDBTable:
        table = self.db.create_table(name, data=records)
        logger.info("Created table %s with %d rows", name, len(records))
        return LanceDBTable(table)

    def close(self) -> None:
        if self._db is not None:
            logger.info("Closing LanceDB connection to %s", self.uri)
            self._db = None
