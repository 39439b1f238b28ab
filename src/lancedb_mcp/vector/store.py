"""Vector storage port.

Handlers talk to the storage collaborator only through these protocols, so
the LanceDB adapter can be swapped for an in-memory fake in tests.
"""

from dataclasses import dataclass
from typing import Any, Protocol


@dataclass(frozen=True)
class VectorField:
    """The column of a table that holds the embedding vectors."""

    name: str
    dimension: int


class VectorTable(Protocol):
    """Protocol for an open table."""

    @property
    def name(self) -> str:
        """Table name."""
        ...

    def add(self, records: list[dict[str, Any]]) -> None:
        """Append records to the table.

        Args:
            records: Rows to append; each must carry the vector column
        """
        ...

    def count_rows(self) -> int:
        """Get the number of rows in the table."""
        ...

    def vector_field(self, min_dimension: int = 10) -> VectorField | None:
        """Locate the vector column of the table.

        Args:
            min_dimension: Fixed-size list columns must be longer than this
                to qualify, unless the column is named ``vector``

        Returns:
            The vector column, or None if the table has no candidate
        """
        ...

    def search(
        self,
        vector: list[float],
        *,
        distance_type: str = "cosine",
        limit: int = 10,
        where: str | None = None,
        vector_column: str | None = None,
    ) -> list[dict[str, Any]]:
        """Run a similarity search.

        Args:
            vector: Query vector
            distance_type: One of ``l2``, ``cosine`` or ``dot``
            limit: Maximum number of rows to return
            where: Optional SQL filter applied before the search
            vector_column: Column to search against

        Returns:
            Matching rows ordered by distance
        """
        ...


class VectorStore(Protocol):
    """Protocol for vector store implementations."""

    def table_names(self) -> list[str]:
        """List the names of all tables in the store."""
        ...

    def open_table(self, name: str) -> VectorTable:
        """Open an existing table.

        Raises:
            TableNotFoundError: If the table does not exist
        """
        ...

    def create_table(self, name: str, records: list[dict[str, Any]]) -> VectorTable:
        """Create a table whose schema is inferred from ``records``."""
        ...

    def close(self) -> None:
        """Release the connection."""
        ...
