"""Argument models for the vector tools.

Each model validates one tool's arguments and provides the JSON Schema
advertised in ``tools/list``.
"""

from __future__ import annotations

from typing import Any, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, ValidationError, model_validator

from lancedb_mcp.errors import ToolArgumentError

DistanceType = Literal["l2", "cosine", "dot"]

ArgsT = TypeVar("ArgsT", bound=BaseModel)


class VectorRecord(BaseModel):
    """A row to add: a vector plus arbitrary extra fields."""

    model_config = ConfigDict(extra="allow")

    vector: list[StrictFloat] = Field(..., description="Vector data")

    def to_row(self) -> dict[str, Any]:
        """Return the record as a plain dict, extra fields included."""
        return self.model_dump()


class VectorAddArgs(BaseModel):
    """Arguments for ``vector_add``."""

    table_name: str = Field(..., description="Name of the table to add vectors to")
    vectors: list[VectorRecord] = Field(
        ...,
        min_length=1,
        description="Array of vectors with metadata to add",
    )


class VectorSearchArgs(BaseModel):
    """Arguments for ``vector_search``."""

    table_name: str = Field(..., description="Name of the table to search in")
    query_vector: list[StrictFloat] | None = Field(
        default=None,
        description="Query vector for similarity search",
    )
    query_text: str | None = Field(
        default=None,
        description="Text query to be converted to a vector using Ollama embedding",
    )
    limit: int | None = Field(
        default=None,
        ge=1,
        description="Maximum number of results to return (default: 10)",
    )
    distance_type: DistanceType | None = Field(
        default=None,
        description="Distance metric to use (default: cosine)",
    )
    where: str | None = Field(default=None, description="Filter condition in SQL syntax")
    with_vectors: bool = Field(
        default=False,
        description="Whether to include vector data in results (default: false)",
    )

    @model_validator(mode="after")
    def _require_query(self) -> VectorSearchArgs:
        if self.query_vector is None and self.query_text is None:
            raise ValueError("Either query_vector or query_text must be provided")
        return self


class ListTablesArgs(BaseModel):
    """``list_tables`` takes no arguments."""


def validate_arguments(
    model: type[ArgsT],
    tool_name: str,
    arguments: dict[str, Any] | None,
) -> ArgsT:
    """Validate raw call arguments against a tool's argument model.

    Args:
        model: Argument model class
        tool_name: Tool name, used in the error message
        arguments: Raw arguments from the client

    Returns:
        Validated argument bundle

    Raises:
        ToolArgumentError: If the arguments do not match the model
    """
    try:
        return model.model_validate(arguments or {})
    except ValidationError as e:
        details = "; ".join(_format_error(err) for err in e.errors())
        raise ToolArgumentError(f"Invalid arguments for {tool_name}: {details}") from e


def _format_error(err: Any) -> str:
    loc = ".".join(str(part) for part in err.get("loc", ()))
    msg = err.get("msg", "invalid value")
    return f"{loc}: {msg}" if loc else msg
