"""Tests for tool argument models."""

import pytest

from lancedb_mcp.errors import ToolArgumentError
from lancedb_mcp.tools.arguments import (
    ListTablesArgs,
    VectorAddArgs,
    VectorSearchArgs,
    validate_arguments,
)


class TestVectorAddArgs:
    def test_extra_fields_pass_through(self):
        args = validate_arguments(
            VectorAddArgs,
            "vector_add",
            {"table_name": "docs", "vectors": [{"vector": [0.1, 0.2], "title": "a", "page": 3}]},
        )
        row = args.vectors[0].to_row()
        assert row == {"vector": [0.1, 0.2], "title": "a", "page": 3}

    def test_integer_components_become_floats(self):
        args = validate_arguments(
            VectorAddArgs, "vector_add", {"table_name": "t", "vectors": [{"vector": [1, 2]}]}
        )
        assert args.vectors[0].vector == [1.0, 2.0]

    def test_missing_vector_field_rejected(self):
        with pytest.raises(ToolArgumentError, match="Invalid arguments for vector_add"):
            validate_arguments(
                VectorAddArgs, "vector_add", {"table_name": "t", "vectors": [{"title": "a"}]}
            )

    def test_non_numeric_vector_rejected(self):
        with pytest.raises(ToolArgumentError):
            validate_arguments(
                VectorAddArgs, "vector_add", {"table_name": "t", "vectors": [{"vector": ["x"]}]}
            )

    def test_numeric_strings_rejected(self):
        with pytest.raises(ToolArgumentError, match="vectors.0.vector.0"):
            validate_arguments(
                VectorAddArgs, "vector_add", {"table_name": "t", "vectors": [{"vector": ["1", "2"]}]}
            )

    def test_empty_vectors_rejected(self):
        with pytest.raises(ToolArgumentError):
            validate_arguments(VectorAddArgs, "vector_add", {"table_name": "t", "vectors": []})

    def test_missing_table_name_rejected(self):
        with pytest.raises(ToolArgumentError, match="table_name"):
            validate_arguments(VectorAddArgs, "vector_add", {"vectors": [{"vector": [0.1]}]})


class TestVectorSearchArgs:
    def test_defaults(self):
        args = validate_arguments(
            VectorSearchArgs, "vector_search", {"table_name": "docs", "query_text": "hello"}
        )
        assert args.limit is None
        assert args.distance_type is None
        assert args.where is None
        assert args.with_vectors is False

    def test_requires_query_vector_or_text(self):
        with pytest.raises(ToolArgumentError) as exc_info:
            validate_arguments(VectorSearchArgs, "vector_search", {"table_name": "docs"})
        assert "Either query_vector or query_text must be provided" in str(exc_info.value)

    def test_query_vector_alone_is_enough(self):
        args = validate_arguments(
            VectorSearchArgs, "vector_search", {"table_name": "docs", "query_vector": [0.1, 0.2]}
        )
        assert args.query_vector == [0.1, 0.2]
        assert args.query_text is None

    def test_query_vector_numeric_strings_rejected(self):
        with pytest.raises(ToolArgumentError, match="query_vector"):
            validate_arguments(
                VectorSearchArgs,
                "vector_search",
                {"table_name": "docs", "query_vector": ["0.1", "0.2"]},
            )

    def test_invalid_distance_type(self):
        with pytest.raises(ToolArgumentError, match="distance_type"):
            validate_arguments(
                VectorSearchArgs,
                "vector_search",
                {"table_name": "docs", "query_vector": [0.1], "distance_type": "hamming"},
            )

    @pytest.mark.parametrize("metric", ["l2", "cosine", "dot"])
    def test_valid_distance_types(self, metric):
        args = validate_arguments(
            VectorSearchArgs,
            "vector_search",
            {"table_name": "docs", "query_vector": [0.1], "distance_type": metric},
        )
        assert args.distance_type == metric

    def test_non_positive_limit_rejected(self):
        with pytest.raises(ToolArgumentError, match="limit"):
            validate_arguments(
                VectorSearchArgs,
                "vector_search",
                {"table_name": "docs", "query_vector": [0.1], "limit": 0},
            )


def test_list_tables_accepts_no_arguments():
    assert isinstance(validate_arguments(ListTablesArgs, "list_tables", None), ListTablesArgs)
    assert isinstance(validate_arguments(ListTablesArgs, "list_tables", {}), ListTablesArgs)


def test_search_schema_lists_required_table_name():
    schema = VectorSearchArgs.model_json_schema()
    assert schema["required"] == ["table_name"]
    assert set(schema["properties"]) >= {"query_vector", "query_text", "with_vectors"}
