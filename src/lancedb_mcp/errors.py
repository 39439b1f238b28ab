"""Exception hierarchy for lancedb-mcp."""


class LanceDBMCPError(Exception):
    """Base class for all lancedb-mcp errors."""


class ConfigError(LanceDBMCPError):
    """Configuration loading or validation error."""


class VectorStoreError(LanceDBMCPError):
    """Error raised by the vector storage collaborator."""


class TableNotFoundError(VectorStoreError):
    """Requested table does not exist in the store."""

    def __init__(self, table_name: str):
        super().__init__(f"Table '{table_name}' does not exist")
        self.table_name = table_name


class EmbeddingError(LanceDBMCPError):
    """Embedding service request failed or returned an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ToolArgumentError(LanceDBMCPError):
    """Tool call arguments failed validation."""


class ToolExecutionError(LanceDBMCPError):
    """Tool handler failed while talking to a collaborator."""


class PromptError(LanceDBMCPError):
    """Unknown prompt or missing prompt argument."""
