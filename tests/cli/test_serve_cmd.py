"""Tests for the serve and tables commands."""

from unittest.mock import MagicMock, patch

from lancedb_mcp.cli.serve_cmd import serve_command, tables_command
from lancedb_mcp.config.schema import LanceDBMCPConfig
from lancedb_mcp.errors import ConfigError, VectorStoreError


def _patched(config: LanceDBMCPConfig | None = None):
    return patch("lancedb_mcp.config.loader.load_config", return_value=config or LanceDBMCPConfig())


def test_missing_db_path_is_fatal(capsys):
    with _patched():
        code = serve_command()

    assert code == 1
    err = capsys.readouterr().err
    assert "Missing required arguments" in err
    assert "Usage: mcp-server-lancedb --db-path <path>" in err


def test_config_load_failure():
    with patch("lancedb_mcp.config.loader.load_config", side_effect=ConfigError("bad yaml")):
        assert serve_command(db_path="/tmp/db") == 1


def test_unknown_transport():
    with _patched():
        assert serve_command(db_path="/tmp/db", transport="grpc") == 1


def test_connection_failure_is_fatal():
    with (
        _patched(),
        patch("lancedb_mcp.logging_config.configure_logging"),
        patch(
            "lancedb_mcp.vector.lancedb.LanceDBVectorStore.connect",
            side_effect=VectorStoreError("Failed to connect to LanceDB at /nope: denied"),
        ),
    ):
        assert serve_command(db_path="/nope") == 1


def test_serve_stdio_transport_closes_store():
    store = MagicMock()
    with (
        _patched(),
        patch("lancedb_mcp.logging_config.configure_logging"),
        patch("lancedb_mcp.vector.lancedb.LanceDBVectorStore.connect", return_value=store),
        patch("lancedb_mcp.mcp.transports.run_stdio_server", new=MagicMock()) as mock_run,
        patch("lancedb_mcp.cli.serve_cmd.asyncio.run") as mock_asyncio_run,
    ):
        code = serve_command(db_path="/tmp/db")

    assert code == 0
    mock_run.assert_called_once()
    mock_asyncio_run.assert_called_once()
    store.close.assert_called_once()


def test_cli_values_override_config():
    config = LanceDBMCPConfig()
    config.database.path = "/from/config"
    config.embedding.model = "config-model"

    with (
        _patched(config),
        patch("lancedb_mcp.logging_config.configure_logging"),
        patch("lancedb_mcp.vector.lancedb.LanceDBVectorStore.connect") as mock_connect,
        patch("lancedb_mcp.embeddings.ollama.OllamaEmbedding") as mock_embedding,
        patch("lancedb_mcp.mcp.transports.run_stdio_server", new=MagicMock()),
        patch("lancedb_mcp.cli.serve_cmd.asyncio.run"),
    ):
        serve_command(db_path="/from/cli", ollama_endpoint="http://ollama:11434/api/embeddings")

    mock_connect.assert_called_once_with("/from/cli")
    mock_embedding.assert_called_once_with(
        model="config-model",
        endpoint="http://ollama:11434/api/embeddings",
        timeout=30,
    )


def test_db_path_from_config_file():
    config = LanceDBMCPConfig()
    config.database.path = "/from/config"

    with (
        _patched(config),
        patch("lancedb_mcp.logging_config.configure_logging"),
        patch("lancedb_mcp.vector.lancedb.LanceDBVectorStore.connect") as mock_connect,
        patch("lancedb_mcp.mcp.transports.run_stdio_server", new=MagicMock()),
        patch("lancedb_mcp.cli.serve_cmd.asyncio.run"),
    ):
        assert serve_command() == 0

    mock_connect.assert_called_once_with("/from/config")


def test_runtime_failure_still_closes_store():
    store = MagicMock()
    with (
        _patched(),
        patch("lancedb_mcp.logging_config.configure_logging"),
        patch("lancedb_mcp.vector.lancedb.LanceDBVectorStore.connect", return_value=store),
        patch("lancedb_mcp.mcp.transports.run_stdio_server", new=MagicMock()),
        patch("lancedb_mcp.cli.serve_cmd.asyncio.run", side_effect=RuntimeError("stdio closed")),
    ):
        assert serve_command(db_path="/tmp/db") == 1

    store.close.assert_called_once()


def test_serve_http_transport():
    with (
        _patched(),
        patch("lancedb_mcp.logging_config.configure_logging"),
        patch("lancedb_mcp.vector.lancedb.LanceDBVectorStore.connect"),
        patch("lancedb_mcp.mcp.transports.run_streamable_http_server", new=MagicMock()) as mock_http,
        patch("lancedb_mcp.cli.serve_cmd.asyncio.run"),
    ):
        assert serve_command(db_path="/tmp/db", transport="http", host="0.0.0.0", port=9200) == 0

    _, kwargs = mock_http.call_args
    assert kwargs == {"host": "0.0.0.0", "port": 9200}


def test_tables_command_prints_names(tmp_path, capsys):
    store = MagicMock()
    store.table_names.return_value = ["docs", "notes"]
    with patch("lancedb_mcp.vector.lancedb.LanceDBVectorStore.connect", return_value=store):
        assert tables_command(str(tmp_path)) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == ["docs", "notes"]
    store.close.assert_called_once()
