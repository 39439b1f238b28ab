"""Allow ``python -m lancedb_mcp``."""

from lancedb_mcp.cli.app import main

if __name__ == "__main__":
    main()
