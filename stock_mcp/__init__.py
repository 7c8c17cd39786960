"""Stock API MCP server — vehicle inventory discovery over the Stock API."""

__version__ = "0.1.0"
