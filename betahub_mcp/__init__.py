"""BetaHub MCP Server: BetaHub projects, feature requests, issues and releases as MCP tools."""

__version__ = "1.0.0"
