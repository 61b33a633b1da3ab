"""MCP server exposing the interview tools."""
