"""Tools exposed over MCP.

Provides a tool protocol, registry, and the concrete tools: clock and
instant timing, file read/write, shell commands, and URL fetch.
"""
