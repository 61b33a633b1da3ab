"""interview-tool - MCP tools for timing interviews and tests."""

__version__ = "0.1.0"

# Server name, config directory and file stem, and env var prefix.
APP_NAME = "interview-tool"
