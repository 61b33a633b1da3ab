"""Tool registry — manages available tools.

Provides registration, lookup, listing, and execution of tools
that implement the :class:`Tool` protocol.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from interview_tool.core.errors import (
    InternalError,
    InterviewToolError,
    InvalidInputError,
)
from interview_tool.tools.base import ToolDefinition, ToolResult

if TYPE_CHECKING:
    from interview_tool.tools.base import Tool, ToolCall

logger = logging.getLogger(__name__)


class ToolRegistry:
    """Registry for managing available tools.

    Supports registration, lookup by name, listing definitions
    (for advertising to MCP clients), and executing tool calls.
    """

    def __init__(self) -> None:
        self._tools: dict[str, Tool] = {}

    def register(self, tool: Tool) -> None:
        """Register a tool.

        Raises:
            ValueError: If a tool with the same name is already registered.
        """
        if tool.name in self._tools:
            msg = f"Tool already registered: {tool.name}"
            raise ValueError(msg)
        self._tools[tool.name] = tool

    def get(self, name: str) -> Tool:
        """Get a tool by name.

        Raises:
            KeyError: If the tool is not found.
        """
        if name not in self._tools:
            msg = f"Tool not found: {name}"
            raise KeyError(msg)
        return self._tools[name]

    def list_definitions(self) -> list[ToolDefinition]:
        """Return tool definitions for all registered tools."""
        return [
            ToolDefinition(
                name=t.name,
                description=t.description,
                parameters_schema=t.parameters_schema,
            )
            for t in self._tools.values()
        ]

    async def execute(self, tool_call: ToolCall) -> ToolResult:
        """Execute a tool call and return its text blocks.

        Raises:
            InvalidInputError: If the tool is not registered.
            InterviewToolError: Whatever the tool raised; any other
                exception is wrapped as :class:`InternalError`.
        """
        try:
            tool = self.get(tool_call.name)
        except KeyError:
            msg = f"Unknown tool: {tool_call.name}"
            raise InvalidInputError(msg) from None
        try:
            result = await tool.execute(**tool_call.arguments)
        except InterviewToolError as exc:
            logger.warning("Tool %s failed: %s", tool_call.name, exc)
            raise
        except Exception as exc:
            logger.exception("Tool %s raised unexpectedly", tool_call.name)
            msg = f"Tool execution error: {exc}"
            raise InternalError(msg) from exc
        if isinstance(result, str):
            return ToolResult(content=(result,))
        return ToolResult(content=tuple(result))

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, name: str) -> bool:
        return name in self._tools

    def list_names(self) -> list[str]:
        """Return names of all registered tools."""
        return list(self._tools.keys())
