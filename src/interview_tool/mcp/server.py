"""MCP server for interview-tool."""

from __future__ import annotations

import logging
from typing import Any

from mcp import types
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.shared.exceptions import McpError
from mcp.types import GetPromptResult, Prompt, Resource, TextContent, Tool

from interview_tool.config.schema import InterviewToolConfig
from interview_tool.core.errors import InterviewToolError
from interview_tool.instants import InstantRegistry
from interview_tool.mcp.prompts import get_prompts, get_resources, render_prompt
from interview_tool.tools.base import ToolCall
from interview_tool.tools.clock import (
    CreateInstantTool,
    CurrentTimeTool,
    ElapsedSinceTool,
)
from interview_tool.tools.command import CommandTool
from interview_tool.tools.fetch import FetchUrlTool
from interview_tool.tools.file_io import CreateFileTool, ReadFileTool
from interview_tool.tools.registry import ToolRegistry

logger = logging.getLogger(__name__)


def build_tool_registry(
    config: InterviewToolConfig, instants: InstantRegistry
) -> ToolRegistry:
    """Register every tool, wiring the shared instant registry."""
    registry = ToolRegistry()
    registry.register(CurrentTimeTool())
    registry.register(CreateInstantTool(instants))
    registry.register(ElapsedSinceTool(instants))
    registry.register(ReadFileTool())
    registry.register(CreateFileTool())
    registry.register(CommandTool(config.tools.command))
    registry.register(FetchUrlTool(config.tools.fetch))
    return registry


class InterviewToolServer:
    """Owns the instant registry and tools, and serves them over MCP.

    Handlers are plain methods so they can be exercised without a
    transport; :meth:`build` attaches them to an ``mcp`` ``Server``.
    """

    def __init__(
        self,
        config: InterviewToolConfig | None = None,
        *,
        instants: InstantRegistry | None = None,
        tools: ToolRegistry | None = None,
    ) -> None:
        self.config = config if config is not None else InterviewToolConfig()
        # Empty registries are falsy, so test against None.
        self.instants = instants if instants is not None else InstantRegistry()
        self.tools = (
            tools
            if tools is not None
            else build_tool_registry(self.config, self.instants)
        )

    async def list_tools(self) -> list[Tool]:
        """List available MCP tools."""
        return [
            Tool(
                name=d.name,
                description=d.description,
                inputSchema=d.parameters_schema,
            )
            for d in self.tools.list_definitions()
        ]

    async def call_tool(self, name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        """Handle tool calls; taxonomy errors become protocol errors."""
        call = ToolCall(name=name, arguments=arguments or {})
        try:
            result = await self.tools.execute(call)
        except InterviewToolError as exc:
            raise McpError(exc.to_error_data()) from exc
        return [TextContent(type="text", text=block) for block in result.content]

    async def list_prompts(self) -> list[Prompt]:
        """List available MCP prompts."""
        return get_prompts()

    async def get_prompt(
        self, name: str, arguments: dict[str, str] | None
    ) -> GetPromptResult:
        """Render a prompt."""
        try:
            return render_prompt(name, arguments)
        except InterviewToolError as exc:
            logger.warning("Prompt %s failed: %s", name, exc)
            raise McpError(exc.to_error_data()) from exc

    async def list_resources(self) -> list[Resource]:
        """List static resources."""
        return get_resources()

    async def _handle_call_tool(
        self, request: types.CallToolRequest
    ) -> types.ServerResult:
        content = await self.call_tool(request.params.name, request.params.arguments)
        return types.ServerResult(types.CallToolResult(content=list(content)))

    async def _handle_get_prompt(
        self, request: types.GetPromptRequest
    ) -> types.ServerResult:
        result = await self.get_prompt(request.params.name, request.params.arguments)
        return types.ServerResult(result)

    def build(self) -> Server:
        """Create an ``mcp`` ``Server`` with this object's handlers."""
        server: Server = Server(
            self.config.server.name,
            instructions=self.config.server.instructions,
        )
        server.list_tools()(self.list_tools)  # type: ignore[no-untyped-call]
        server.list_prompts()(self.list_prompts)  # type: ignore[no-untyped-call]
        server.list_resources()(self.list_resources)  # type: ignore[no-untyped-call]

        # The SDK decorators for tools/call turn every exception into an
        # isError tool result. Installed directly, McpError reaches the
        # request loop and goes out as a JSON-RPC error with its code.
        server.request_handlers[types.CallToolRequest] = self._handle_call_tool
        server.request_handlers[types.GetPromptRequest] = self._handle_get_prompt
        return server


async def run_server(config: InterviewToolConfig | None = None) -> None:
    """Start the MCP server on stdio."""
    server = InterviewToolServer(config).build()
    logger.info("Serving %s over stdio", server.name)
    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )
