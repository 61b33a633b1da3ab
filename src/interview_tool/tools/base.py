"""Tool protocol and data types.

Defines the ``Tool`` protocol that all tool implementations must
satisfy, plus data classes for tool calls, results, and definitions.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from interview_tool.core.errors import InvalidInputError


@dataclass(frozen=True, slots=True)
class ToolDefinition:
    """Schema definition for a tool, as advertised by ``list_tools``."""

    name: str
    description: str
    parameters_schema: dict[str, Any]


@dataclass(frozen=True, slots=True)
class ToolCall:
    """A tool invocation requested by the client."""

    name: str
    arguments: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ToolResult:
    """Text blocks produced by a successful tool call."""

    content: tuple[str, ...] = ()


@runtime_checkable
class Tool(Protocol):
    """Protocol that all tool implementations must satisfy."""

    @property
    def name(self) -> str:
        """Unique name for this tool."""
        ...

    @property
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        ...

    @property
    def parameters_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool's parameters."""
        ...

    async def execute(self, **kwargs: Any) -> str | Sequence[str]:
        """Execute the tool with the given arguments.

        Returns:
            One text block, or a sequence of blocks (possibly empty).

        Raises:
            InterviewToolError: On execution failure.
        """
        ...


def require_str(kwargs: dict[str, Any], key: str, *, allow_empty: bool = False) -> str:
    """Fetch a string parameter or raise :class:`InvalidInputError`."""
    value = kwargs.get(key)
    if not isinstance(value, str) or (not value and not allow_empty):
        qualifier = "a string" if allow_empty else "a non-empty string"
        msg = f"Parameter '{key}' is required and must be {qualifier}."
        raise InvalidInputError(msg)
    return value
