"""Static prompts and resources advertised by the MCP server."""

from __future__ import annotations

from mcp.types import (
    GetPromptResult,
    Prompt,
    PromptArgument,
    PromptMessage,
    Resource,
    TextContent,
)

from interview_tool.core.errors import InvalidInputError

TIMER_TEXT = (
    "To time an answer, call create_instant when asking the question to "
    "record the moment it was asked, then call elapsed_since with the "
    "returned instance_id once the user answers to see how long it took."
)

DEFAULT_DIRECTORIES: dict[str, str] = {
    "downloads": "~/Downloads",
    "documents": "~/Documents",
}

RESOURCES: list[tuple[str, str]] = [
    ("str:////Users/to/some/path/", "cwd"),
    ("memo://insights", "memo-name"),
]


def get_prompts() -> list[Prompt]:
    """Define the MCP prompts."""
    return [
        Prompt(
            name="timer",
            description="How to time a user's answer with instants.",
        ),
        Prompt(
            name="default_directory",
            description=(
                "Find a default system directory such as documents or downloads."
            ),
            arguments=[
                PromptArgument(
                    name="name",
                    description="One of: " + ", ".join(DEFAULT_DIRECTORIES),
                    required=True,
                ),
            ],
        ),
    ]


def _assistant(text: str) -> PromptMessage:
    return PromptMessage(role="assistant", content=TextContent(type="text", text=text))


def render_prompt(name: str, arguments: dict[str, str] | None) -> GetPromptResult:
    """Render a prompt by name.

    Raises:
        InvalidInputError: On an unknown prompt or directory name.
    """
    if name == "timer":
        return GetPromptResult(messages=[_assistant(TIMER_TEXT)])
    if name == "default_directory":
        dir_name = (arguments or {}).get("name", "")
        path = DEFAULT_DIRECTORIES.get(dir_name.lower())
        if path is None:
            known = ", ".join(DEFAULT_DIRECTORIES)
            msg = f"Unknown directory name {dir_name!r}, expected one of: {known}"
            raise InvalidInputError(msg)
        return GetPromptResult(messages=[_assistant(path)])
    msg = f"Unknown prompt: {name}"
    raise InvalidInputError(msg)


def get_resources() -> list[Resource]:
    """Static resource metadata; none of them has readable content."""
    return [Resource(uri=uri, name=name) for uri, name in RESOURCES]  # type: ignore[arg-type]
