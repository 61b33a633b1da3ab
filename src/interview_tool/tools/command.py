"""Command tool — runs a shell command line in a subprocess.

There is no timeout and no allow-list: the command runs until it exits.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

from interview_tool.core.errors import InvalidInputError, UpstreamError
from interview_tool.tools.base import require_str

if TYPE_CHECKING:
    from interview_tool.config.schema import CommandConfig


class CommandTool:
    """Shell command tool using asyncio subprocesses.

    Implements the :class:`Tool` protocol.
    """

    def __init__(self, config: CommandConfig | None = None) -> None:
        from interview_tool.config.schema import CommandConfig as CmdConfig

        self._config = config or CmdConfig()

    @property
    def name(self) -> str:
        return "use_cmd"

    @property
    def description(self) -> str:
        return "Run a shell command on the server and return its standard output."

    @property
    def parameters_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "cmd": {
                    "type": "string",
                    "description": "Shell command line to execute.",
                },
            },
            "required": ["cmd"],
        }

    async def execute(self, **kwargs: Any) -> str:
        """Run the command through the configured shell.

        Returns:
            Captured stdout when the command exits with status 0.

        Raises:
            InvalidInputError: If 'cmd' is missing or cannot be launched.
            UpstreamError: If the command exits non-zero; carries stderr.
        """
        cmd = require_str(kwargs, "cmd")

        try:
            proc = await asyncio.create_subprocess_exec(
                self._config.shell,
                "-c",
                cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            msg = f"Invalid command {cmd}, error: {exc}"
            raise InvalidInputError(msg) from exc

        stdout, stderr = await proc.communicate()

        if proc.returncode != 0:
            msg = f"Error executing command: {stderr.decode(errors='replace')}"
            raise UpstreamError(msg)
        return stdout.decode(errors="replace")
