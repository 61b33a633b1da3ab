"""File tools — read and create files by absolute path.

No directory allow-listing is applied; paths are used as given.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from interview_tool.core.errors import InternalError, NotFoundError
from interview_tool.tools.base import require_str


class ReadFileTool:
    """Read a UTF-8 text file.

    Implements the :class:`Tool` protocol.
    """

    @property
    def name(self) -> str:
        return "read_file"

    @property
    def description(self) -> str:
        return "Read the contents of a file by its absolute path."

    @property
    def parameters_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "file_path": {
                    "type": "string",
                    "description": "Absolute path of the file to read.",
                },
            },
            "required": ["file_path"],
        }

    async def execute(self, **kwargs: Any) -> str:
        """Read a file's contents.

        Raises:
            InvalidInputError: If 'file_path' is missing or empty.
            NotFoundError: If the file is missing or unreadable.
            InternalError: If the bytes are not valid UTF-8.
        """
        file_path = require_str(kwargs, "file_path")

        try:
            data = await asyncio.to_thread(Path(file_path).read_bytes)
        except OSError as exc:
            msg = (
                f"File {file_path} is not found, "
                f"ask for the right file path, error: {exc}"
            )
            raise NotFoundError(msg) from exc

        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            msg = f"File {file_path} contains invalid UTF-8 and cannot be read as text"
            raise InternalError(msg) from exc


class CreateFileTool:
    """Create (or replace) a file and write text into it.

    Implements the :class:`Tool` protocol.
    """

    @property
    def name(self) -> str:
        return "create_file"

    @property
    def description(self) -> str:
        return "Create a file at an absolute path and write the given content."

    @property
    def parameters_schema(self) -> dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "file_path": {
                    "type": "string",
                    "description": "Absolute path of the file to create.",
                },
                "context": {
                    "type": "string",
                    "description": "Text to write into the file.",
                },
            },
            "required": ["file_path", "context"],
        }

    async def execute(self, **kwargs: Any) -> list[str]:
        file_path = require_str(kwargs, "file_path")
        context = require_str(kwargs, "context", allow_empty=True)

        try:
            await asyncio.to_thread(self._write, Path(file_path), context)
        except OSError as exc:
            msg = f"Failed to create file in {file_path}, error: {exc}"
            raise InternalError(msg) from exc
        return []

    @staticmethod
    def _write(path: Path, text: str) -> None:
        # newline="" keeps the text byte-for-byte on every platform
        with path.open("w", encoding="utf-8", newline="") as f:
            f.write(text)
