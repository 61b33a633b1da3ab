"""Exception hierarchy for interview-tool.

Every module imports from here. The hierarchy is:

    InterviewToolError(code)
    ├── NotFoundError          RESOURCE_NOT_FOUND
    ├── InvalidInputError      INVALID_PARAMS
    ├── InternalError          INTERNAL_ERROR
    ├── UpstreamError          INTERNAL_ERROR (overridable)
    └── ConfigError

Each error carries the JSON-RPC code it is reported with at the MCP
boundary, see :meth:`InterviewToolError.to_error_data`.
"""

from __future__ import annotations

from mcp.types import INTERNAL_ERROR, INVALID_PARAMS, INVALID_REQUEST, ErrorData

# Not exported by every mcp release.
RESOURCE_NOT_FOUND = -32002

__all__ = [
    "INTERNAL_ERROR",
    "INVALID_PARAMS",
    "INVALID_REQUEST",
    "RESOURCE_NOT_FOUND",
    "ConfigError",
    "InternalError",
    "InterviewToolError",
    "InvalidInputError",
    "NotFoundError",
    "UpstreamError",
]


class InterviewToolError(Exception):
    """Base exception for all interview-tool errors."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, *, code: int | None = None) -> None:
        self.message = message
        if code is not None:
            self.code = code
        super().__init__(message)

    def to_error_data(self) -> ErrorData:
        """Protocol representation: code plus the human-readable message."""
        return ErrorData(code=self.code, message=self.message)


# ─── Tool Errors ──────────────────────────────────────────────


class NotFoundError(InterviewToolError):
    """Referenced instant identifier or file path does not exist."""

    code = RESOURCE_NOT_FOUND


class InvalidInputError(InterviewToolError):
    """Caller-supplied value cannot be used as given."""

    code = INVALID_PARAMS


class InternalError(InterviewToolError):
    """Unexpected failure on shared state, text decoding, or file writes."""

    code = INTERNAL_ERROR


class UpstreamError(InterviewToolError):
    """A subprocess or network call failed or returned unusable output."""

    code = INTERNAL_ERROR


# ─── Configuration Errors ─────────────────────────────────────


class ConfigError(InterviewToolError):
    """Invalid configuration."""
