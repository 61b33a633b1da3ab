"""Core types, errors, and shared utilities."""

from interview_tool.core.errors import (
    ConfigError,
    InternalError,
    InterviewToolError,
    InvalidInputError,
    NotFoundError,
    UpstreamError,
)

__all__ = [
    "ConfigError",
    "InternalError",
    "InterviewToolError",
    "InvalidInputError",
    "NotFoundError",
    "UpstreamError",
]
