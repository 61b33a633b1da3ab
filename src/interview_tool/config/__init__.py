"""Configuration loading and validation."""

from interview_tool.config.loader import load_config
from interview_tool.config.schema import (
    CommandConfig,
    FetchConfig,
    InterviewToolConfig,
    LoggingConfig,
    ServerConfig,
    ToolsConfig,
)

__all__ = [
    "CommandConfig",
    "FetchConfig",
    "InterviewToolConfig",
    "LoggingConfig",
    "ServerConfig",
    "ToolsConfig",
    "load_config",
]
