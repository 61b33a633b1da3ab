"""Pydantic models for interview-tool configuration."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

from interview_tool import APP_NAME


class ServerConfig(BaseModel):
    """Identity advertised to MCP clients."""

    name: str = APP_NAME
    instructions: str = (
        "Support tool for recording moments, "
        "ideal for time-limited interviews and tests"
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            msg = f"Unknown logging level: {value}"
            raise ValueError(msg)
        return level


class CommandConfig(BaseModel):
    """Shell command tool configuration."""

    shell: str = "/bin/sh"


class FetchConfig(BaseModel):
    """URL fetch tool configuration."""

    timeout: float | None = None
    follow_redirects: bool = True


class ToolsConfig(BaseModel):
    """Tool configuration."""

    command: CommandConfig = Field(default_factory=CommandConfig)
    fetch: FetchConfig = Field(default_factory=FetchConfig)


class InterviewToolConfig(BaseModel):
    """Top-level configuration for interview-tool."""

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tools: ToolsConfig = Field(default_factory=ToolsConfig)
