"""Main CLI application.

Click commands for interview-tool: mcp, tools, time.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import TYPE_CHECKING

import click

from interview_tool import APP_NAME, __version__
from interview_tool.config.loader import load_config
from interview_tool.core.errors import ConfigError

if TYPE_CHECKING:
    from interview_tool.config.schema import InterviewToolConfig, LoggingConfig

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# ── Helpers ──────────────────────────────────────────────────────


def _error(msg: str) -> None:
    """Print an error message to stderr and exit."""
    click.echo(f"Error: {msg}", err=True)
    sys.exit(1)


def _load_config(config_path: str | None) -> InterviewToolConfig:
    """Load config with user-friendly error handling."""
    try:
        return load_config(path=config_path)
    except ConfigError as e:
        _error(str(e))
        raise  # unreachable, keeps mypy happy


def _setup_logging(config: LoggingConfig) -> None:
    """Configure root logging.

    Never writes to stdout: the stdio transport owns it.
    """
    handler: logging.Handler
    if config.file:
        handler = logging.FileHandler(config.file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logging.basicConfig(level=config.level.upper(), handlers=[handler], force=True)


# ── CLI group ────────────────────────────────────────────────────


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name=APP_NAME)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True),
    default=None,
    help="Path to config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None) -> None:
    """interview-tool - MCP tools for timed interviews and tests.

    Record moments, measure elapsed time, and reach the local machine.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# ── mcp ─────────────────────────────────────────────────────────


@cli.command()
@click.pass_context
def mcp(ctx: click.Context) -> None:
    """Start the MCP server on stdio for AI agent integration."""
    from interview_tool.mcp.server import run_server

    config = _load_config(ctx.obj["config_path"])
    _setup_logging(config.logging)
    asyncio.run(run_server(config))


# ── tools ───────────────────────────────────────────────────────


@cli.command()
@click.pass_context
def tools(ctx: click.Context) -> None:
    """List the tools the MCP server exposes."""
    from interview_tool.instants import InstantRegistry
    from interview_tool.mcp.server import build_tool_registry

    config = _load_config(ctx.obj["config_path"])
    registry = build_tool_registry(config, InstantRegistry())
    for definition in registry.list_definitions():
        click.echo(f"{definition.name:<16} {definition.description}")


# ── time ────────────────────────────────────────────────────────


@cli.command()
def time() -> None:
    """Print the current local time."""
    from interview_tool.tools.clock import CurrentTimeTool

    click.echo(asyncio.run(CurrentTimeTool().execute()))
