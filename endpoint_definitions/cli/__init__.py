"""
Click-based CLI for endpoint definitions.

Usage:
    from endpoint_definitions.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import click

from .context import CliContext

try:
    from importlib.metadata import version

    __version__ = version("endpoint-definitions")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="endpoint-definitions")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """endpoint-definitions - modular endpoint registration for Starlette

    \b
    Commands:
        endpoint-definitions routes <module>...   Show discovered definitions and routes
        endpoint-definitions serve <module>...    Run the application with uvicorn
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)
    else:
        ctx.obj = CliContext.create()


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "CliContext",
    "__version__",
    "cli",
    "register_commands",
]
