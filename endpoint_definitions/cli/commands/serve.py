"""
Native Click implementation of the serve command.

Usage: endpoint-definitions serve <module>... [--host HOST] [--port PORT]
"""

from __future__ import annotations

import click
import uvicorn

from ..context import CliContext
from ._options import application_options, build_application


@click.command("serve")
@application_options
@click.option("--host", default=None, help="Bind address (default from configuration).")
@click.option("--port", type=int, default=None, help="Bind port (default from configuration).")
@click.pass_obj
def serve(
    ctx: CliContext,
    modules: tuple[str, ...],
    entry_point_groups: tuple[str, ...],
    environment: str | None,
    app_dir: str,
    host: str | None,
    port: int | None,
) -> None:
    """Build the application and serve it with uvicorn."""
    app = build_application(ctx, modules, entry_point_groups, environment, app_dir)

    server = ctx.settings.server
    uvicorn.run(
        app,
        host=host if host is not None else server.host,
        port=port if port is not None else server.port,
        log_level=ctx.settings.logging.level,
    )
