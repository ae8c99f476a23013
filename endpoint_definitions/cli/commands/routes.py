"""
Native Click implementation of the routes command.

Usage: endpoint-definitions routes <module>... [--environment NAME]
"""

from __future__ import annotations

import click

from ..context import CliContext
from ._options import application_options, build_application


@click.command("routes")
@application_options
@click.pass_obj
def routes(
    ctx: CliContext,
    modules: tuple[str, ...],
    entry_point_groups: tuple[str, ...],
    environment: str | None,
    app_dir: str,
) -> None:
    """Show discovered endpoint definitions and the routes they register."""
    if ctx.settings.config_error:
        click.echo(f"Warning: {ctx.settings.config_error}", err=True)

    app = build_application(ctx, modules, entry_point_groups, environment, app_dir)

    click.echo(f"Environment: {app.environment.environment_name}")

    definitions = app.endpoint_definitions
    if not definitions:
        click.echo("No endpoint definitions found.")
        return

    click.echo(f"\nEndpoint definitions ({len(definitions)}):")
    for cls in definitions.definition_types():
        click.echo(f"  {cls.__module__}.{cls.__qualname__}")

    table = app.routes_table()
    click.echo(f"\nRoutes ({len(table)}):")
    for methods, path in table:
        click.echo(f"  {','.join(methods):<12}{path}")
