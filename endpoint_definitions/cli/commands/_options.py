"""
Options and helpers shared by commands that build an application.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from ...core.exceptions import EndpointDefinitionException
from ...core.registry import EntryPointGroup, ScanMarker
from ...hosting.application import WebApplication, create_application
from ..context import CliContext


def application_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add the scan marker and environment options to a command."""
    func = click.option(
        "--app-dir",
        default=".",
        show_default=True,
        help="Directory added to the import path before scanning.",
    )(func)
    func = click.option(
        "--entry-point-group",
        "entry_point_groups",
        multiple=True,
        help="Also scan installed entry points of this group.",
    )(func)
    func = click.option(
        "--environment",
        "-e",
        default=None,
        help="Environment name (overrides configuration).",
    )(func)
    func = click.argument("modules", nargs=-1)(func)
    return func


def build_application(
    ctx: CliContext,
    modules: tuple[str, ...],
    entry_point_groups: tuple[str, ...],
    environment: str | None,
    app_dir: str,
) -> WebApplication:
    """Build the application, turning startup failures into click errors."""
    markers: list[ScanMarker] = [*modules, *(EntryPointGroup(g) for g in entry_point_groups)]
    if not markers:
        raise click.UsageError("Provide at least one module or --entry-point-group.")

    ctx.add_import_path(app_dir)
    try:
        return create_application(
            *markers,
            settings=ctx.settings,
            environment_name=environment,
        )
    except EndpointDefinitionException as e:
        error = click.ClickException(_describe_failure(e))
        error.exit_code = e.exit_code
        raise error from e


def _describe_failure(error: EndpointDefinitionException) -> str:
    message = str(error)
    cause = error.__cause__
    if cause is not None:
        message += f"\n  caused by {type(cause).__name__}: {cause}"
    return message
