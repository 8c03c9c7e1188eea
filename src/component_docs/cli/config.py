from __future__ import annotations

import pathlib

import click

from component_docs import resolve
from component_docs.cli import decorators as cli_decorators


@cli_decorators.command("config")
@cli_decorators.override_options
@cli_decorators.root_option
def config_cmd(project: str | None, version: str | None, root: pathlib.Path) -> None:
    """Show the resolved project path and version, with their sources."""
    resolved = resolve.resolve_config(project, version, root=root)
    click.echo(f"project: {resolved.project.value} ({resolved.project.source})")
    click.echo(f"version: {resolved.version.value} ({resolved.version.source})")
