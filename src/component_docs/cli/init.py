from __future__ import annotations

import pathlib

import click

from component_docs import exceptions, render
from component_docs.cli import decorators as cli_decorators


@cli_decorators.command()
@click.option(
    "--template",
    "template_path",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    default="README.md.j2",
    show_default=True,
    help="Where to write the template",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing template")
def init(template_path: pathlib.Path, force: bool) -> None:
    """Write the default documentation template."""
    if template_path.exists() and not force:
        raise exceptions.TemplateExistsError(f"Template already exists: {template_path}")

    render.write_output(template_path, render.DEFAULT_TEMPLATE)
    click.echo(f"Wrote default template to {template_path}")
