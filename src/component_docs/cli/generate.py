from __future__ import annotations

import logging
import pathlib

import click

from component_docs import discovery, render, resolve
from component_docs.cli import decorators as cli_decorators

logger = logging.getLogger(__name__)


@cli_decorators.command()
@click.option(
    "--templates-dir",
    type=click.Path(file_okay=False, path_type=pathlib.Path),
    default="templates",
    show_default=True,
    help="Directory holding the component templates (*.yml, *.yaml)",
)
@click.option(
    "--template",
    "template_path",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    default="README.md.j2",
    show_default=True,
    help="Jinja2 template for the README; created with the default content if missing",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, path_type=pathlib.Path),
    default="README.md",
    show_default=True,
    help="Where to write the generated documentation",
)
@cli_decorators.override_options
@cli_decorators.root_option
def generate(
    templates_dir: pathlib.Path,
    template_path: pathlib.Path,
    output: pathlib.Path,
    project: str | None,
    version: str | None,
    root: pathlib.Path,
) -> None:
    """Generate the README from component templates."""
    if not templates_dir.is_dir():
        click.echo(f"No template files found in {templates_dir}/")
        return
    spec_files = discovery.find_spec_files(templates_dir)
    if not spec_files:
        click.echo(f"No template files found in {templates_dir}/")
        return

    components = discovery.load_components(spec_files)
    config = resolve.resolve_config(project, version, root=root)
    logger.debug(f"Project: {config.project.value} ({config.project.source})")
    logger.debug(f"Version: {config.version.value} ({config.version.source})")

    if render.ensure_template(template_path):
        click.echo(f"Created default {template_path}")

    text = render.render(render.load_template(template_path), components, config)
    render.write_output(output, text)

    logger.info(f"Documented {len(components)} component(s) in {output}")
    click.echo("Documentation generated successfully!")
