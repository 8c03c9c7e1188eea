from __future__ import annotations

import functools
import pathlib
from typing import TYPE_CHECKING, Any

import click

from component_docs import exceptions

if TYPE_CHECKING:
    from collections.abc import Callable


def _handle_error(e: exceptions.ComponentDocsError) -> click.ClickException:
    """Convert ComponentDocsError to user-friendly ClickException."""
    message = e.format_user_message()
    if suggestion := e.get_suggestion():
        message = f"{message}\n\nTip: {suggestion}"
    return click.ClickException(message)


def with_error_handling[**P, R](func: Callable[P, R]) -> Callable[P, R]:
    """Wrap function so ComponentDocsError exits with a readable message."""

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except exceptions.ComponentDocsError as e:
            raise _handle_error(e) from e

    return wrapper


def command(
    name: str | None = None, **attrs: Any
) -> Callable[[Callable[..., Any]], click.Command]:
    """Create a Click command with component-docs error handling."""

    def decorator(func: Callable[..., Any]) -> click.Command:
        return click.command(name=name, **attrs)(with_error_handling(func))

    return decorator


def root_option[F: Callable[..., Any]](func: F) -> F:
    return click.option(
        "--root",
        type=click.Path(exists=True, file_okay=False, path_type=pathlib.Path),
        default=".",
        show_default=True,
        help="Repository root holding .component-docs.yaml",
    )(func)


def override_options[F: Callable[..., Any]](func: F) -> F:
    """Add --project and --version overrides."""
    func = click.option(
        "--version",
        "version",
        default=None,
        help="Component version (overrides VERSION, config and latest git tag)",
    )(func)
    return click.option(
        "--project",
        default=None,
        help="Project path such as group/project (overrides PROJECT, config and git remote)",
    )(func)
