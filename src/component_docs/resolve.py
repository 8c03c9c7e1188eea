"""Resolve the project path and version shown in the generated documentation.

Each value is taken from the first source that yields a non-empty string:

1. an explicit override (command-line option),
2. an environment variable (``PROJECT`` / ``VERSION``),
3. the ``.component-docs.yaml`` file at the repository root,
4. the git working copy (origin remote URL / most recent tag),
5. a placeholder.

Failures in sources 3 and 4 count as "no value". Nothing is cached: every
call reads the environment, config file and repository again.
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING, NamedTuple

from component_docs import git
from component_docs.config import io as config_io
from component_docs.config.models import ConfigKind, ConfigSource

if TYPE_CHECKING:
    import pathlib
    from collections.abc import Callable, Mapping

logger = logging.getLogger(__name__)

ENV_VARS: dict[ConfigKind, str] = {
    ConfigKind.PROJECT: "PROJECT",
    ConfigKind.VERSION: "VERSION",
}

PLACEHOLDERS: dict[ConfigKind, str] = {
    ConfigKind.PROJECT: "<group>/<project>",
    ConfigKind.VERSION: "<version>",
}


class Resolved(NamedTuple):
    """A resolved value and the source it came from."""

    value: str
    source: ConfigSource


class ResolvedConfig(NamedTuple):
    project: Resolved
    version: Resolved


def _detect_project(root: pathlib.Path) -> str | None:
    url = git.get_remote_url(root)
    if url is None:
        return None
    path = git.remote_to_project_path(url)
    if not path:
        logger.debug(f"Could not derive a project path from remote '{url}'")
    return path


def _detect_version(root: pathlib.Path) -> str | None:
    return git.get_latest_tag(root)


_DETECTORS: dict[ConfigKind, Callable[[pathlib.Path], str | None]] = {
    ConfigKind.PROJECT: _detect_project,
    ConfigKind.VERSION: _detect_version,
}


def _detect(kind: ConfigKind, root: pathlib.Path) -> str | None:
    try:
        return _DETECTORS[kind](root)
    except (OSError, ValueError, KeyError) as e:
        logger.debug(f"Git detection of {kind} failed: {e}")
        return None


def _non_empty(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def resolve_with_source(
    explicit: str | None,
    kind: ConfigKind,
    *,
    root: pathlib.Path,
    environ: Mapping[str, str] | None = None,
) -> Resolved:
    """Walk the precedence chain for one kind and report where the value came from."""
    if environ is None:
        environ = os.environ

    if value := _non_empty(explicit):
        return Resolved(value, ConfigSource.EXPLICIT)

    if value := _non_empty(environ.get(ENV_VARS[kind])):
        return Resolved(value, ConfigSource.ENVIRONMENT)

    if value := _non_empty(config_io.get_config_value(root, kind)):
        return Resolved(value, ConfigSource.CONFIG)

    if value := _non_empty(_detect(kind, root)):
        return Resolved(value, ConfigSource.GIT)

    logger.debug(f"No {kind} found, using placeholder")
    return Resolved(PLACEHOLDERS[kind], ConfigSource.PLACEHOLDER)


def resolve(
    explicit: str | None,
    kind: ConfigKind,
    *,
    root: pathlib.Path,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Resolve one value; always returns a non-empty string."""
    return resolve_with_source(explicit, kind, root=root, environ=environ).value


def resolve_config(
    project: str | None,
    version: str | None,
    *,
    root: pathlib.Path,
    environ: Mapping[str, str] | None = None,
) -> ResolvedConfig:
    """Resolve both the project path and the version."""
    return ResolvedConfig(
        project=resolve_with_source(project, ConfigKind.PROJECT, root=root, environ=environ),
        version=resolve_with_source(version, ConfigKind.VERSION, root=root, environ=environ),
    )
