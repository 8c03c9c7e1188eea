"""Find, read and extract component specification files."""

from __future__ import annotations

import logging
import pathlib
from typing import TYPE_CHECKING

from component_docs import exceptions, extract

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger(__name__)

SPEC_SUFFIXES = (".yml", ".yaml")
DESCRIPTION_SUFFIX = ".md"


def find_spec_files(templates_dir: pathlib.Path) -> list[pathlib.Path]:
    """Return component files directly under templates_dir, sorted by path."""
    if not templates_dir.is_dir():
        raise exceptions.ReadError(str(templates_dir), "not a directory")
    found = [
        path
        for path in templates_dir.iterdir()
        if path.suffix in SPEC_SUFFIXES and path.is_file()
    ]
    logger.debug(f"Found {len(found)} component file(s) in {templates_dir}")
    return sorted(found)


def read_document(path: pathlib.Path) -> bytes:
    """Read a specification file, raising ReadError on any OS failure."""
    try:
        return path.read_bytes()
    except OSError as e:
        raise exceptions.ReadError(str(path), e) from e


class SiblingDescriptions:
    """Look up ``<directory>/<name>.md`` as a component's description."""

    directory: pathlib.Path

    def __init__(self, directory: pathlib.Path) -> None:
        self.directory = directory

    def __call__(self, name: str) -> str | None:
        path = self.directory / f"{name}{DESCRIPTION_SUFFIX}"
        if not path.is_file():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read description {path}: {e}")
            return None


def load_component(
    path: pathlib.Path, describe: extract.DescriptionLookup | None = None
) -> extract.ComponentRecord:
    """Read and extract one file; descriptions default to sibling .md files."""
    if describe is None:
        describe = SiblingDescriptions(path.parent)
    return extract.extract(read_document(path), str(path), describe)


def load_components(
    paths: Iterable[pathlib.Path], describe: extract.DescriptionLookup | None = None
) -> list[extract.ComponentRecord]:
    """Extract every file in order; the first failure aborts the batch."""
    return [load_component(path, describe) for path in paths]
