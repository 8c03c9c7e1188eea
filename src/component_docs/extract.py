"""Extract component records from GitLab CI/CD component template files.

A component file starts with a header document holding the ``spec:`` block,
followed by ``---`` and the job definitions::

    spec:
      inputs:
        stage:
          default: test
    ---
    lint:
      stage: $[[ inputs.stage ]]

Only the header document is read. Extraction is a pure function of its
arguments, so records for a batch of files can be built in any order.
"""

from __future__ import annotations

import dataclasses
import logging
import pathlib
from typing import TYPE_CHECKING, Any, cast

import yaml

from component_docs import collate, exceptions, yaml_config

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# name -> description text, or None when the component has none
type DescriptionLookup = Callable[[str], str | None]


@dataclasses.dataclass(frozen=True)
class ComponentRecord:
    """One documented component."""

    name: str
    description: str = ""
    parameters: tuple[collate.Parameter, ...] = ()


def component_name(source: str) -> str:
    """Derive the component name: file name without directory and extension."""
    return pathlib.PurePath(source).stem


def load_header(document: bytes | str, source: str) -> object:
    """Parse the first YAML document, raising ParseError if malformed."""
    try:
        text = document.decode("utf-8") if isinstance(document, bytes) else document
        documents = yaml.load_all(text, Loader=yaml_config.Loader)
        return next(documents, None)
    except UnicodeDecodeError as e:
        raise exceptions.ParseError(source, e) from e
    except yaml.YAMLError as e:
        raise exceptions.ParseError(source, e) from e


def _child_mapping(parent: object, key: str, source: str) -> dict[Any, Any]:
    if not isinstance(parent, dict):
        return {}
    child = cast("dict[str, object]", parent).get(key)
    if child is None:
        return {}
    if not isinstance(child, dict):
        logger.warning(f"{source}: '{key}' is not a mapping, ignoring it")
        return {}
    return cast("dict[Any, Any]", child)


def raw_inputs(header: object, source: str) -> dict[Any, Any]:
    """Return the ``spec.inputs`` mapping of a parsed header, or an empty one."""
    spec = _child_mapping(header, "spec", source)
    return _child_mapping(spec, "inputs", source)


def extract(
    document: bytes | str,
    source: str,
    describe: DescriptionLookup | None = None,
) -> ComponentRecord:
    """Build the ComponentRecord for one specification document."""
    header = load_header(document, source)
    name = component_name(source)
    parameters = collate.collate(raw_inputs(header, source))

    description = describe(name) if describe is not None else None
    logger.debug(f"Extracted component '{name}' with {len(parameters)} input(s) from {source}")
    return ComponentRecord(
        name=name,
        description=(description or "").strip(),
        parameters=tuple(parameters),
    )
