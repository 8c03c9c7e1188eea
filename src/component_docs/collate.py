from __future__ import annotations

import collections
import dataclasses
import logging
from typing import TYPE_CHECKING, Any, cast

from component_docs import normalize

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)

DEFAULT_INPUT_TYPE = "string"


@dataclasses.dataclass(frozen=True)
class Parameter:
    """One declared input of a component.

    ``required`` and ``default`` are derived from ``value`` and cannot be set
    independently.
    """

    name: str
    description: str = ""
    value: normalize.DefaultValue = normalize.ABSENT
    type: str = DEFAULT_INPUT_TYPE
    options: tuple[str, ...] = ()

    @property
    def required(self) -> bool:
        return normalize.normalize(self.value)[0]

    @property
    def default(self) -> str:
        return normalize.normalize(self.value)[1]

    @classmethod
    def from_spec(cls, name: object, spec: object) -> Parameter:
        """Build a Parameter from one entry of a ``spec.inputs`` block."""
        if spec is None:
            spec = {}
        elif not isinstance(spec, dict):
            logger.warning(f"Input '{name}' is not a mapping, treating it as having no attributes")
            spec = {}
        fields = cast("dict[str, Any]", spec)

        description = fields.get("description")
        input_type = fields.get("type")
        return cls(
            name=str(name),
            description="" if description is None else str(description),
            value=fields.get("default", normalize.ABSENT),
            type=DEFAULT_INPUT_TYPE if input_type is None else str(input_type),
            options=_display_options(fields.get("options")),
        )


def _display_options(options: object) -> tuple[str, ...]:
    if not isinstance(options, list):
        return ()
    return tuple(normalize.normalize(option)[1] for option in cast("list[object]", options))


def sort_key(param: Parameter) -> tuple[bool, str]:
    """Required inputs first, then by name."""
    return (not param.required, param.name)


def collate(raw_parameters: Mapping[object, object]) -> list[Parameter]:
    """Normalize a ``spec.inputs`` mapping into an ordered parameter list.

    Keys such as ``1`` and ``"1"`` share a display name; the key's type name
    breaks the tie so the order never depends on mapping order.
    """
    entries = [
        (Parameter.from_spec(name, spec), type(name).__name__)
        for name, spec in raw_parameters.items()
    ]
    counts = collections.Counter(param.name for param, _ in entries)
    for name, count in sorted(counts.items()):
        if count > 1:
            logger.warning(f"Input name '{name}' is declared {count} times with different key types")

    entries.sort(key=lambda entry: (*sort_key(entry[0]), entry[1]))
    return [param for param, _ in entries]
