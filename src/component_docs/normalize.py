"""Normalize input default values into display strings.

A default loaded from YAML can be any of: absent, string, boolean, number,
list or mapping. ``normalize`` maps each kind to a ``(required, display)``
pair. Absence is represented by the ``ABSENT`` marker, never by an empty
string: ``default: ""`` is a valid explicit default.
"""

from __future__ import annotations

import dataclasses
import enum
import json
from typing import Any


class Absent(enum.Enum):
    """Marker for an input that declares no default."""

    ABSENT = enum.auto()

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent.ABSENT


@dataclasses.dataclass(frozen=True)
class Number:
    """A YAML number together with the text it was written as.

    ``3.10`` and ``3.1`` load to the same float; ``text`` keeps the difference.
    """

    value: int | float
    text: str

    def __str__(self) -> str:
        return self.text


# Default values as they come out of the YAML loader
type DefaultValue = Absent | str | bool | Number | int | float | list[Any] | dict[Any, Any]


def normalize(value: object) -> tuple[bool, str]:
    """Return ``(required, display)`` for a raw default value.

    ``None`` counts as absent: YAML ``default: null`` and a missing key are
    indistinguishable in a component header.
    """
    match value:
        case Absent() | None:
            return True, ""
        case str():
            return False, value
        case bool():
            return False, "true" if value else "false"
        case Number():
            return False, value.text
        case int() | float():
            return False, repr(value)
        case list() | tuple() | dict() | set() | frozenset():
            return False, _inline_code(canonical_json(value))
        case _:
            return False, str(value)


def canonical_json(value: object) -> str:
    """Compact JSON with sorted keys; identical input gives identical output."""
    return json.dumps(
        _to_jsonable(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def _to_jsonable(value: object) -> Any:
    # Keys must all be strings for sort_keys to compare them
    if isinstance(value, Number):
        return value.value
    if isinstance(value, dict):
        return {_key_text(k): _to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_jsonable(v) for v in value]
    if isinstance(value, (set, frozenset)):
        return sorted((_to_jsonable(v) for v in value), key=canonical_json)
    return value


def _key_text(key: object) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, Number):
        return key.text
    if key is None or isinstance(key, (bool, int, float)):
        return json.dumps(key)
    return str(key)


def _inline_code(text: str) -> str:
    """Wrap text in a Markdown code span that survives embedded backticks."""
    if "`" not in text:
        return f"`{text}`"
    return f"`` {text} ``"
