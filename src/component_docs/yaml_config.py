"""Shared YAML loader for component specification files.

Uses CSafeLoader when libyaml is available for performance, with automatic
fallback to the pure Python SafeLoader. GitLab extends YAML with custom tags
(``!reference [.setup, script]``); those are loaded as their plain node value
so that a component file using them still parses. Numbers load as
``normalize.Number`` so their written form survives.
"""

from typing import Any

import yaml

from component_docs import normalize

# Use union types to avoid type: ignore on fallback assignment
_BaseLoader: type[yaml.SafeLoader] | type[yaml.CSafeLoader]

try:
    _BaseLoader = yaml.CSafeLoader
except AttributeError:
    # CSafeLoader unavailable (no libyaml); SafeLoader is API-compatible
    _BaseLoader = yaml.SafeLoader


class Loader(_BaseLoader):  # pyright: ignore[reportGeneralTypeIssues, reportUntypedBaseClass]
    """Safe loader that accepts GitLab's custom tags."""


def _construct_custom_tag(loader: yaml.BaseLoader, _suffix: str, node: yaml.Node) -> Any:
    if isinstance(node, yaml.MappingNode):
        return loader.construct_mapping(node, deep=True)
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    return loader.construct_scalar(node)  # pyright: ignore[reportArgumentType]


def _construct_number(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> normalize.Number:
    # The written form is kept: 3.10 stays 3.10, 0755 stays 0755
    if node.tag == "tag:yaml.org,2002:int":
        value = loader.construct_yaml_int(node)
    else:
        value = loader.construct_yaml_float(node)
    return normalize.Number(value, node.value)


Loader.add_multi_constructor("!", _construct_custom_tag)
Loader.add_constructor("tag:yaml.org,2002:int", _construct_number)
Loader.add_constructor("tag:yaml.org,2002:float", _construct_number)
