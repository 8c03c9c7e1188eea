import logging
import pathlib
from typing import Any

import pydantic
import ruamel.yaml

from component_docs.config import models

logger = logging.getLogger(__name__)


def get_config_path(root: pathlib.Path) -> pathlib.Path:
    """Get the per-repository config path (<root>/.component-docs.yaml)."""
    return root / models.CONFIG_FILE_NAME


def _load_yaml(path: pathlib.Path) -> Any:
    """Load YAML, returning None when the file is missing or unreadable.

    Scalars stay strings as written, so ``version: 1.10`` is not read as 1.1.
    """
    if not path.exists():
        return None

    try:
        yaml = ruamel.yaml.YAML(typ="base", pure=True)
        with path.open(encoding="utf-8") as f:
            return yaml.load(f)
    except ruamel.yaml.YAMLError as e:
        logger.warning(f"Ignoring invalid YAML in {path}: {e}")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning(f"Ignoring unreadable config {path}: {e}")
    return None


def load_config(root: pathlib.Path) -> models.ComponentDocsConfig:
    """Load the persisted config; any problem yields an empty config.

    Not cached: values are read fresh on every call.
    """
    path = get_config_path(root)
    data = _load_yaml(path)
    if data is None:
        return models.ComponentDocsConfig()
    if not isinstance(data, dict):
        logger.warning(f"Ignoring {path}: expected a mapping, got {type(data).__name__}")
        return models.ComponentDocsConfig()
    data = {str(k): v for k, v in data.items()}

    try:
        return models.ComponentDocsConfig.model_validate(data)
    except pydantic.ValidationError as e:
        # Drop only the offending fields; the others still count
        invalid = {err["loc"][0] for err in e.errors() if err["loc"]}
        logger.warning(f"Ignoring invalid field(s) {sorted(map(str, invalid))} in {path}")
        valid = {k: v for k, v in data.items() if k not in invalid}
        return models.ComponentDocsConfig.model_validate(valid)


def get_config_value(root: pathlib.Path, kind: models.ConfigKind) -> str | None:
    """Get one field of the persisted config."""
    return load_config(root).get(kind)
