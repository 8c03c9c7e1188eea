import enum
from typing import Any

import pydantic

CONFIG_FILE_NAME = ".component-docs.yaml"

_NULL_SCALARS = frozenset({"", "~", "null", "Null", "NULL"})


class ConfigKind(enum.StrEnum):
    """Which value is being resolved."""

    PROJECT = "project"
    VERSION = "version"


class ConfigSource(enum.StrEnum):
    """Where a resolved value originated from."""

    EXPLICIT = "explicit"
    ENVIRONMENT = "environment"
    CONFIG = "config"
    GIT = "git"
    PLACEHOLDER = "placeholder"


class ComponentDocsConfig(pydantic.BaseModel):
    """Per-repository settings read from .component-docs.yaml."""

    model_config = pydantic.ConfigDict(extra="ignore", frozen=True)  # pyright: ignore[reportUnannotatedClassAttribute]

    project: str | None = None
    version: str | None = None

    @pydantic.field_validator("project", "version", mode="before")
    @classmethod
    def coerce_scalar(cls, v: Any) -> Any:
        """Accept unquoted YAML scalars such as ``version: 2.0``."""
        if isinstance(v, str) and v in _NULL_SCALARS:
            return None
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return v

    def get(self, kind: ConfigKind) -> str | None:
        match kind:
            case ConfigKind.PROJECT:
                return self.project
            case ConfigKind.VERSION:
                return self.version
