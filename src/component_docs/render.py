from __future__ import annotations

import contextlib
import logging
import os
import tempfile
from typing import TYPE_CHECKING

import jinja2

from component_docs import exceptions

if TYPE_CHECKING:
    import pathlib
    from collections.abc import Sequence

    from component_docs.extract import ComponentRecord
    from component_docs.resolve import ResolvedConfig

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATE = """\
# Components

{% for component in components %}
## {{ component.name }}

{% if component.description %}
{{ component.description }}

{% endif %}
```yaml
include:
  - component: $CI_SERVER_FQDN/{{ project }}/{{ component.name }}@{{ version }}
{% if component.parameters | selectattr("required") | list %}
    inputs:
{% for param in component.parameters if param.required %}
      {{ param.name }}: <{{ param.name }}>
{% endfor %}
{% endif %}
```

{% if component.parameters %}
| Input | Description | Required | Default |
| ----- | ----------- | -------- | ------- |
{% for param in component.parameters %}
| `{{ param.name }}` | {{ param.description | replace("\\n", " ") }} | {{ "yes" if param.required else "no" }} | {{ param.default | replace("|", "\\\\|") }} |
{% endfor %}
{% else %}
This component has no inputs.
{% endif %}

{% endfor %}
"""


def _environment() -> jinja2.Environment:
    return jinja2.Environment(
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
        undefined=jinja2.StrictUndefined,
    )


def render(
    template_text: str,
    components: Sequence[ComponentRecord],
    config: ResolvedConfig,
) -> str:
    """Render the documentation template.

    The template sees ``components``, ``project`` and ``version``.
    """
    try:
        template = _environment().from_string(template_text)
        return template.render(
            components=components,
            project=config.project.value,
            version=config.version.value,
        )
    except jinja2.TemplateError as e:
        raise exceptions.TemplateError(f"Error rendering template: {e}") from e


def load_template(path: pathlib.Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise exceptions.TemplateError(f"Error reading template file {path}: {e}") from e


def ensure_template(path: pathlib.Path, content: str = DEFAULT_TEMPLATE) -> bool:
    """Write content to path unless the file exists. Returns True if created."""
    if path.exists():
        return False
    write_output(path, content)
    logger.debug(f"Created default template {path}")
    return True


def write_output(path: pathlib.Path, text: str) -> None:
    """Write text atomically using temp file + rename."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
            os.chmod(tmp_path, 0o644)
            os.replace(tmp_path, path)
        except BaseException:
            with contextlib.suppress(OSError):
                os.unlink(tmp_path)
            raise
    except OSError as e:
        raise exceptions.OutputError(f"Error writing {path}: {e}") from e
