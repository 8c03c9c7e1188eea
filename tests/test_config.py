import pathlib

import pytest

from component_docs.config import io as config_io
from component_docs.config import models


def _write_config(root: pathlib.Path, text: str) -> None:
    (root / models.CONFIG_FILE_NAME).write_text(text)


def test_load_config_missing_file_returns_empty(tmp_path: pathlib.Path) -> None:
    assert config_io.load_config(tmp_path) == models.ComponentDocsConfig()


def test_load_config_reads_both_fields(tmp_path: pathlib.Path) -> None:
    _write_config(tmp_path, "project: group/project\nversion: 2.0.0\n")

    result = config_io.load_config(tmp_path)

    assert result.project == "group/project"
    assert result.version == "2.0.0"


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        pytest.param("version: 2.5\n", "2.5", id="float"),
        pytest.param("version: 1.10\n", "1.10", id="float-trailing-zero"),
        pytest.param("version: 1.0\n", "1.0", id="float-one"),
        pytest.param("version: 007\n", "007", id="leading-zeros"),
        pytest.param("version: 3\n", "3", id="int"),
        pytest.param("version: null\n", None, id="null"),
        pytest.param("version:\n", None, id="empty"),
    ],
)
def test_load_config_keeps_scalar_text(
    tmp_path: pathlib.Path, text: str, expected: str | None
) -> None:
    _write_config(tmp_path, text)

    assert config_io.get_config_value(tmp_path, models.ConfigKind.VERSION) == expected


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("", id="empty"),
        pytest.param("invalid: yaml: content: [", id="invalid-yaml"),
        pytest.param("- just a list\n", id="list"),
        pytest.param("plain text\n", id="scalar"),
    ],
)
def test_load_config_unusable_file_returns_empty(tmp_path: pathlib.Path, text: str) -> None:
    _write_config(tmp_path, text)

    assert config_io.load_config(tmp_path) == models.ComponentDocsConfig()


def test_load_config_invalid_field_keeps_others(tmp_path: pathlib.Path) -> None:
    _write_config(tmp_path, "project: [not, a, string]\nversion: 1.2.3\n")

    result = config_io.load_config(tmp_path)

    assert result.project is None
    assert result.version == "1.2.3"


def test_load_config_ignores_unknown_keys(tmp_path: pathlib.Path) -> None:
    _write_config(tmp_path, "project: g/p\nother: value\n")

    assert config_io.load_config(tmp_path).project == "g/p"


def test_load_config_not_cached(tmp_path: pathlib.Path) -> None:
    _write_config(tmp_path, "version: 1.0.0\n")
    first = config_io.load_config(tmp_path)

    _write_config(tmp_path, "version: 1.1.0\n")
    second = config_io.load_config(tmp_path)

    assert first.version == "1.0.0"
    assert second.version == "1.1.0"


def test_config_get_by_kind() -> None:
    config = models.ComponentDocsConfig(project="g/p", version="1.0.0")

    assert config.get(models.ConfigKind.PROJECT) == "g/p"
    assert config.get(models.ConfigKind.VERSION) == "1.0.0"


def test_config_model_coerces_programmatic_scalars() -> None:
    config = models.ComponentDocsConfig.model_validate({"project": True, "version": 2})

    assert config.project == "true"
    assert config.version == "2"
