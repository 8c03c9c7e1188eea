import pathlib

import pytest

from component_docs import discovery, exceptions


@pytest.fixture
def templates_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    path = tmp_path / "templates"
    path.mkdir()
    return path


def test_find_spec_files_sorted_and_filtered(templates_dir: pathlib.Path) -> None:
    for name in ["deploy.yml", "build.yaml", "notes.md", "lint.yml", "README.txt"]:
        (templates_dir / name).write_text("spec: {}\n")
    (templates_dir / "nested.yml").mkdir()

    found = discovery.find_spec_files(templates_dir)

    assert [p.name for p in found] == ["build.yaml", "deploy.yml", "lint.yml"]


def test_find_spec_files_empty_directory(templates_dir: pathlib.Path) -> None:
    assert discovery.find_spec_files(templates_dir) == []


def test_find_spec_files_missing_directory(tmp_path: pathlib.Path) -> None:
    with pytest.raises(exceptions.ReadError):
        discovery.find_spec_files(tmp_path / "missing")


def test_read_document_missing_file_raises_read_error(tmp_path: pathlib.Path) -> None:
    path = tmp_path / "file.yml"

    with pytest.raises(exceptions.ReadError) as exc_info:
        discovery.read_document(path)

    assert exc_info.value.source == str(path)
    assert isinstance(exc_info.value.cause, FileNotFoundError)
    assert str(path) in exc_info.value.format_user_message()


def test_sibling_descriptions(templates_dir: pathlib.Path) -> None:
    (templates_dir / "build.md").write_text("Builds the project.\n")
    describe = discovery.SiblingDescriptions(templates_dir)

    assert describe("build") == "Builds the project.\n"
    assert describe("deploy") is None


def test_load_component_uses_sibling_description(templates_dir: pathlib.Path) -> None:
    (templates_dir / "build.yml").write_text("spec:\n  inputs:\n    stage:\n      default: build\n")
    (templates_dir / "build.md").write_text("Builds the project.\n")

    record = discovery.load_component(templates_dir / "build.yml")

    assert record.name == "build"
    assert record.description == "Builds the project."
    assert [p.name for p in record.parameters] == ["stage"]


def test_load_components_keeps_order(templates_dir: pathlib.Path) -> None:
    for name in ["b", "a", "c"]:
        (templates_dir / f"{name}.yml").write_text("spec:\n  inputs: {}\n")
    paths = [templates_dir / "c.yml", templates_dir / "a.yml", templates_dir / "b.yml"]

    records = discovery.load_components(paths)

    assert [r.name for r in records] == ["c", "a", "b"]


def test_load_components_aborts_on_parse_error(templates_dir: pathlib.Path) -> None:
    (templates_dir / "good.yml").write_text("spec: {}\n")
    (templates_dir / "bad.yml").write_text("spec: [unclosed\n")

    with pytest.raises(exceptions.ParseError, match="bad.yml"):
        discovery.load_components(discovery.find_spec_files(templates_dir))
