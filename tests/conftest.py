from __future__ import annotations

import dataclasses
import pathlib

import click.testing
import dulwich.objects
import dulwich.repo
import pytest

from component_docs import git

_IDENTITY = b"Test <test@test.com>"
_BASE_TIME = 1_700_000_000


@dataclasses.dataclass
class GitRepo:
    """A throwaway git repository built directly through dulwich objects."""

    path: pathlib.Path
    _clock: int = _BASE_TIME

    def _tick(self) -> int:
        self._clock += 60
        return self._clock

    def commit(self, message: str = "commit") -> bytes:
        """Commit a one-file tree on top of HEAD and return the commit SHA."""
        with dulwich.repo.Repo(str(self.path)) as repo:
            try:
                parents = [repo.head()]
            except KeyError:
                parents = []

            blob = dulwich.objects.Blob.from_string(message.encode())
            tree = dulwich.objects.Tree()
            tree.add(b"file.txt", 0o100644, blob.id)

            commit = dulwich.objects.Commit()
            commit.tree = tree.id
            commit.parents = parents
            commit.author = commit.committer = _IDENTITY
            commit.author_time = commit.commit_time = self._tick()
            commit.author_timezone = commit.commit_timezone = 0
            commit.encoding = b"UTF-8"
            commit.message = message.encode()

            for obj in (blob, tree, commit):
                repo.object_store.add_object(obj)
            repo.refs[b"HEAD"] = commit.id
            return commit.id

    def tag(self, name: str, sha: bytes | None = None, *, annotated: bool = False) -> None:
        with dulwich.repo.Repo(str(self.path)) as repo:
            target = sha if sha is not None else repo.head()
            ref_target = target
            if annotated:
                tag = dulwich.objects.Tag()
                tag.tagger = _IDENTITY
                tag.message = f"Release {name}".encode()
                tag.name = name.encode()
                tag.object = (dulwich.objects.Commit, target)
                tag.tag_time = self._tick()
                tag.tag_timezone = 0
                repo.object_store.add_object(tag)
                ref_target = tag.id
            repo.refs[b"refs/tags/" + name.encode()] = ref_target

    def add_remote(self, name: str, url: str) -> None:
        with dulwich.repo.Repo(str(self.path)) as repo:
            config = repo.get_config()
            config.set((b"remote", name.encode()), b"url", url.encode())
            config.write_to_path()


@pytest.fixture
def git_repo(tmp_path: pathlib.Path) -> GitRepo:
    """Create an empty git repo in tmp_path/repo."""
    path = tmp_path / "repo"
    path.mkdir()
    dulwich.repo.Repo.init(str(path)).close()
    return GitRepo(path)


def _no_git_root(start: pathlib.Path) -> pathlib.Path | None:
    return None


@pytest.fixture
def no_git(monkeypatch: pytest.MonkeyPatch) -> None:
    """Hide any repository above tmp_path from git detection."""
    monkeypatch.setattr(git, "_find_git_root", _no_git_root)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove the PROJECT/VERSION variables the resolver reads."""
    monkeypatch.delenv("PROJECT", raising=False)
    monkeypatch.delenv("VERSION", raising=False)


@pytest.fixture
def runner() -> click.testing.CliRunner:
    return click.testing.CliRunner()
