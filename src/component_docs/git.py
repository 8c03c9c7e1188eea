from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING

import dulwich.errors
import dulwich.objects
import dulwich.repo

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_REMOTE = "origin"

# git@gitlab.com:group/project.git, gitlab.com:group/project.git
# The host needs two characters so C:\repo and C:/repo stay local paths
_SCP_LIKE_ADDRESS = re.compile(r"^(?:[^@/:\s]+@)?[^@:/\s]{2,}:(?P<path>[^/\\].*)$")
# https://gitlab.com/group/project.git, ssh://git@host:2222/group/project.git
_URL_ADDRESS = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://[^/\s]+/(?P<path>.+)$")


def remote_to_project_path(url: str) -> str:
    """Reduce a remote address to ``group/subgroup/project``.

    Returns an empty string when the address has no recognizable form.
    """
    url = url.strip()
    match = _URL_ADDRESS.match(url) or _SCP_LIKE_ADDRESS.match(url)
    if match is None:
        return ""
    path = match.group("path").strip("/")
    path = path.removesuffix(".git").rstrip("/")
    return path


def _find_git_root(start: Path) -> Path | None:
    """Walk up to find .git directory."""
    start = start.resolve()
    for parent in [start, *start.parents]:
        if (parent / ".git").exists():
            return parent
    return None


def _open_repo(root: Path) -> dulwich.repo.Repo | None:
    """Open the git repo containing root, or None."""
    git_root = _find_git_root(root)
    if git_root is None:
        logger.debug(f"No git repository found above {root}")
        return None

    try:
        return dulwich.repo.Repo(str(git_root))
    except dulwich.errors.NotGitRepository:
        logger.debug(f"Not a git repository: {git_root}")
        return None


def _remote_names(repo: dulwich.repo.Repo) -> list[bytes]:
    """Configured remote names, origin first."""
    config = repo.get_config()
    names = sorted(
        section[1]
        for section in config.sections()
        if len(section) == 2 and section[0] == b"remote"
    )
    origin = DEFAULT_REMOTE.encode()
    if origin in names:
        names.remove(origin)
        names.insert(0, origin)
    return names


def get_remote_url(root: Path) -> str | None:
    """URL of the origin remote (or the first configured remote)."""
    repo = _open_repo(root)
    if repo is None:
        return None

    with repo:
        config = repo.get_config()
        for name in _remote_names(repo):
            try:
                url = config.get((b"remote", name), b"url")
            except KeyError:
                continue
            if url:
                return url.decode()

    logger.debug("No git remote with a URL configured")
    return None


def _dereference_to_commit(repo: dulwich.repo.Repo, sha: bytes) -> bytes | None:
    """Peel annotated tags down to a commit SHA (hex)."""
    obj = repo[sha]
    while isinstance(obj, dulwich.objects.Tag):
        obj = repo[obj.object[1]]

    if isinstance(obj, dulwich.objects.Commit):
        return obj.id
    return None


def _tags_by_commit(repo: dulwich.repo.Repo) -> dict[bytes, list[str]]:
    result = dict[bytes, list[str]]()
    for name, sha in repo.refs.as_dict(b"refs/tags").items():
        try:
            commit_sha = _dereference_to_commit(repo, sha)
        except KeyError:
            logger.debug(f"Tag {name!r} points to a missing object")
            continue
        if commit_sha is not None:
            result.setdefault(commit_sha, []).append(name.decode())
    return result


def get_latest_tag(root: Path) -> str | None:
    """Tag of the most recent tagged commit reachable from HEAD."""
    repo = _open_repo(root)
    if repo is None:
        return None

    with repo:
        try:
            head_sha = repo.head()
        except KeyError:
            logger.debug("No HEAD commit (empty repository?)")
            return None

        tags = _tags_by_commit(repo)
        if not tags:
            logger.debug("Repository has no tags")
            return None

        for entry in repo.get_walker(include=[head_sha]):
            names = tags.get(entry.commit.id)
            if names:
                return max(names)

    logger.debug("No tag reachable from HEAD")
    return None
