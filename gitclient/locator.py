"""Repository discovery on the local filesystem."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from gitclient.constants import NO_DESCRIPTION
from gitclient.exceptions import AccessDeniedError, PathNotFoundError, RepositoryNotFoundError
from gitclient.logging import get_logger

logger = get_logger("locator")


@dataclass(frozen=True)
class RepositoryInfo:
    """A repository found by scanning a directory."""

    name: str
    path: str
    description: str = NO_DESCRIPTION

    def to_dict(self) -> dict[str, str]:
        return {"name": self.name, "path": self.path, "description": self.description}


def _marker_exists(path: Path) -> bool:
    """Check a repository marker, treating unreadable paths as absent."""
    try:
        return path.exists()
    except OSError:
        return False


def path_contains_repository(path: str | Path) -> bool:
    """Check whether path is a working tree or a bare repository."""
    path = Path(path)
    return _marker_exists(path / ".git" / "HEAD") or _marker_exists(path / "HEAD")


def _hidden_set(hidden: Iterable[str | Path] | None) -> set[Path]:
    return {Path(p).resolve() for p in hidden or ()}


def find_repository(path: str | Path, hidden: Iterable[str | Path] | None = None) -> Path:
    """Find the repository enclosing path.

    Walks from path up through its parents, the filesystem root included,
    and stops at the first directory holding ``.git/HEAD`` or ``HEAD``.

    Args:
        path: Starting directory or file
        hidden: Repository roots the caller may not open

    Returns:
        Repository root

    Raises:
        PathNotFoundError: If path does not exist
        RepositoryNotFoundError: If no enclosing repository exists
        AccessDeniedError: If the repository root is hidden
    """
    # abspath collapses ".." so parents are the real ancestors
    start = Path(os.path.abspath(path))
    if not start.exists():
        raise PathNotFoundError(f"Path '{start}' does not exist", path=str(start))

    for candidate in (start, *start.parents):
        if path_contains_repository(candidate):
            break
    else:
        raise RepositoryNotFoundError(f"There is no GIT repository at {start}", path=str(start))

    if candidate.resolve() in _hidden_set(hidden):
        raise AccessDeniedError(
            "You don't have access to this repository", path=str(candidate)
        )

    logger.debug(f"Found repository {candidate} for {start}")
    return candidate


def read_description(repo_path: str | Path, bare: bool) -> str:
    """Read a repository's description file, or return the placeholder."""
    repo_path = Path(repo_path)
    description = repo_path / "description" if bare else repo_path / ".git" / "description"
    if description.is_file():
        return description.read_text()
    return NO_DESCRIPTION


def list_repositories(
    path: str | Path, hidden: Iterable[str | Path] | None = None
) -> list[RepositoryInfo]:
    """List the repositories directly inside a directory.

    Dot entries are skipped. A child counts as a bare repository when it
    holds ``HEAD`` and as a working tree when it holds ``.git/HEAD``.

    Args:
        path: Directory to scan
        hidden: Repository paths to leave out

    Returns:
        Repositories sorted by name

    Raises:
        PathNotFoundError: If path is not a directory
        RepositoryNotFoundError: If no repositories were found
    """
    root = Path(path)
    if not root.is_dir():
        raise PathNotFoundError(f"Path '{root}' does not exist", path=str(root))

    hidden_paths = _hidden_set(hidden)
    repositories = []

    for entry in root.iterdir():
        if entry.name.startswith("."):
            continue

        is_bare = _marker_exists(entry / "HEAD")
        is_repository = _marker_exists(entry / ".git" / "HEAD")
        if not (is_bare or is_repository):
            continue

        if entry.resolve() in hidden_paths:
            logger.debug(f"Skipping hidden repository {entry}")
            continue

        repositories.append(
            RepositoryInfo(
                name=entry.name,
                path=str(entry),
                description=read_description(entry, bare=is_bare),
            )
        )

    if not repositories:
        raise RepositoryNotFoundError(f"There are no GIT repositories in {root}", path=str(root))

    return sorted(repositories, key=lambda repo: repo.name)
