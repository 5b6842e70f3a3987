"""Pytest configuration and fixtures for gitclient tests."""

from collections.abc import Generator
from pathlib import Path

import pytest

from gitclient.client import Client
from gitclient.logging import clear_log_context, setup_logging
from tests.helpers.repos import GIT_IDENTITY, make_fake_repo, run_git


@pytest.fixture(autouse=True)
def _reset_logging() -> Generator[None, None, None]:
    """Restore default logging after each test.

    CLI tests install handlers bound to CliRunner's temporary streams.
    """
    yield
    clear_log_context()
    setup_logging(console_output=True, json_output=False)


@pytest.fixture
def tmp_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository with one commit.

    Returns:
        Path to the temporary repository
    """
    repo = tmp_path / "repo"
    repo.mkdir()

    run_git("init", "-q", "-b", "main", cwd=repo)
    run_git("config", "user.email", "test@test.com", cwd=repo)
    run_git("config", "user.name", "Test", cwd=repo)

    (repo / "README.md").write_text("# Test Repo")
    run_git("add", "-A", cwd=repo)
    run_git("commit", "-q", "-m", "Initial commit", cwd=repo)

    return repo


@pytest.fixture
def git_client() -> Client:
    """Client with a fixed author and committer identity."""
    client = Client()
    client.git_environment.set_all(GIT_IDENTITY)
    return client


@pytest.fixture
def repos_dir(tmp_path: Path) -> Path:
    """Directory holding one bare and one working tree repository plus noise.

    Layout::

        repos/
            website/        working tree, with description
            api.git/        bare, no description
            .hidden-repo/   dot entry, ignored
            notes/          plain directory
            README          plain file
    """
    root = tmp_path / "repos"
    root.mkdir()
    make_fake_repo(root / "website", description="Company website\n")
    make_fake_repo(root / "api.git", bare=True)
    make_fake_repo(root / ".hidden-repo")
    (root / "notes").mkdir()
    (root / "README").write_text("not a repository")
    return root
