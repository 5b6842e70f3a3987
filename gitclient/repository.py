"""Repository handle bound to a git client."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from gitclient.locator import read_description
from gitclient.logging import get_logger

if TYPE_CHECKING:
    from gitclient.client import Client

logger = get_logger("repository")


class Repository:
    """A git repository on disk.

    Commands are executed through the owning Client so they pick up its
    binary path and environment stores.
    """

    def __init__(self, path: str | Path, client: Client) -> None:
        """Initialize repository handle.

        Args:
            path: Repository root (working tree or bare repository)
            client: Client used to run commands
        """
        self.path = Path(path).absolute()
        self.client = client

    def __repr__(self) -> str:
        return f"Repository({str(self.path)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Repository):
            return NotImplemented
        return self.path == other.path

    def __hash__(self) -> int:
        return hash(self.path)

    @property
    def is_bare(self) -> bool:
        """True when the repository metadata sits at the top level."""
        return (self.path / "HEAD").exists() and not (self.path / ".git" / "HEAD").exists()

    @property
    def git_dir(self) -> Path:
        """Directory holding HEAD, config and description."""
        return self.path if self.is_bare else self.path / ".git"

    @property
    def description(self) -> str:
        return read_description(self.path, bare=self.is_bare)

    def set_description(self, text: str) -> None:
        (self.git_dir / "description").write_text(text)

    def create(self, bare: bool = False) -> Repository:
        """Initialize a new repository at this path.

        Args:
            bare: Create a bare repository

        Returns:
            self
        """
        self.path.mkdir(parents=True, exist_ok=True)
        self.run("init", {"--bare": None} if bare else None)
        logger.info(f"Created {'bare ' if bare else ''}repository at {self.path}")
        return self

    def run(
        self,
        command: str,
        options: Mapping[str, str | None] | None = None,
        args: Sequence[str] | None = None,
    ) -> str:
        """Run a git command in this repository and return its stdout."""
        return self.client.run(self, command, options, args)

    def current_branch(self) -> str:
        """Get the current branch name."""
        return self.run("rev-parse", {"--abbrev-ref": None}, ["HEAD"]).strip()

    def current_commit(self) -> str:
        """Get the full SHA of HEAD."""
        return self.run("rev-parse", args=["HEAD"]).strip()

    def has_changes(self) -> bool:
        """Check if there are uncommitted changes."""
        return bool(self.run("status", {"--porcelain": None}).strip())
