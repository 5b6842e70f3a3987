"""Client -- entry point for opening, creating and cloning repositories."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from gitclient.command import CommandSpec
from gitclient.config import GitClientConfig
from gitclient.constants import (
    DEFAULT_GIT_BINARY,
    SSH_ASKPASS_DISPLAY,
    SSH_ASKPASS_SCRIPT,
)
from gitclient.environment import GitEnvironment, ShellEnvironment
from gitclient.exceptions import RepositoryExistsError
from gitclient.locator import RepositoryInfo, find_repository, list_repositories
from gitclient.logging import get_logger
from gitclient.repository import Repository
from gitclient.runner import ProcessRunner

logger = get_logger("client")


class Client:
    """Facade over the git binary.

    Holds the binary path and two environment stores: one for git's own
    variables and one for the shell/SSH variables used during network
    operations. Both are applied to every command the client runs.
    """

    def __init__(
        self,
        git_path: str = DEFAULT_GIT_BINARY,
        hidden: Iterable[str | Path] | None = None,
        inherit_environment: bool = True,
        timeout: float | None = None,
    ) -> None:
        """Initialize client.

        Args:
            git_path: Path to the git binary
            hidden: Repository paths callers may not open or list
            inherit_environment: Pass the current process environment to git
            timeout: Seconds to wait for each command, None to wait forever
        """
        self.git_path = git_path
        self.hidden = [str(p) for p in hidden or ()]
        self._git_environment = GitEnvironment()
        self._shell_environment = ShellEnvironment()
        self._runner = ProcessRunner(
            self._git_environment,
            self._shell_environment,
            inherit_environment=inherit_environment,
            timeout=timeout,
        )

    @classmethod
    def from_config(cls, config: GitClientConfig | None = None) -> Client:
        """Create a client from configuration.

        Args:
            config: Configuration, loaded from the default location when None

        Returns:
            Configured Client
        """
        config = config or GitClientConfig.load()
        client = cls(
            git_path=config.binary,
            hidden=config.hidden,
            inherit_environment=config.inherit_environment,
            timeout=config.timeout,
        )
        client.git_environment.set_all(config.environment)
        return client

    @property
    def git_environment(self) -> GitEnvironment:
        return self._git_environment

    @property
    def shell_environment(self) -> ShellEnvironment:
        return self._shell_environment

    def create_repository(self, path: str | Path, bare: bool = False) -> Repository:
        """Create a new repository.

        Args:
            path: Where to create the repository
            bare: Create a bare repository

        Returns:
            The new Repository

        Raises:
            RepositoryExistsError: If a working tree repository already exists at path
        """
        path = Path(path)
        if (path / ".git" / "HEAD").exists() and not (path / "HEAD").exists():
            raise RepositoryExistsError(f"A GIT repository already exists at {path}", path=str(path))

        return Repository(path, self).create(bare=bare)

    def get_repository(
        self, path: str | Path, hidden: Iterable[str | Path] | None = None
    ) -> Repository:
        """Open the repository enclosing path.

        Args:
            path: Repository root or any path below it
            hidden: Hidden repository roots, defaults to the client's list

        Raises:
            PathNotFoundError: If path does not exist
            RepositoryNotFoundError: If no enclosing repository exists
            AccessDeniedError: If the repository is hidden
        """
        root = find_repository(path, self.hidden if hidden is None else hidden)
        return Repository(root, self)

    def get_repositories(
        self, path: str | Path, hidden: Iterable[str | Path] | None = None
    ) -> list[RepositoryInfo]:
        """List the repositories directly inside path, sorted by name.

        Raises:
            PathNotFoundError: If path is not a directory
            RepositoryNotFoundError: If none were found
        """
        return list_repositories(path, self.hidden if hidden is None else hidden)

    def clone_repository(
        self,
        url: str,
        directory: str | Path,
        options: Mapping[str, str | None] | None = None,
        args: Sequence[str] | None = None,
    ) -> Repository:
        """Clone a repository.

        Runs ``git clone <options> <url> <directory> <args>`` from the
        target's parent directory.

        Args:
            url: URL of the repository to clone
            directory: Filesystem path to clone into
            options: Extra options for git clone
            args: Extra positional arguments after the directory

        Returns:
            Repository for the clone
        """
        repository = Repository(directory, self)
        spec = self._spec("clone", options, [url, str(repository.path), *(args or ())])
        repository.path.parent.mkdir(parents=True, exist_ok=True)
        self._runner.run(spec, cwd=repository.path.parent)
        logger.info(f"Cloned {url} into {repository.path}")
        return repository

    def run(
        self,
        repository: Repository,
        command: str,
        options: Mapping[str, str | None] | None = None,
        args: Sequence[str] | None = None,
    ) -> str:
        """Run a git command in a repository.

        Args:
            repository: Repository whose path is the working directory
            command: Git subcommand, e.g. "log"
            options: Option name to value, None for bare flags
            args: Positional arguments

        Returns:
            The command's stdout

        Raises:
            ProcessSpawnError: If git could not be started
            CommandFailedError: If git exits non-zero
        """
        return self._runner.run(self._spec(command, options, args), cwd=repository.path)

    def build_command(
        self,
        command: str,
        options: Mapping[str, str | None] | None = None,
        args: Sequence[str] | None = None,
    ) -> str:
        """Return the shell-escaped command line for a git command."""
        return self._spec(command, options, args).to_shell()

    def set_ssh_password(self, password: str | None) -> None:
        """Set the password used with the SSH private key.

        An empty password removes the SSH_ASKPASS setup.
        """
        if not password:
            self.shell_environment.clear_all(["SSH_ASKPASS", "DISPLAY", "SSH_PASS"])
        else:
            self.shell_environment.set_all(
                {
                    "SSH_ASKPASS": str(SSH_ASKPASS_SCRIPT),
                    "DISPLAY": SSH_ASKPASS_DISPLAY,
                    "SSH_PASS": password,
                }
            )

    def _spec(
        self,
        command: str,
        options: Mapping[str, str | None] | None,
        args: Sequence[str] | None,
    ) -> CommandSpec:
        return CommandSpec(self.git_path, command, dict(options or {}), tuple(args or ()))
