"""gitclient exception hierarchy."""

from typing import Any


class GitClientError(Exception):
    """Base exception for all gitclient errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class ConfigurationError(GitClientError):
    """Error in gitclient configuration."""

    pass


class IllegalVariableError(GitClientError):
    """Environment variable is not in the store's whitelist."""

    def __init__(self, message: str, variable: str) -> None:
        super().__init__(message)
        self.variable = variable


class PathError(GitClientError):
    """Base error for filesystem path issues."""

    def __init__(
        self, message: str, path: str | None = None, details: dict[str, Any] | None = None
    ) -> None:
        super().__init__(message, details)
        self.path = path


class PathNotFoundError(PathError):
    """Target path does not exist."""

    pass


class RepositoryExistsError(PathError):
    """A repository already exists at the target path."""

    pass


class RepositoryNotFoundError(PathError):
    """No repository markers were found."""

    pass


class AccessDeniedError(PathError):
    """Repository path is on the hidden list."""

    pass


class ProcessError(GitClientError):
    """Base error for subprocess execution."""

    def __init__(
        self,
        message: str,
        command: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details)
        self.command = command


class ProcessSpawnError(ProcessError):
    """The git process could not be started."""

    pass


class CommandFailedError(ProcessError):
    """Git exited with a non-zero status.

    The message is the captured stderr, or stdout when stderr is empty.
    """

    def __init__(
        self,
        message: str,
        command: str,
        exit_code: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message, command)
        self.exit_code = exit_code
        self.stdout = stdout
        self.stderr = stderr
