"""gitclient - a thin Python facade over the git command-line binary."""

__version__ = "0.1.0"

from gitclient.client import Client
from gitclient.command import CommandSpec, build_command
from gitclient.config import GitClientConfig
from gitclient.environment import Environment, GitEnvironment, ShellEnvironment
from gitclient.exceptions import (
    AccessDeniedError,
    CommandFailedError,
    ConfigurationError,
    GitClientError,
    IllegalVariableError,
    PathNotFoundError,
    ProcessSpawnError,
    RepositoryExistsError,
    RepositoryNotFoundError,
)
from gitclient.locator import RepositoryInfo
from gitclient.repository import Repository
from gitclient.runner import CommandResult, ProcessRunner

__all__ = [
    "__version__",
    "Client",
    "Repository",
    "RepositoryInfo",
    "GitClientConfig",
    # Environment
    "Environment",
    "GitEnvironment",
    "ShellEnvironment",
    # Commands
    "CommandSpec",
    "CommandResult",
    "ProcessRunner",
    "build_command",
    # Errors
    "GitClientError",
    "ConfigurationError",
    "IllegalVariableError",
    "PathNotFoundError",
    "RepositoryExistsError",
    "RepositoryNotFoundError",
    "AccessDeniedError",
    "ProcessSpawnError",
    "CommandFailedError",
]
