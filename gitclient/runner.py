"""Subprocess execution of git commands."""

from __future__ import annotations

import os
import subprocess
import time
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from gitclient.command import CommandSpec
from gitclient.environment import GitEnvironment, ShellEnvironment
from gitclient.exceptions import CommandFailedError, ProcessSpawnError
from gitclient.logging import get_logger

logger = get_logger("runner")


def _decode(data: bytes | None) -> str:
    """Decode process output, replacing bytes that are not valid UTF-8."""
    return data.decode("utf-8", errors="replace") if data else ""


@dataclass
class CommandResult:
    """Result of a finished git process."""

    command: list[str]
    exit_code: int
    stdout: str
    stderr: str
    duration_ms: int
    timestamp: datetime = field(default_factory=datetime.now)

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def output(self) -> str:
        """Diagnostic text: stderr when present, otherwise stdout."""
        return self.stderr or self.stdout

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "command": self.command,
            "exit_code": self.exit_code,
            "stdout": self.stdout[:2000] if len(self.stdout) > 2000 else self.stdout,
            "stderr": self.stderr[:2000] if len(self.stderr) > 2000 else self.stderr,
            "duration_ms": self.duration_ms,
            "success": self.success,
            "timestamp": self.timestamp.isoformat(),
        }


class ProcessRunner:
    """Runs git commands as child processes.

    The child gets stdin, stdout and stderr pipes, runs in the repository's
    working directory, and sees the base environment overlaid with the git
    store and then the shell store, so shell variables win on collision.
    Commands are executed from an argument vector, never through a shell.
    """

    def __init__(
        self,
        git_environment: GitEnvironment,
        shell_environment: ShellEnvironment,
        inherit_environment: bool = True,
        timeout: float | None = None,
    ) -> None:
        """Initialize process runner.

        Args:
            git_environment: Git-specific variables
            shell_environment: Shell/SSH-specific variables
            inherit_environment: Start from the current process environment
                instead of an empty one
            timeout: Seconds to wait for a command, None to wait forever
        """
        self.git_environment = git_environment
        self.shell_environment = shell_environment
        self.inherit_environment = inherit_environment
        self.timeout = timeout

    def build_env(self) -> dict[str, str]:
        """Merge the base environment with both stores."""
        env = os.environ.copy() if self.inherit_environment else {}
        env.update(self.git_environment.get_all())
        env.update(self.shell_environment.get_all())
        return env

    def execute(self, spec: CommandSpec, cwd: str | Path) -> CommandResult:
        """Run a command and collect its output.

        Args:
            spec: Command to run
            cwd: Working directory for the child process

        Returns:
            CommandResult for the finished process, whatever its exit code

        Raises:
            ProcessSpawnError: If the process could not be started
            CommandFailedError: If the command timed out
        """
        argv = spec.to_argv()
        command_line = spec.to_shell()
        logger.debug(f"Running: {command_line}", extra={"repository": str(cwd)})

        start_time = time.monotonic()
        try:
            proc = subprocess.Popen(
                argv,
                stdin=subprocess.PIPE,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                cwd=str(cwd),
                env=self.build_env(),
            )
        except OSError as e:
            raise ProcessSpawnError(
                f"Unable to execute command: {command_line}",
                command=command_line,
                details={"cwd": str(cwd), "error": str(e)},
            ) from e

        # Exiting the context closes all three pipes and reaps the child
        with proc:
            try:
                raw_stdout, raw_stderr = proc.communicate(timeout=self.timeout)
            except subprocess.TimeoutExpired:
                proc.kill()
                raw_stdout, raw_stderr = proc.communicate()
                logger.warning(f"Command timed out after {self.timeout}s: {command_line}")
                raise CommandFailedError(
                    f"Command timed out after {self.timeout}s: {command_line}",
                    command=command_line,
                    exit_code=-1,
                    stdout=_decode(raw_stdout),
                    stderr=_decode(raw_stderr),
                ) from None

        result = CommandResult(
            command=argv,
            exit_code=proc.returncode,
            stdout=_decode(raw_stdout),
            stderr=_decode(raw_stderr),
            duration_ms=int((time.monotonic() - start_time) * 1000),
        )
        self._log_execution(command_line, result)
        return result

    def run(self, spec: CommandSpec, cwd: str | Path) -> str:
        """Run a command and return its stdout.

        Raises:
            ProcessSpawnError: If the process could not be started
            CommandFailedError: If the command exits non-zero
        """
        result = self.execute(spec, cwd)
        if not result.success:
            raise CommandFailedError(
                result.output,
                command=spec.to_shell(),
                exit_code=result.exit_code,
                stdout=result.stdout,
                stderr=result.stderr,
            )
        return result.stdout

    def _log_execution(self, command_line: str, result: CommandResult) -> None:
        cmd_preview = command_line[:100]
        extra = {**result.to_dict(), "command": command_line}
        if result.success:
            logger.debug(f"Command OK: {cmd_preview} (exit=0, {result.duration_ms}ms)", extra=extra)
        else:
            logger.warning(f"Command FAILED: {cmd_preview} (exit={result.exit_code})", extra=extra)
