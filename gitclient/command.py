"""Git command line assembly."""

from __future__ import annotations

import shlex
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class CommandSpec:
    """A single git invocation.

    Options map a flag name to its value; a ``None`` value renders the
    flag on its own. Insertion order is preserved.
    """

    binary: str
    subcommand: str
    options: Mapping[str, str | None] = field(default_factory=dict)
    args: Sequence[str] = ()

    def to_argv(self) -> list[str]:
        """Build the argument vector handed to the process runner.

        Returns:
            ``[binary, subcommand, *options, *args]``
        """
        argv = [self.binary, self.subcommand]
        for name, value in self.options.items():
            argv.append(name)
            if value is not None:
                argv.append(str(value))
        argv.extend(str(arg) for arg in self.args)
        return argv

    def to_shell(self) -> str:
        """Build a shell-escaped command line.

        Option names are emitted verbatim, option values and positional
        arguments are quoted.
        """
        parts = [self.binary, self.subcommand]

        option_items = []
        for name, value in self.options.items():
            item = name
            if value is not None:
                item += " " + shlex.quote(str(value))
            option_items.append(item)
        if option_items:
            parts.append(" ".join(option_items))

        if self.args:
            parts.append(" ".join(shlex.quote(str(arg)) for arg in self.args))

        return " ".join(parts)

    def __str__(self) -> str:
        return self.to_shell()


def build_command(
    binary: str,
    subcommand: str,
    options: Mapping[str, str | None] | None = None,
    args: Sequence[str] | None = None,
) -> str:
    """Build a shell-escaped git command line.

    Example:
        >>> build_command("git", "log", {"--format": "%H %s", "--no-merges": None}, ["a b"])
        "git log --format '%H %s' --no-merges 'a b'"
    """
    return CommandSpec(binary, subcommand, dict(options or {}), tuple(args or ())).to_shell()
