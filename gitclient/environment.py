"""Whitelisted environment variable stores passed to git processes."""

from __future__ import annotations

import shlex
from collections.abc import Iterable, Iterator, Mapping

from gitclient.constants import GIT_ENVIRONMENT_VARIABLES, SHELL_ENVIRONMENT_VARIABLES
from gitclient.exceptions import IllegalVariableError


class Environment:
    """A set of environment variables restricted to a whitelist.

    Subclasses declare ``legal_variables``. Mutators return the store so
    calls can be chained::

        env.set("GIT_AUTHOR_NAME", "Ada").set("GIT_AUTHOR_EMAIL", "ada@example.com")
    """

    legal_variables: frozenset[str] = frozenset()

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        """Initialize the store.

        Args:
            variables: Optional initial variables, validated like set_all()

        Raises:
            IllegalVariableError: If any key is not whitelisted
        """
        self._variables: dict[str, str] = {}
        if variables:
            self.set_all(variables)

    def _check(self, key: str) -> None:
        if key not in self.legal_variables:
            raise IllegalVariableError(
                f"'{key}' is not a legal environment variable", variable=key
            )

    def set(self, key: str, value: str) -> Environment:
        """Set a single variable.

        Raises:
            IllegalVariableError: If key is not whitelisted
        """
        self._check(key)
        self._variables[key] = value
        return self

    def set_all(self, variables: Mapping[str, str]) -> Environment:
        """Set several variables at once.

        Every key is validated before anything is stored, so an illegal key
        leaves the store untouched.

        Raises:
            IllegalVariableError: On the first key that is not whitelisted
        """
        for key in variables:
            self._check(key)
        self._variables.update(variables)
        return self

    def get(self, key: str) -> str | None:
        """Return the value of a variable, or None if unset."""
        return self._variables.get(key)

    def get_all(self) -> dict[str, str]:
        """Return a copy of all variables."""
        return dict(self._variables)

    def clear(self, key: str) -> Environment:
        """Remove a variable if present."""
        self._variables.pop(key, None)
        return self

    def clear_all(self, keys: Iterable[str] | None = None) -> Environment:
        """Remove the given variables, or all of them when keys is None."""
        if keys is None:
            self._variables.clear()
        else:
            for key in keys:
                self.clear(key)
        return self

    def count(self) -> int:
        """Return the number of variables set."""
        return len(self._variables)

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, key: object) -> bool:
        return key in self._variables

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __str__(self) -> str:
        """Render as shell-escaped ``KEY=value`` tokens."""
        return " ".join(f"{key}={shlex.quote(value)}" for key, value in self._variables.items())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({sorted(self._variables)!r})"


class GitEnvironment(Environment):
    """Variables that configure git itself."""

    legal_variables = GIT_ENVIRONMENT_VARIABLES


class ShellEnvironment(Environment):
    """Variables for the shell and ssh processes git spawns."""

    legal_variables = SHELL_ENVIRONMENT_VARIABLES
