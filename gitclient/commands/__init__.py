"""gitclient CLI commands."""

from gitclient.commands.exec_cmd import exec_cmd
from gitclient.commands.repos import clone, find, init, list_cmd

__all__ = [
    "clone",
    "exec_cmd",
    "find",
    "init",
    "list_cmd",
]
