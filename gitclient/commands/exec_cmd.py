"""gitclient exec command - run any git subcommand in a repository."""

from pathlib import Path

import click
from rich.console import Console

from gitclient.commands._utils import get_client
from gitclient.exceptions import CommandFailedError, GitClientError
from gitclient.logging import get_logger, set_log_context

console = Console(stderr=True)
logger = get_logger("commands.exec")


@click.command(
    "exec",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "--repo",
    "-C",
    "repo_path",
    type=click.Path(path_type=Path),
    default=".",
    help="Path inside the repository (default: current directory)",
)
@click.option("--show-command", is_flag=True, help="Print the command line before running it")
@click.argument("subcommand")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def exec_cmd(
    ctx: click.Context,
    repo_path: Path,
    show_command: bool,
    subcommand: str,
    args: tuple[str, ...],
) -> None:
    """Run git SUBCOMMAND with ARGS in the enclosing repository.

    Everything after SUBCOMMAND is passed to git unchanged.
    """
    client = get_client(ctx)
    try:
        repository = client.get_repository(repo_path)
        set_log_context(repository=repository.path)
        if show_command:
            console.print(f"[dim]$ {client.build_command(subcommand, args=list(args))}[/dim]")
        output = repository.run(subcommand, args=list(args))
    except CommandFailedError as e:
        click.echo(e.message, nl=not e.message.endswith("\n"), err=True)
        raise SystemExit(e.exit_code if e.exit_code > 0 else 1) from e
    except GitClientError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    click.echo(output, nl=False)
